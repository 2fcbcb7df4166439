"""CLI commands for the Product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Repositories


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--option", "purchase_options", multiple=True, help="Allowed purchase option (repeatable).")
@click.option("--category", default="", help="Catalog category.")
@click.option("--brand", default="", help="Brand.")
@click.pass_obj
def product_add(
    repos: Repositories,
    name: str,
    price: str,
    purchase_options: tuple[str, ...],
    category: str,
    brand: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=repos.products)

    try:
        product = handler.handle(
            name=name,
            price=price,
            purchase_options=list(purchase_options) or None,
            category=category,
            brand=brand,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(repos: Repositories) -> None:
    """List all products in the catalog."""
    products = repos.products.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  Options")
    click.echo("-" * 60)
    for p in products:
        options = ",".join(sorted(o.value for o in p.purchase_options))
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}  {options}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--option", "purchase_options", multiple=True, help="Replacement purchase option (repeatable).")
@click.pass_obj
def product_update(
    repos: Repositories,
    product_id: str,
    price: str | None,
    purchase_options: tuple[str, ...],
) -> None:
    """Reprice a product and/or replace its purchase options."""
    handler = UpdateProductHandler(product_repo=repos.products)

    try:
        product = handler.handle(
            product_id=product_id,
            new_price=price,
            purchase_options=list(purchase_options) or None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    options = ",".join(sorted(o.value for o in product.purchase_options))
    click.echo(f"Product #{product.id} '{product.name}' now {product.price} [{options}]")
