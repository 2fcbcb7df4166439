"""CLI commands for the per-user Cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddCartLineHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_cart_line import RemoveCartLineHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_line import SetCartLineQuantityHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Repositories
from storefront.infrastructure.cli.formatting import display_cart

_user_option = click.option("--user", "user_id", required=True, help="User ID.")


@click.command("add")
@_user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.option("--option", "purchase_option", default="standard", show_default=True, help="Purchase option.")
@click.pass_obj
def cart_add(repos: Repositories, user_id: str, product_id: str, quantity: int, purchase_option: str) -> None:
    """Add a product to a user's cart."""
    handler = AddCartLineHandler(cart_repo=repos.carts, product_repo=repos.products)

    try:
        dto = handler.handle(user_id, product_id, quantity, purchase_option)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("update")
@_user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes the line).")
@click.option("--option", "purchase_option", default=None, help="Purchase option (default: the product's first line).")
@click.pass_obj
def cart_update(repos: Repositories, user_id: str, product_id: str, quantity: int, purchase_option: str | None) -> None:
    """Set the quantity of a cart line."""
    handler = SetCartLineQuantityHandler(cart_repo=repos.carts, product_repo=repos.products)

    try:
        dto = handler.handle(user_id, product_id, quantity, purchase_option)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("remove")
@_user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--option", "purchase_option", default=None, help="Only remove this purchase option.")
@click.pass_obj
def cart_remove(repos: Repositories, user_id: str, product_id: str, purchase_option: str | None) -> None:
    """Remove a product from a user's cart."""
    handler = RemoveCartLineHandler(cart_repo=repos.carts, product_repo=repos.products)

    try:
        dto = handler.handle(user_id, product_id, purchase_option)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("clear")
@_user_option
@click.pass_obj
def cart_clear(repos: Repositories, user_id: str) -> None:
    """Empty a user's cart."""
    ClearCartHandler(cart_repo=repos.carts).handle(user_id)
    click.echo("Cart cleared")


@click.command("show")
@_user_option
@click.pass_obj
def cart_show(repos: Repositories, user_id: str) -> None:
    """Show a user's cart priced at current catalog prices."""
    display_cart(ShowCartHandler(cart_repo=repos.carts, product_repo=repos.products).handle(user_id))
