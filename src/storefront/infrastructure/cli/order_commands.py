"""CLI commands for checkout and the Order ledger."""

from __future__ import annotations

import click

from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import ShippingAddress
from storefront.infrastructure.bootstrap import Repositories
from storefront.infrastructure.cli.formatting import display_order, money


@click.command("place")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--coupon", "coupon_code", default=None, help="Coupon code to redeem.")
@click.option("--payment", "payment_method", default="card", show_default=True, help="Payment method.")
@click.option("--street", default="", help="Shipping street.")
@click.option("--city", default="", help="Shipping city.")
@click.option("--state", default="", help="Shipping state.")
@click.option("--zip", "zip_code", default="", help="Shipping postal code.")
@click.option("--country", default="", help="Shipping country.")
@click.pass_obj
def order_place(
    repos: Repositories,
    user_id: str,
    coupon_code: str | None,
    payment_method: str,
    street: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
) -> None:
    """Check out a user's cart."""
    handler = PlaceOrderHandler(
        cart_repo=repos.carts,
        product_repo=repos.products,
        coupon_repo=repos.coupons,
        order_repo=repos.orders,
    )
    address = ShippingAddress(street=street, city=city, state=state, zip=zip_code, country=country)

    try:
        dto = handler.handle(
            user_id=user_id,
            shipping_address=address,
            payment_method=payment_method,
            coupon_code=coupon_code,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
    if coupon_code and dto.coupon_code is None:
        click.echo(f"Note: coupon '{coupon_code}' was not applied.")


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.pass_obj
def order_list(repos: Repositories, user_id: str) -> None:
    """List a user's orders, newest first."""
    orders = ListOrdersHandler(order_repo=repos.orders).handle(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<34} {'Status':<10} {'Created':<26} {'Total':>10}")
    click.echo("-" * 83)
    for o in orders:
        click.echo(f"{o.id:<34} {o.status:<10} {o.created_at[:25]:<26} {money(o.total):>10}")
