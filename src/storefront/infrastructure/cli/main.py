from pathlib import Path

import click

from storefront.infrastructure.bootstrap import repositories
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.coupon_commands import (
    coupon_add,
    coupon_deactivate,
    coupon_list,
    coupon_validate,
)
from storefront.infrastructure.cli.order_commands import order_list, order_place
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON stores (overrides STOREFRONT_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """Storefront — cart, coupons and checkout"""
    settings = Settings(data_dir=data_dir) if data_dir else Settings()
    configure_logging(settings.log_level, json=settings.log_json)
    ctx.obj = repositories(settings)
    ctx.meta["settings"] = settings


@cli.group()
def cart() -> None:
    """Manage carts."""


@cli.group()
def coupon() -> None:
    """Manage coupons."""


@cli.group()
def order() -> None:
    """Place and list orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command()
@click.pass_context
def serve(ctx: click.Context) -> None:
    """Run the HTTP API."""
    import uvicorn

    from storefront.infrastructure.api.app import create_app

    settings = ctx.meta["settings"]
    app = create_app(repos=ctx.obj, settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
coupon.add_command(coupon_add)
coupon.add_command(coupon_deactivate)
coupon.add_command(coupon_list)
coupon.add_command(coupon_validate)
order.add_command(order_list)
order.add_command(order_place)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
