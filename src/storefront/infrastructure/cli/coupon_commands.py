"""CLI commands for the Coupon ledger."""

from __future__ import annotations

from datetime import datetime

import click

from storefront.application.add_coupon import AddCouponHandler
from storefront.application.deactivate_coupon import DeactivateCouponHandler
from storefront.application.list_coupons import ListCouponsHandler
from storefront.application.validate_coupon import ValidateCouponHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Repositories
from storefront.infrastructure.cli.formatting import money


@click.command("add")
@click.option("--code", required=True, help="Coupon code (stored upper-case).")
@click.option("--type", "discount_kind", required=True, type=click.Choice(["percentage", "fixed"]), help="Discount type.")
@click.option("--value", "discount_value", required=True, help="Percent (0-100) or fixed amount.")
@click.option("--valid-from", required=True, type=click.DateTime(), help="Start of validity (UTC).")
@click.option("--valid-to", required=True, type=click.DateTime(), help="End of validity (UTC).")
@click.option("--min-purchase", default="0", show_default=True, help="Minimum subtotal.")
@click.option("--max-discount", default=None, help="Cap for percentage discounts.")
@click.option("--usage-limit", default=None, type=int, help="Maximum number of redemptions.")
@click.pass_obj
def coupon_add(
    repos: Repositories,
    code: str,
    discount_kind: str,
    discount_value: str,
    valid_from: datetime,
    valid_to: datetime,
    min_purchase: str,
    max_discount: str | None,
    usage_limit: int | None,
) -> None:
    """Create a coupon."""
    handler = AddCouponHandler(coupon_repo=repos.coupons)

    try:
        dto = handler.handle(
            code=code,
            discount_kind=discount_kind,
            discount_value=discount_value,
            valid_from=valid_from,
            valid_to=valid_to,
            min_purchase=min_purchase,
            max_discount=max_discount,
            usage_limit=usage_limit,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Coupon {dto.code} created ({dto.type} {dto.discount})")


@click.command("list")
@click.pass_obj
def coupon_list(repos: Repositories) -> None:
    """List active coupons."""
    coupons = ListCouponsHandler(coupon_repo=repos.coupons).handle()

    if not coupons:
        click.echo("No active coupons.")
        return

    click.echo(f"{'Code':<12} {'Type':<11} {'Value':>8} {'Min':>10} {'Used':>10}")
    click.echo("-" * 55)
    for c in coupons:
        used = f"{c.used_count}/{c.usage_limit}" if c.usage_limit is not None else str(c.used_count)
        click.echo(f"{c.code:<12} {c.type:<11} {c.discount:>8} {money(c.min_purchase):>10} {used:>10}")


@click.command("validate")
@click.option("--code", required=True, help="Coupon code.")
@click.option("--total", required=True, help="Subtotal to price against.")
@click.pass_obj
def coupon_validate(repos: Repositories, code: str, total: str) -> None:
    """Preview the discount a coupon would give (consumes nothing)."""
    handler = ValidateCouponHandler(coupon_repo=repos.coupons)

    try:
        dto = handler.handle(code=code, total=total)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Coupon {dto.coupon.code} valid — discount {money(dto.discount)}")



@click.command("deactivate")
@click.option("--code", required=True, help="Coupon code.")
@click.pass_obj
def coupon_deactivate(repos: Repositories, code: str) -> None:
    """Switch a coupon off; its usage history is kept."""
    try:
        dto = DeactivateCouponHandler(coupon_repo=repos.coupons).handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Coupon {dto.code} deactivated after {dto.used_count} use(s)")
