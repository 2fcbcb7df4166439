"""Shared table formatting for CLI output."""

from __future__ import annotations

from decimal import Decimal

import click

from storefront.application.dto import CartDTO, OrderDTO


def money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<20} {'Option':<12} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.purchase_option:<12} {item.quantity:>5} "
            f"{money(item.unit_price):>10} {money(item.line_total):>10}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Subtotal':<40} {money(dto.subtotal):>20}")


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Option':<12} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.purchase_option:<12} {item.quantity:>5} "
            f"{money(item.unit_price):>10} {money(item.line_total):>10}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Subtotal':<40} {money(dto.subtotal):>20}")
    if dto.coupon_code:
        click.echo(f"  {'Discount (' + dto.coupon_code + ')':<40} {'-' + money(dto.discount):>20}")
    click.echo(f"  {'Order Total':<40} {money(dto.total):>20}")
