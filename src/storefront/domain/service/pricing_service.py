"""Domain service: price a materialized cart into order amounts.

Two-step approach:
  Step 1 — snapshot: re-read every product and freeze its name and
           price into an ``OrderLineSnapshot``.  A product that vanished
           since the cart was materialized aborts pricing.
  Step 2 — total: sum the lines, redeem the coupon if one was given, and
           derive the total.  A coupon that fails any rule (or loses the
           redemption race) is dropped and the order is priced without a
           discount.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from storefront.domain.exceptions import CouponRejected, ProductUnavailable
from storefront.domain.model.order import OrderLineSnapshot, subtotal_of
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_materializer import MaterializedLine
from storefront.domain.service.coupon_redemption_service import (
    CouponRedemptionService,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PriceQuote:
    lines: list[OrderLineSnapshot]
    subtotal: Money
    discount: Money
    total: Money
    coupon_code: str | None = None


class PricingEngine:

    def __init__(
        self,
        product_repo: ProductRepository,
        redemption_service: CouponRedemptionService,
    ) -> None:
        self._product_repo = product_repo
        self._redemption = redemption_service

    def snapshot(self, materialized: list[MaterializedLine]) -> list[OrderLineSnapshot]:
        snapshots: list[OrderLineSnapshot] = []
        for item in materialized:
            product = self._product_repo.get_by_id(item.line.product_id)
            if product is None:
                raise ProductUnavailable(
                    f"Product {item.line.product_id} is no longer available"
                )
            snapshots.append(
                OrderLineSnapshot(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=item.line.quantity,
                    unit_price=product.price,  # <-- price snapshot
                    purchase_option=item.line.purchase_option,
                )
            )
        return snapshots

    def quote(
        self,
        lines: list[OrderLineSnapshot],
        coupon_code: str | None = None,
    ) -> PriceQuote:
        subtotal = subtotal_of(lines)
        discount = Money.zero()
        applied_code: str | None = None

        if coupon_code:
            try:
                redemption = self._redemption.try_redeem(coupon_code, subtotal)
            except CouponRejected as exc:
                logger.info(
                    "Coupon not applied at checkout",
                    code=coupon_code,
                    reason=type(exc).__name__,
                    detail=str(exc),
                )
            else:
                discount = redemption.discount
                applied_code = redemption.coupon.code

        return PriceQuote(
            lines=lines,
            subtotal=subtotal,
            discount=discount,
            total=(subtotal - discount).round2(),
            coupon_code=applied_code,
        )
