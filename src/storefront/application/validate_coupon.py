"""Application service: Preview Coupon use case (query).

Purely advisory.  Nothing is consumed; checkout re-validates the code
before redeeming it.
"""

from __future__ import annotations

from storefront.application.dto import CouponPreviewDTO, coupon_to_dto
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.coupon_repository import CouponRepository
from storefront.domain.service.coupon_redemption_service import (
    Clock,
    CouponRedemptionService,
    utc_now,
)


class ValidateCouponHandler:

    def __init__(self, coupon_repo: CouponRepository, clock: Clock = utc_now) -> None:
        self._service = CouponRedemptionService(coupon_repo, clock=clock)

    def handle(self, code: str, total: str) -> CouponPreviewDTO:
        """Price ``code`` against ``total``; raises the failing rule."""
        quote = self._service.validate(code, Money.of(total))
        return CouponPreviewDTO(
            valid=True,
            discount=quote.discount.amount,
            coupon=coupon_to_dto(quote.coupon),
        )
