"""Application service: List Active Coupons use case (query)."""

from __future__ import annotations

from storefront.application.dto import CouponDTO, coupon_to_dto
from storefront.domain.repository.coupon_repository import CouponRepository


class ListCouponsHandler:

    def __init__(self, coupon_repo: CouponRepository) -> None:
        self._coupon_repo = coupon_repo

    def handle(self) -> list[CouponDTO]:
        return [coupon_to_dto(c) for c in self._coupon_repo.list_active()]
