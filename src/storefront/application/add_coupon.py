"""Application service: Add Coupon use case (administrative seeding)."""

from __future__ import annotations

from datetime import datetime

from storefront.application.dto import CouponDTO, coupon_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.coupon import Coupon, DiscountKind, normalize_code
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.coupon_repository import CouponRepository


class AddCouponHandler:

    def __init__(self, coupon_repo: CouponRepository) -> None:
        self._coupon_repo = coupon_repo

    def handle(
        self,
        code: str,
        discount_kind: str,
        discount_value: str,
        valid_from: datetime,
        valid_to: datetime,
        min_purchase: str = "0",
        max_discount: str | None = None,
        usage_limit: int | None = None,
    ) -> CouponDTO:
        if self._coupon_repo.get_by_code(normalize_code(code)) is not None:
            raise ValidationError(f"Coupon '{normalize_code(code)}' already exists")

        try:
            kind = DiscountKind(discount_kind.lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown discount type: {discount_kind!r}") from exc

        coupon = Coupon.create(
            code=code,
            discount_kind=kind,
            discount_value=discount_value,
            valid_from=valid_from,
            valid_to=valid_to,
            min_purchase=Money.of(min_purchase),
            max_discount=Money.of(max_discount) if max_discount is not None else None,
            usage_limit=usage_limit,
        )
        self._coupon_repo.save(coupon)
        return coupon_to_dto(coupon)
