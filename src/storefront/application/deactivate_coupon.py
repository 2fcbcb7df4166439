"""Application service: Deactivate Coupon use case.

A deactivated code stays in the ledger (its usage history is kept) but
fails every later preview and redemption with ``CouponInactive``.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CouponDTO, coupon_to_dto
from storefront.domain.exceptions import CodeNotFound
from storefront.domain.model.coupon import normalize_code
from storefront.domain.repository.coupon_repository import CouponRepository

logger = structlog.get_logger(__name__)


class DeactivateCouponHandler:

    def __init__(self, coupon_repo: CouponRepository) -> None:
        self._coupon_repo = coupon_repo

    def handle(self, code: str) -> CouponDTO:
        normalized = normalize_code(code)
        coupon = self._coupon_repo.update(normalized, lambda c: c.deactivate())
        if coupon is None:
            raise CodeNotFound(f"Invalid coupon code: {normalized}")

        logger.info("Coupon deactivated", code=coupon.code, used_count=coupon.used_count)
        return coupon_to_dto(coupon)
