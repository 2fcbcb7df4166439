"""Domain service: coupon preview and redemption.

Preview (``validate``) is advisory and never mutates.  Redemption
(``try_redeem``) re-runs every rule and then asks the ledger for an atomic
conditional increment, because the active flag, the clock and the usage
count may all have moved since the preview.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

import structlog

from storefront.domain.exceptions import CodeNotFound, UsageLimitExceeded
from storefront.domain.model.coupon import Coupon, normalize_code
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.coupon_repository import CouponRepository

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CouponQuote:
    coupon: Coupon
    discount: Money


class CouponRedemptionService:

    def __init__(self, coupon_repo: CouponRepository, clock: Clock = utc_now) -> None:
        self._coupon_repo = coupon_repo
        self._clock = clock

    def validate(self, code: str, subtotal: Money) -> CouponQuote:
        """Check ``code`` against ``subtotal`` and price the discount.

        Raises the first failing ``CouponRejected`` subclass, in order:
        CodeNotFound, CouponInactive, CouponExpired, MinPurchaseNotMet,
        UsageLimitExceeded.
        """
        normalized = normalize_code(code)
        coupon = self._coupon_repo.get_by_code(normalized)
        if coupon is None:
            raise CodeNotFound(f"Invalid coupon code: {normalized}")

        coupon.check(subtotal, self._clock())
        return CouponQuote(coupon=coupon, discount=coupon.discount_for(subtotal))

    def try_redeem(self, code: str, subtotal: Money) -> CouponQuote:
        """Validate again, then consume one use of the coupon atomically.

        Losing the race for the last use is reported as
        ``UsageLimitExceeded``, exactly like a coupon that was already
        exhausted.
        """
        quote = self.validate(code, subtotal)

        if not self._coupon_repo.increment_usage_if_available(quote.coupon.code):
            logger.warning(
                "Coupon redemption lost the race for the last use",
                code=quote.coupon.code,
            )
            raise UsageLimitExceeded(
                f"Coupon {quote.coupon.code} usage limit exceeded"
            )

        logger.info(
            "Coupon redeemed",
            code=quote.coupon.code,
            discount=str(quote.discount.amount),
        )
        return quote

    def release(self, code: str) -> None:
        """Hand back a use taken by ``try_redeem`` whose order never landed."""
        if self._coupon_repo.release_usage(code):
            logger.warning("Coupon redemption released", code=normalize_code(code))
        else:
            logger.error("Coupon redemption could not be released", code=normalize_code(code))
