"""Coupon aggregate — a promotional code with a shared usage allowance.

The coupon knows how to judge itself against a subtotal and how to price
its discount.  It does NOT increment its own ``used_count`` during
checkout: that must happen as one conditional update inside the
repository, otherwise two concurrent checkouts can both pass the limit
check and overrun it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import (
    CouponExpired,
    CouponInactive,
    MinPurchaseNotMet,
    UsageLimitExceeded,
    ValidationError,
)
from storefront.domain.model.value_objects import Money


class DiscountKind(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


def normalize_code(code: str) -> str:
    return code.strip().upper()


@dataclass
class Coupon:
    """Aggregate root for a coupon.

    Invariants:
    - ``used_count`` never exceeds ``usage_limit`` when a limit is set
    - ``valid_from <= valid_to``
    """

    code: str
    discount_kind: DiscountKind
    discount_value: Decimal
    valid_from: datetime
    valid_to: datetime
    min_purchase: Money = field(default_factory=Money.zero)
    max_discount: Money | None = None
    usage_limit: int | None = None
    used_count: int = 0
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW coupons only) ----------------------------------

    @staticmethod
    def create(
        code: str,
        discount_kind: DiscountKind,
        discount_value: str | Decimal,
        valid_from: datetime,
        valid_to: datetime,
        min_purchase: Money | None = None,
        max_discount: Money | None = None,
        usage_limit: int | None = None,
    ) -> Coupon:
        """Create a new coupon, enforcing all invariants."""
        if not code or not code.strip():
            raise ValidationError("Coupon code is required")

        value = Money.of(discount_value).amount
        if discount_kind is DiscountKind.PERCENTAGE and value > Decimal("100"):
            raise ValidationError("Percentage discount cannot exceed 100")

        valid_from = _as_aware(valid_from)
        valid_to = _as_aware(valid_to)
        if valid_from > valid_to:
            raise ValidationError("Coupon validity window ends before it starts")

        if usage_limit is not None and usage_limit < 0:
            raise ValidationError("Usage limit cannot be negative")

        return Coupon(
            code=normalize_code(code),
            discount_kind=discount_kind,
            discount_value=value,
            valid_from=valid_from,
            valid_to=valid_to,
            min_purchase=min_purchase or Money.zero(),
            max_discount=max_discount,
            usage_limit=usage_limit,
        )

    # --- Rules ----------------------------------------------------------------

    def check(self, subtotal: Money, now: datetime) -> None:
        """Raise the first rule the coupon fails for ``subtotal`` at ``now``.

        Order matters: inactive, expired, minimum purchase, usage limit.
        Lookup failure (``CodeNotFound``) is the caller's concern.
        """
        if not self.active:
            raise CouponInactive(f"Coupon {self.code} is not active")

        if now < self.valid_from or now > self.valid_to:
            raise CouponExpired(f"Coupon {self.code} is not valid for current date")

        if subtotal < self.min_purchase:
            raise MinPurchaseNotMet(
                f"Minimum purchase of {self.min_purchase} required"
            )

        if self.is_exhausted:
            raise UsageLimitExceeded(f"Coupon {self.code} usage limit exceeded")

    def discount_for(self, subtotal: Money) -> Money:
        """Price the discount for ``subtotal``; never more than the subtotal.

        Rounds to cents first, then caps at the subtotal.
        """
        if self.discount_kind is DiscountKind.PERCENTAGE:
            discount = subtotal.percent(self.discount_value)
            if self.max_discount is not None and discount > self.max_discount:
                discount = self.max_discount
        else:
            discount = Money(self.discount_value, subtotal.currency)

        discount = discount.round2()
        if discount > subtotal:
            discount = subtotal
        return discount

    @property
    def is_exhausted(self) -> bool:
        return self.usage_limit is not None and self.used_count >= self.usage_limit

    def deactivate(self) -> None:
        self.active = False


def _as_aware(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value
