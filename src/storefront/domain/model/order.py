"""Order aggregate — an immutable ledger entry produced by checkout.

Line items are owned snapshots of catalog data, never references, so a
later price change in the catalog cannot alter a historical order.
"""

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    Money,
    PurchaseOption,
    Quantity,
    ShippingAddress,
)


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderLineSnapshot:
    """Captures a product's name and price at order-creation time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    purchase_option: PurchaseOption = PurchaseOption.STANDARD

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


DEFAULT_PAYMENT_METHOD = "card"


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders — it derives the
    amounts and enforces the invariants.  The ``__init__`` is left plain so
    the repository can reconstitute persisted orders without re-pricing.

    Invariants:
    - ``subtotal`` is the sum of the line totals
    - ``total == round2(subtotal - discount)``
    - ``0 <= discount <= subtotal``
    """

    id: str
    user_id: str
    lines: tuple[OrderLineSnapshot, ...]
    subtotal: Money
    discount: Money
    total: Money
    coupon_code: str | None = None
    shipping_address: ShippingAddress = field(default_factory=ShippingAddress)
    payment_method: str = DEFAULT_PAYMENT_METHOD
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        lines: list[OrderLineSnapshot],
        discount: Money | None = None,
        coupon_code: str | None = None,
        shipping_address: ShippingAddress | None = None,
        payment_method: str | None = None,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not user_id:
            raise ValidationError("User ID is required")

        if not lines:
            raise ValidationError("Order must contain at least one line")

        subtotal = subtotal_of(lines)
        discount = discount or Money.zero()
        if discount > subtotal:
            raise ValidationError(
                f"Discount {discount} exceeds order subtotal {subtotal}"
            )

        return Order(
            id=uuid.uuid4().hex,
            user_id=user_id,
            lines=tuple(lines),
            subtotal=subtotal,
            discount=discount,
            total=(subtotal - discount).round2(),
            coupon_code=coupon_code,
            shipping_address=shipping_address or ShippingAddress(),
            payment_method=payment_method or DEFAULT_PAYMENT_METHOD,
        )

    # --- State transitions ----------------------------------------------------

    def with_status(self, status: OrderStatus) -> Order:
        """Return a copy carrying a new status; nothing else may change."""
        return dataclasses.replace(self, status=status)


def subtotal_of(lines: list[OrderLineSnapshot]) -> Money:
    result = Money.zero()
    for line in lines:
        result = result + line.line_total
    return result
