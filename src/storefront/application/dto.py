"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI / HTTP layers and the application layer
without exposing domain internals to the outside world.  Amounts are
Decimals rounded to cents; formatting is the caller's concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.coupon import Coupon
from storefront.domain.model.order import Order
from storefront.domain.service.cart_materializer import MaterializedLine


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    purchase_option: str
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartLineDTO]
    subtotal: Decimal


@dataclass(frozen=True)
class CouponDTO:
    code: str
    type: str
    discount: Decimal
    min_purchase: Decimal
    max_discount: Decimal | None
    valid_from: str
    valid_to: str
    usage_limit: int | None
    used_count: int
    active: bool


@dataclass(frozen=True)
class CouponPreviewDTO:
    """Output: advisory discount for a code; nothing has been consumed."""

    valid: bool
    discount: Decimal
    coupon: CouponDTO


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    purchase_option: str
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    user_id: str
    status: str
    items: list[OrderLineDTO]
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    coupon_code: str | None
    shipping_address: dict[str, str]
    payment_method: str
    created_at: str


# --- Mapping -----------------------------------------------------------------


def cart_to_dto(user_id: str, materialized: list[MaterializedLine]) -> CartDTO:
    items = [
        CartLineDTO(
            product_id=m.product.id,
            product_name=m.product.name,
            quantity=m.line.quantity.value,
            purchase_option=m.line.purchase_option.value,
            unit_price=m.product.price.amount,
            line_total=(m.product.price * m.line.quantity.value).round2().amount,
        )
        for m in materialized
    ]
    subtotal = sum((item.line_total for item in items), Decimal("0.00"))
    return CartDTO(user_id=user_id, items=items, subtotal=subtotal)


def coupon_to_dto(coupon: Coupon) -> CouponDTO:
    return CouponDTO(
        code=coupon.code,
        type=coupon.discount_kind.value,
        discount=coupon.discount_value,
        min_purchase=coupon.min_purchase.amount,
        max_discount=coupon.max_discount.amount if coupon.max_discount else None,
        valid_from=coupon.valid_from.isoformat(),
        valid_to=coupon.valid_to.isoformat(),
        usage_limit=coupon.usage_limit,
        used_count=coupon.used_count,
        active=coupon.active,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=line.unit_price.amount,
                purchase_option=line.purchase_option.value,
                line_total=line.line_total.amount,
            )
            for line in order.lines
        ],
        subtotal=order.subtotal.amount,
        discount=order.discount.amount,
        total=order.total.amount,
        coupon_code=order.coupon_code,
        shipping_address=order.shipping_address.to_dict(),
        payment_method=order.payment_method,
        created_at=order.created_at.isoformat(),
    )
