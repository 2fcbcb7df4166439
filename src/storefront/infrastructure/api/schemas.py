"""Pydantic request/response schemas for the HTTP API.

These are external contracts (anti-corruption layer) — separate from the
application DTOs.  Field names are camelCase on the wire.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.application.dto import (
    CartDTO,
    CouponDTO,
    CouponPreviewDTO,
    OrderDTO,
)


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(ApiModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None


class OrderItemSchema(ApiModel):
    product_id: str
    quantity: int = 1
    purchase_option: str | None = None


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(ApiModel):
    product_id: str = Field(min_length=1)
    quantity: int = 1
    purchase_option: str = "standard"


class UpdateCartLineRequest(ApiModel):
    quantity: int
    purchase_option: str | None = None


class ValidateCouponRequest(ApiModel):
    code: str = Field(min_length=1)
    total: Decimal = Field(ge=0)


class PlaceOrderRequest(ApiModel):
    items: list[OrderItemSchema] | None = Field(
        default=None,
        description=(
            "Accepted for client compatibility and ignored: the order is "
            "built from the server-side cart."
        ),
    )
    coupon_code: str | None = None
    shipping_address: AddressSchema | None = None
    payment_method: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartLineResponse(ApiModel):
    product_id: str
    product_name: str
    quantity: int
    purchase_option: str
    unit_price: float
    line_total: float


class CartResponse(ApiModel):
    user_id: str
    items: list[CartLineResponse]
    subtotal: float

    @staticmethod
    def from_dto(dto: CartDTO) -> CartResponse:
        return CartResponse(
            user_id=dto.user_id,
            items=[
                CartLineResponse(
                    product_id=i.product_id,
                    product_name=i.product_name,
                    quantity=i.quantity,
                    purchase_option=i.purchase_option,
                    unit_price=float(i.unit_price),
                    line_total=float(i.line_total),
                )
                for i in dto.items
            ],
            subtotal=float(dto.subtotal),
        )


class CouponResponse(ApiModel):
    code: str
    type: str
    discount: float
    min_purchase: float
    max_discount: float | None = None
    valid_from: str
    valid_to: str
    usage_limit: int | None = None
    used_count: int
    active: bool

    @staticmethod
    def from_dto(dto: CouponDTO) -> CouponResponse:
        return CouponResponse(
            code=dto.code,
            type=dto.type,
            discount=float(dto.discount),
            min_purchase=float(dto.min_purchase),
            max_discount=float(dto.max_discount) if dto.max_discount is not None else None,
            valid_from=dto.valid_from,
            valid_to=dto.valid_to,
            usage_limit=dto.usage_limit,
            used_count=dto.used_count,
            active=dto.active,
        )


class CouponSummary(ApiModel):
    code: str
    type: str
    discount: float


class CouponPreviewResponse(ApiModel):
    valid: bool
    discount: float
    coupon: CouponSummary

    @staticmethod
    def from_dto(dto: CouponPreviewDTO) -> CouponPreviewResponse:
        return CouponPreviewResponse(
            valid=dto.valid,
            discount=float(dto.discount),
            coupon=CouponSummary(
                code=dto.coupon.code,
                type=dto.coupon.type,
                discount=float(dto.coupon.discount),
            ),
        )


class OrderLineResponse(ApiModel):
    product_id: str
    product_name: str
    quantity: int
    price: float
    purchase_option: str
    total: float


class OrderResponse(ApiModel):
    id: str
    user_id: str
    items: list[OrderLineResponse]
    subtotal: float
    discount: float
    total: float
    coupon_code: str | None = None
    shipping_address: dict[str, str]
    payment_method: str
    status: str
    created_at: str

    @staticmethod
    def from_dto(dto: OrderDTO) -> OrderResponse:
        return OrderResponse(
            id=dto.id,
            user_id=dto.user_id,
            items=[
                OrderLineResponse(
                    product_id=i.product_id,
                    product_name=i.product_name,
                    quantity=i.quantity,
                    price=float(i.unit_price),
                    purchase_option=i.purchase_option,
                    total=float(i.line_total),
                )
                for i in dto.items
            ],
            subtotal=float(dto.subtotal),
            discount=float(dto.discount),
            total=float(dto.total),
            coupon_code=dto.coupon_code,
            shipping_address=dto.shipping_address,
            payment_method=dto.payment_method,
            status=dto.status,
            created_at=dto.created_at,
        )


class MessageResponse(BaseModel):
    message: str
