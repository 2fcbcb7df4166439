"""FastAPI routes — cart, coupons and orders.

Handlers are plain ``def`` functions: the JSON stores do blocking file
I/O, so FastAPI runs each request in its threadpool.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from storefront.application.add_to_cart import AddCartLineHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.list_coupons import ListCouponsHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.remove_cart_line import RemoveCartLineHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_line import SetCartLineQuantityHandler
from storefront.application.validate_coupon import ValidateCouponHandler
from storefront.domain.model.value_objects import ShippingAddress
from storefront.infrastructure.api.auth import current_user_id
from storefront.infrastructure.api.schemas import (
    AddToCartRequest,
    CartResponse,
    CouponPreviewResponse,
    CouponResponse,
    MessageResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateCartLineRequest,
    ValidateCouponRequest,
)
from storefront.infrastructure.bootstrap import Repositories


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


def get_clock(request: Request):
    return request.app.state.clock


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
def show_cart(
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(get_repositories),
) -> CartResponse:
    dto = ShowCartHandler(repos.carts, repos.products).handle(user_id)
    return CartResponse.from_dto(dto)


@cart_router.post("", response_model=CartResponse)
def add_cart_line(
    body: AddToCartRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(get_repositories),
) -> CartResponse:
    dto = AddCartLineHandler(repos.carts, repos.products).handle(
        user_id=user_id,
        product_id=body.product_id,
        quantity=body.quantity,
        purchase_option=body.purchase_option,
    )
    return CartResponse.from_dto(dto)


@cart_router.put("/{product_id}", response_model=CartResponse)
def update_cart_line(
    product_id: str,
    body: UpdateCartLineRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(get_repositories),
) -> CartResponse:
    dto = SetCartLineQuantityHandler(repos.carts, repos.products).handle(
        user_id=user_id,
        product_id=product_id,
        quantity=body.quantity,
        purchase_option=body.purchase_option,
    )
    return CartResponse.from_dto(dto)


@cart_router.delete("/{product_id}", response_model=CartResponse)
def remove_cart_line(
    product_id: str,
    purchase_option: str | None = Query(default=None, alias="purchaseOption"),
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(get_repositories),
) -> CartResponse:
    dto = RemoveCartLineHandler(repos.carts, repos.products).handle(
        user_id=user_id,
        product_id=product_id,
        purchase_option=purchase_option,
    )
    return CartResponse.from_dto(dto)


@cart_router.delete("", response_model=MessageResponse)
def clear_cart(
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(get_repositories),
) -> MessageResponse:
    ClearCartHandler(repos.carts).handle(user_id)
    return MessageResponse(message="Cart cleared")


# ---------------------------------------------------------------------------
# Coupon Router
# ---------------------------------------------------------------------------
coupon_router = APIRouter(prefix="/coupons", tags=["coupons"])


@coupon_router.get("", response_model=list[CouponResponse])
def list_coupons(
    repos: Repositories = Depends(get_repositories),
) -> list[CouponResponse]:
    return [CouponResponse.from_dto(c) for c in ListCouponsHandler(repos.coupons).handle()]


@coupon_router.post("/validate", response_model=CouponPreviewResponse)
def validate_coupon(
    body: ValidateCouponRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(get_repositories),
    clock=Depends(get_clock),
) -> CouponPreviewResponse:
    dto = ValidateCouponHandler(repos.coupons, clock=clock).handle(
        code=body.code, total=str(body.total)
    )
    return CouponPreviewResponse.from_dto(dto)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
def place_order(
    body: PlaceOrderRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(get_repositories),
    clock=Depends(get_clock),
) -> OrderResponse:
    handler = PlaceOrderHandler(
        cart_repo=repos.carts,
        product_repo=repos.products,
        coupon_repo=repos.coupons,
        order_repo=repos.orders,
        clock=clock,
    )
    address = (
        ShippingAddress.from_dict(body.shipping_address.model_dump())
        if body.shipping_address
        else None
    )
    dto = handler.handle(
        user_id=user_id,
        shipping_address=address,
        payment_method=body.payment_method,
        coupon_code=body.coupon_code,
    )
    return OrderResponse.from_dto(dto)


@order_router.get("", response_model=list[OrderResponse])
def list_orders(
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(get_repositories),
) -> list[OrderResponse]:
    return [OrderResponse.from_dto(o) for o in ListOrdersHandler(repos.orders).handle(user_id)]
