"""Application service: Place Order use case.

Orchestrates the flow between the cart, the catalog, the coupon ledger
and the order ledger.  This is the only place that coordinates all four.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EmptyCart
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import ShippingAddress
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.coupon_repository import CouponRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_materializer import CartMaterializer
from storefront.domain.service.coupon_redemption_service import (
    Clock,
    CouponRedemptionService,
    utc_now,
)
from storefront.domain.service.pricing_service import PricingEngine

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        coupon_repo: CouponRepository,
        order_repo: OrderRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._redemption = CouponRedemptionService(coupon_repo, clock=clock)
        self._pricing = PricingEngine(product_repo, self._redemption)

    def handle(
        self,
        user_id: str,
        shipping_address: ShippingAddress | None = None,
        payment_method: str | None = None,
        coupon_code: str | None = None,
    ) -> OrderDTO:
        """Turn the user's cart into a pending order.

        Steps:
        1. Materialize the cart (fail with EmptyCart if nothing is left).
        2. Snapshot every line at its *current* catalog price.
        3. Price the order, redeeming the coupon if it still qualifies.
           A rejected coupon only removes the discount.
        4. Append the order.  If that fails, the coupon use taken in step 3
           is handed back before the error propagates.
        5. Clear the cart.  Clearing is best-effort:
           once the order is stored the checkout has succeeded.
        """
        cart = self._cart_repo.get(user_id)
        materialized = CartMaterializer(self._product_repo).materialize(cart)
        if not materialized:
            raise EmptyCart("Cannot place an order with an empty cart")

        lines = self._pricing.snapshot(materialized)
        quote = self._pricing.quote(lines, coupon_code)

        try:
            order = Order.create(
                user_id=user_id,
                lines=quote.lines,
                discount=quote.discount,
                coupon_code=quote.coupon_code,
                shipping_address=shipping_address,
                payment_method=payment_method,
            )
            self._order_repo.add(order)
        except Exception:
            if quote.coupon_code:
                self._redemption.release(quote.coupon_code)
            raise

        logger.info(
            "Order placed",
            order_id=order.id,
            user_id=user_id,
            subtotal=str(order.subtotal.amount),
            discount=str(order.discount.amount),
            total=str(order.total.amount),
            coupon_code=order.coupon_code,
        )

        try:
            self._cart_repo.clear(user_id)
        except Exception:
            logger.warning(
                "Cart clear failed after checkout", order_id=order.id, user_id=user_id, exc_info=True
            )

        return order_to_dto(order)
