"""Application service: Set Cart Line Quantity use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import PurchaseOption
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_materializer import CartMaterializer

logger = structlog.get_logger(__name__)


class SetCartLineQuantityHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(
        self,
        user_id: str,
        product_id: str,
        quantity: int,
        purchase_option: str | None = None,
    ) -> CartDTO:
        """Replace a line's quantity; ``quantity <= 0`` removes the line.

        Without a purchase option the product's first line is updated,
        whatever its option.  Removing a line that is not in the cart is a
        no-op.
        """
        option = PurchaseOption.parse(purchase_option) if purchase_option else None

        def _set(cart: Cart) -> None:
            cart.set_line_quantity(product_id, option, quantity)

        cart = self._cart_repo.update(user_id, _set)
        logger.debug(
            "Cart line quantity set",
            user_id=user_id,
            product_id=product_id,
            purchase_option=option.value if option else None,
            quantity=quantity,
        )
        return cart_to_dto(user_id, CartMaterializer(self._product_repo).materialize(cart))
