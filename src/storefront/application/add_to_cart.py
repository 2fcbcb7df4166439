"""Application service: Add Cart Line use case.

Validates the product and purchase option against the catalog, then
merges the line into the user's cart inside one atomic repository
update so concurrent adds for the same user never lose a quantity.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.exceptions import InvalidPurchaseOption, ProductNotFound
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import PurchaseOption, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_materializer import CartMaterializer

logger = structlog.get_logger(__name__)


class AddCartLineHandler:

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
        quantity: int = 1,
        purchase_option: str | None = None,
    ) -> CartDTO:
        qty = Quantity(quantity)
        option = PurchaseOption.parse(purchase_option)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(f"Product not found: '{product_id}'")

        if not product.offers(option):
            raise InvalidPurchaseOption(
                f"Invalid purchase option '{option.value}' for product '{product.name}'"
            )

        def _add(cart: Cart) -> None:
            cart.add_line(product.id, qty, option)

        cart = self._cart_repo.update(user_id, _add)
        logger.debug(
            "Cart line added",
            user_id=user_id,
            product_id=product.id,
            purchase_option=option.value,
            quantity=qty.value,
        )
        return cart_to_dto(user_id, CartMaterializer(self._product_repo).materialize(cart))
