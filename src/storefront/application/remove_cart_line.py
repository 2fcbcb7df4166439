"""Application service: Remove Cart Line use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import PurchaseOption
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_materializer import CartMaterializer


class RemoveCartLineHandler:

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
        purchase_option: str | None = None,
    ) -> CartDTO:
        """Remove the product's line for one option, or all its lines."""
        option = PurchaseOption.parse(purchase_option) if purchase_option else None

        def _remove(cart: Cart) -> None:
            cart.remove_product(product_id, option)

        cart = self._cart_repo.update(user_id, _remove)
        return cart_to_dto(user_id, CartMaterializer(self._product_repo).materialize(cart))
