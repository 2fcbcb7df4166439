"""Application service: Show Cart use case (query).

Returns the cart joined with the live catalog; lines for products that
have since left the catalog are not shown.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_materializer import CartMaterializer


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> CartDTO:
        cart = self._cart_repo.get(user_id)
        return cart_to_dto(user_id, CartMaterializer(self._product_repo).materialize(cart))
