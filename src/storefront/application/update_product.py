"""Application service: Update Product use case (catalog maintenance).

Reprices a product and/or replaces the purchase options that the cart
validates new lines against.  Placed orders are untouched: they carry
their own price snapshot.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import ProductNotFound, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, PurchaseOption
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        purchase_options: list[str] | None = None,
    ) -> Product:
        if new_price is None and not purchase_options:
            raise ValidationError("Nothing to update: give a price or purchase options")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(f"Product not found: '{product_id}'")

        if new_price is not None:
            product.update_price(Money.of(new_price))
        if purchase_options:
            product.set_purchase_options(
                frozenset(PurchaseOption.parse(o) for o in purchase_options)
            )

        self._product_repo.save(product)
        logger.info(
            "Product updated",
            product_id=product.id,
            price=str(product.price.amount),
            purchase_options=sorted(o.value for o in product.purchase_options),
        )
        return product
