"""Domain service: join cart lines with the live catalog.

Lines whose product has been removed from the catalog are dropped
silently.  A catalog deletion must never make a cart unreadable, so this
lossy join is the policy, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MaterializedLine:
    line: CartLine
    product: Product


class CartMaterializer:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def materialize(self, cart: Cart) -> list[MaterializedLine]:
        result: list[MaterializedLine] = []
        for line in cart.lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.debug(
                    "Dropping cart line for missing product",
                    user_id=cart.user_id,
                    product_id=line.product_id,
                )
                continue
            result.append(MaterializedLine(line=line, product=product))
        return result
