"""JSON-file-backed implementation of CartRepository.

One document per user (``<carts_dir>/<sha256(user_id)>.json``) so the lock that
serializes a cart's read-modify-write cycle is per user.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Callable

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import PurchaseOption, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, carts_dir: Path) -> None:
        self._carts_dir = carts_dir

    # --- CartRepository interface ---------------------------------------------

    def get(self, user_id: str) -> Cart:
        return self._to_domain(user_id, self._file(user_id).read())

    def update(self, user_id: str, mutation: Callable[[Cart], None]) -> Cart:
        doc = self._file(user_id)
        with doc.lock:
            cart = self._to_domain(user_id, doc.read())
            mutation(cart)
            doc.write(self._to_raw(cart))
            return cart

    def clear(self, user_id: str) -> None:
        doc = self._file(user_id)
        with doc.lock:
            doc.write(self._to_raw(Cart(user_id=user_id)))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "user_id": cart.user_id,
            "items": [
                {
                    "product_id": line.product_id,
                    "quantity": line.quantity.value,
                    "purchase_option": line.purchase_option.value,
                }
                for line in cart.lines
            ],
        }

    @staticmethod
    def _to_domain(user_id: str, raw: dict) -> Cart:
        return Cart(
            user_id=user_id,
            lines=[
                CartLine(
                    product_id=i["product_id"],
                    quantity=Quantity(i["quantity"]),
                    purchase_option=PurchaseOption(i.get("purchase_option", "standard")),
                )
                for i in raw.get("items", [])
            ],
        )

    # --- File helpers ---------------------------------------------------------

    def _file(self, user_id: str) -> JsonFile:
        # User IDs are opaque; hash them into a safe file name.
        digest = hashlib.sha256(user_id.encode("utf-8")).hexdigest()
        return JsonFile(self._carts_dir / f"{digest}.json", empty={"items": []})
