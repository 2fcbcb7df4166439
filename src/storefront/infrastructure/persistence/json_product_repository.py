"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, PurchaseOption
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._file.lock:
            products = self._load()
            products[product.id] = product
            self._file.write([self._to_raw(p) for p in products.values()])

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {item["id"]: self._to_domain(item) for item in self._file.read()}

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            purchase_options=frozenset(
                PurchaseOption(o) for o in raw.get("purchase_options", ["standard"])
            ),
            category=raw.get("category", ""),
            brand=raw.get("brand", ""),
            subcategory=raw.get("subcategory", ""),
        )

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "purchase_options": sorted(o.value for o in product.purchase_options),
            "category": product.category,
            "brand": product.brand,
            "subcategory": product.subcategory,
        }
