"""Application service: Add Product use case (catalog seeding)."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, check_price
from storefront.domain.model.value_objects import Money, PurchaseOption
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        purchase_options: list[str] | None = None,
        category: str = "",
        brand: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        all_products = self._product_repo.list_all()
        if any(p.name.lower() == name.strip().lower() for p in all_products):
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        numeric_ids = [int(p.id) for p in all_products if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        options = frozenset(
            PurchaseOption.parse(o) for o in (purchase_options or ["standard"])
        )
        product = Product(
            id=next_id,
            name=name.strip(),
            price=check_price(Money.of(price)),
            purchase_options=options,
            category=category,
            brand=brand,
        )
        self._product_repo.save(product)
        return product
