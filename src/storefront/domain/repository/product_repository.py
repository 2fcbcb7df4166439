"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  The checkout core treats the catalog as read-only;
``save`` exists for catalog seeding.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    def list_distinct(self, field_name: str) -> list[str]:
        """Return the sorted, non-empty distinct values of a product field."""
        values = {getattr(p, field_name) for p in self.list_all()}
        return sorted(v for v in values if v)
