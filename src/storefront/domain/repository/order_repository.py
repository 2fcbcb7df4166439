"""Abstract repository for the append-only Order ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Append a new order.  Existing orders are never rewritten."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Order]:
        """Return the user's orders, newest first."""
