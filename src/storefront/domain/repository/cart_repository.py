"""Abstract repository for the per-user Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self, user_id: str) -> Cart:
        """Return the user's cart, or a new empty one on first reference."""

    @abstractmethod
    def update(self, user_id: str, mutation: Callable[[Cart], None]) -> Cart:
        """Apply ``mutation`` to the user's cart and persist it atomically.

        Implementations must serialize concurrent calls for the same
        ``user_id`` so no read-modify-write cycle is lost.  If
        ``mutation`` raises, nothing is persisted.
        """

    @abstractmethod
    def clear(self, user_id: str) -> None:
        """Atomically empty the user's cart."""
