"""Abstract repository for the Coupon ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from storefront.domain.model.coupon import Coupon


class CouponRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> Coupon | None:
        """Return a coupon by its normalized code, or None."""

    @abstractmethod
    def list_all(self) -> list[Coupon]:
        """Return every coupon."""

    @abstractmethod
    def save(self, coupon: Coupon) -> None:
        """Persist a new or updated coupon."""

    @abstractmethod
    def update(self, code: str, mutation: Callable[[Coupon], None]) -> Coupon | None:
        """Apply ``mutation`` to the stored coupon as one atomic cycle.

        Returns the updated coupon, or None when the code is unknown.
        """

    @abstractmethod
    def increment_usage_if_available(self, code: str) -> bool:
        """Conditionally consume one redemption of ``code``.

        Must behave as a single indivisible operation: increment
        ``used_count`` only if ``usage_limit`` is unset or
        ``used_count < usage_limit`` at apply time.  Returns False when the
        precondition fails (or the coupon vanished).
        """

    @abstractmethod
    def release_usage(self, code: str) -> bool:
        """Give back one redemption taken by ``increment_usage_if_available``.

        Atomic like the increment; never takes ``used_count`` below zero.
        """

    def list_active(self) -> list[Coupon]:
        return [c for c in self.list_all() if c.active]
