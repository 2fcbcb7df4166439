"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict.  No file I/O, no side effects.  The cart
and coupon fakes hold a lock across their read-modify-write cycles, the
same contract the JSON stores honour.
"""

from __future__ import annotations

import copy
import threading
from datetime import datetime, timezone
from typing import Callable

from storefront.domain.model.cart import Cart
from storefront.domain.model.coupon import Coupon, normalize_code
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.coupon_repository import CouponRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def fixed_clock(now: datetime = NOW) -> Callable[[], datetime]:
    return lambda: now


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[str, Cart] = {}
        self._lock = threading.Lock()
        self.fail_on_clear = False

    def get(self, user_id: str) -> Cart:
        with self._lock:
            return copy.deepcopy(self._store.get(user_id, Cart(user_id=user_id)))

    def update(self, user_id: str, mutation: Callable[[Cart], None]) -> Cart:
        with self._lock:
            cart = copy.deepcopy(self._store.get(user_id, Cart(user_id=user_id)))
            mutation(cart)
            self._store[user_id] = cart
            return copy.deepcopy(cart)

    def clear(self, user_id: str) -> None:
        if self.fail_on_clear:
            raise OSError("cart store unavailable")
        with self._lock:
            self._store[user_id] = Cart(user_id=user_id)


class FakeCouponRepository(CouponRepository):

    def __init__(self, coupons: list[Coupon] | None = None) -> None:
        self._store: dict[str, Coupon] = {}
        self._lock = threading.Lock()
        for c in coupons or []:
            self._store[c.code] = c

    def get_by_code(self, code: str) -> Coupon | None:
        with self._lock:
            coupon = self._store.get(normalize_code(code))
            return copy.deepcopy(coupon) if coupon else None

    def list_all(self) -> list[Coupon]:
        with self._lock:
            return [copy.deepcopy(c) for c in self._store.values()]

    def save(self, coupon: Coupon) -> None:
        with self._lock:
            self._store[coupon.code] = copy.deepcopy(coupon)

    def update(self, code: str, mutation: Callable[[Coupon], None]) -> Coupon | None:
        with self._lock:
            coupon = self._store.get(normalize_code(code))
            if coupon is None:
                return None
            mutation(coupon)
            return copy.deepcopy(coupon)

    def increment_usage_if_available(self, code: str) -> bool:
        with self._lock:
            coupon = self._store.get(normalize_code(code))
            if coupon is None or coupon.is_exhausted:
                return False
            coupon.used_count += 1
            return True

    def release_usage(self, code: str) -> bool:
        with self._lock:
            coupon = self._store.get(normalize_code(code))
            if coupon is None or coupon.used_count <= 0:
                return False
            coupon.used_count -= 1
            return True


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}
        self.fail_on_add = False

    def add(self, order: Order) -> None:
        if self.fail_on_add:
            raise OSError("order ledger unavailable")
        self._store[order.id] = order

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_for_user(self, user_id: str) -> list[Order]:
        orders = [o for o in self._store.values() if o.user_id == user_id]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def count(self) -> int:
        return len(self._store)
