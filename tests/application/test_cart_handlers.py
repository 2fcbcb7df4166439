"""Integration tests for the cart use cases.

Uses in-memory fake repositories — no file I/O.
"""

import threading
from decimal import Decimal

import pytest

from storefront.application.add_to_cart import AddCartLineHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_cart_line import RemoveCartLineHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_line import SetCartLineQuantityHandler
from storefront.domain.exceptions import (
    CartLineNotFound,
    InvalidPurchaseOption,
    ProductNotFound,
    ValidationError,
)
from storefront.domain.model.value_objects import PurchaseOption
from tests.builders import make_product
from tests.fakes import FakeCartRepository, FakeProductRepository


def _setup():
    product_repo = FakeProductRepository([
        make_product("A", "Widget", "20.00"),
        make_product("B", "Gadget", "5.50", options=(PurchaseOption.STANDARD,)),
    ])
    return FakeCartRepository(), product_repo


class TestAddCartLine:

    def test_adds_line_and_prices_cart(self):
        carts, products = _setup()
        dto = AddCartLineHandler(carts, products).handle("u1", "A", 2)
        assert len(dto.items) == 1
        assert dto.items[0].purchase_option == "standard"
        assert dto.items[0].line_total == Decimal("40.00")
        assert dto.subtotal == Decimal("40.00")

    def test_repeated_adds_consolidate(self):
        carts, products = _setup()
        handler = AddCartLineHandler(carts, products)
        for qty in (1, 2, 3):
            handler.handle("u1", "A", qty, "express")
        cart = carts.get("u1")
        assert len(cart.lines) == 1
        assert cart.lines[0].quantity.value == 6

    def test_unknown_product_rejected(self):
        carts, products = _setup()
        with pytest.raises(ProductNotFound, match="Product not found"):
            AddCartLineHandler(carts, products).handle("u1", "ZZZ", 1)

    def test_option_not_offered_rejected(self):
        carts, products = _setup()
        with pytest.raises(InvalidPurchaseOption):
            AddCartLineHandler(carts, products).handle("u1", "B", 1, "express")
        assert carts.get("u1").is_empty

    def test_zero_quantity_rejected(self):
        carts, products = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            AddCartLineHandler(carts, products).handle("u1", "A", 0)

    def test_concurrent_adds_lose_no_quantity(self):
        carts, products = _setup()
        handler = AddCartLineHandler(carts, products)
        threads = [threading.Thread(target=handler.handle, args=("u1", "A", 1)) for _ in range(25)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert carts.get("u1").lines[0].quantity.value == 25


class TestSetCartLineQuantity:

    def test_replaces_quantity(self):
        carts, products = _setup()
        AddCartLineHandler(carts, products).handle("u1", "A", 5)
        dto = SetCartLineQuantityHandler(carts, products).handle("u1", "A", 2)
        assert dto.items[0].quantity == 2

    def test_zero_removes_line(self):
        carts, products = _setup()
        AddCartLineHandler(carts, products).handle("u1", "A", 5)
        dto = SetCartLineQuantityHandler(carts, products).handle("u1", "A", 0)
        assert dto.items == []

    def test_zero_on_absent_line_is_noop(self):
        carts, products = _setup()
        dto = SetCartLineQuantityHandler(carts, products).handle("u1", "A", 0)
        assert dto.items == []

    def test_positive_on_absent_line_not_found(self):
        carts, products = _setup()
        with pytest.raises(CartLineNotFound):
            SetCartLineQuantityHandler(carts, products).handle("u1", "A", 3)


class TestRemoveClearShow:

    def test_remove_one_option(self):
        carts, products = _setup()
        add = AddCartLineHandler(carts, products)
        add.handle("u1", "A", 1, "standard")
        add.handle("u1", "A", 1, "express")
        dto = RemoveCartLineHandler(carts, products).handle("u1", "A", "express")
        assert [i.purchase_option for i in dto.items] == ["standard"]

    def test_remove_absent_is_noop(self):
        carts, products = _setup()
        dto = RemoveCartLineHandler(carts, products).handle("u1", "A")
        assert dto.items == []

    def test_clear(self):
        carts, products = _setup()
        AddCartLineHandler(carts, products).handle("u1", "A", 1)
        ClearCartHandler(carts).handle("u1")
        assert ShowCartHandler(carts, products).handle("u1").items == []

    def test_show_hides_deleted_products(self):
        carts, products = _setup()
        add = AddCartLineHandler(carts, products)
        add.handle("u1", "A", 1)
        add.handle("u1", "B", 2)
        products.delete("B")
        dto = ShowCartHandler(carts, products).handle("u1")
        assert [i.product_id for i in dto.items] == ["A"]
        assert dto.subtotal == Decimal("20.00")

    def test_carts_are_per_user(self):
        carts, products = _setup()
        AddCartLineHandler(carts, products).handle("u1", "A", 1)
        assert ShowCartHandler(carts, products).handle("u2").items == []


class TestSetCartLineQuantityWithoutOption:

    def test_updates_line_whatever_its_option(self):
        carts, products = _setup()
        products.save(make_product("P", "Plan", "9.00", options=(PurchaseOption.PREMIUM,)))
        AddCartLineHandler(carts, products).handle("u1", "P", 1, "premium")
        dto = SetCartLineQuantityHandler(carts, products).handle("u1", "P", 3)
        assert [(i.purchase_option, i.quantity) for i in dto.items] == [("premium", 3)]

    def test_explicit_option_must_match(self):
        carts, products = _setup()
        AddCartLineHandler(carts, products).handle("u1", "A", 1, "express")
        with pytest.raises(CartLineNotFound):
            SetCartLineQuantityHandler(carts, products).handle("u1", "A", 3, "standard")
