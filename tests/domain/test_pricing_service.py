"""Unit tests for the PricingEngine domain service."""

from datetime import timedelta

import pytest

from storefront.domain.exceptions import ProductUnavailable
from storefront.domain.model.cart import Cart
from storefront.domain.model.coupon import DiscountKind
from storefront.domain.model.value_objects import Money, PurchaseOption, Quantity
from storefront.domain.service.cart_materializer import CartMaterializer
from storefront.domain.service.coupon_redemption_service import CouponRedemptionService
from storefront.domain.service.pricing_service import PricingEngine
from tests.builders import make_coupon, make_product
from tests.fakes import NOW, FakeCouponRepository, FakeProductRepository, fixed_clock


def _setup(coupons=(), products=None):
    product_repo = FakeProductRepository(products or [make_product("A", price="20.00")])
    coupon_repo = FakeCouponRepository(list(coupons))
    engine = PricingEngine(product_repo, CouponRedemptionService(coupon_repo, clock=fixed_clock()))
    return engine, product_repo, coupon_repo


def _cart(*lines) -> Cart:
    cart = Cart(user_id="u1")
    for product_id, qty in lines:
        cart.add_line(product_id, Quantity(qty), PurchaseOption.STANDARD)
    return cart


class TestMaterialize:

    def test_missing_products_are_dropped(self):
        _, product_repo, _ = _setup()
        materialized = CartMaterializer(product_repo).materialize(_cart(("A", 1), ("GONE", 2)))
        assert [m.product.id for m in materialized] == ["A"]


class TestSnapshot:

    def test_captures_current_name_and_price(self):
        engine, product_repo, _ = _setup()
        materialized = CartMaterializer(product_repo).materialize(_cart(("A", 2)))
        lines = engine.snapshot(materialized)
        assert lines[0].product_name == "Widget"
        assert lines[0].unit_price == Money.of("20.00")
        assert lines[0].line_total == Money.of("40.00")

    def test_product_vanishing_after_materialize_fails(self):
        engine, product_repo, _ = _setup()
        materialized = CartMaterializer(product_repo).materialize(_cart(("A", 2)))
        product_repo.delete("A")
        with pytest.raises(ProductUnavailable):
            engine.snapshot(materialized)


class TestQuote:

    def _lines(self, engine, product_repo, *cart_lines):
        return engine.snapshot(CartMaterializer(product_repo).materialize(_cart(*cart_lines)))

    def test_no_coupon(self):
        engine, product_repo, _ = _setup()
        quote = engine.quote(self._lines(engine, product_repo, ("A", 2)))
        assert (quote.subtotal, quote.discount, quote.total) == (
            Money.of("40.00"), Money.of("0"), Money.of("40.00"),
        )
        assert quote.coupon_code is None

    def test_percentage_coupon(self):
        engine, product_repo, coupon_repo = _setup([make_coupon("SAVE10", value="10")])
        quote = engine.quote(self._lines(engine, product_repo, ("A", 2)), "save10")
        assert quote.discount == Money.of("4.00")
        assert quote.total == Money.of("36.00")
        assert quote.coupon_code == "SAVE10"
        assert coupon_repo.get_by_code("SAVE10").used_count == 1

    def test_expired_coupon_prices_without_discount(self):
        engine, product_repo, coupon_repo = _setup(
            [make_coupon("SAVE10", valid_to=NOW - timedelta(days=1))]
        )
        quote = engine.quote(self._lines(engine, product_repo, ("A", 2)), "SAVE10")
        assert quote.discount == Money.of("0")
        assert quote.total == Money.of("40.00")
        assert quote.coupon_code is None
        assert coupon_repo.get_by_code("SAVE10").used_count == 0

    def test_unknown_coupon_prices_without_discount(self):
        engine, product_repo, _ = _setup()
        quote = engine.quote(self._lines(engine, product_repo, ("A", 1)), "NOPE")
        assert quote.total == Money.of("20.00")

    def test_fixed_coupon_clamps_to_subtotal(self):
        engine, product_repo, _ = _setup(
            [make_coupon("FIXED5", kind=DiscountKind.FIXED, value="5.00")],
            products=[make_product("C", price="3.00")],
        )
        quote = engine.quote(self._lines(engine, product_repo, ("C", 1)), "FIXED5")
        assert quote.discount == Money.of("3.00")
        assert quote.total == Money.of("0.00")

    def test_total_is_rounded_subtotal_minus_discount(self):
        engine, product_repo, _ = _setup(
            [make_coupon("THIRD", value="33.33")],
            products=[make_product("A", price="19.99"), make_product("B", name="Gadget", price="0.07")],
        )
        quote = engine.quote(self._lines(engine, product_repo, ("A", 3), ("B", 1)), "THIRD")
        assert quote.subtotal == Money.of("60.04")
        assert quote.discount == Money.of("20.01")
        assert quote.total == (quote.subtotal - quote.discount).round2()
