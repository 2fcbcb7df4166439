"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    Money,
    PurchaseOption,
    Quantity,
    ShippingAddress,
)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_percent(self):
        assert Money.of("40.00").percent(Decimal("10")).amount == Decimal("4.0000")

    @pytest.mark.parametrize(
        "raw, expected",
        [("1.005", "1.01"), ("1.004", "1.00"), ("2.675", "2.68"), ("0.125", "0.13")],
    )
    def test_round2_is_half_up(self, raw, expected):
        assert Money.of(raw).round2().amount == Decimal(expected)

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)


# ── PurchaseOption / ShippingAddress ─────────────────────────────────────────


class TestPurchaseOption:

    def test_missing_defaults_to_standard(self):
        assert PurchaseOption.parse(None) is PurchaseOption.STANDARD
        assert PurchaseOption.parse("") is PurchaseOption.STANDARD

    def test_parse_is_case_insensitive(self):
        assert PurchaseOption.parse(" Express ") is PurchaseOption.EXPRESS

    def test_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown purchase option"):
            PurchaseOption.parse("overnight")


def test_shipping_address_from_partial_dict():
    address = ShippingAddress.from_dict({"city": "Springfield", "zip": None})
    assert address.city == "Springfield"
    assert address.zip == ""
    assert ShippingAddress.from_dict(address.to_dict()) == address
