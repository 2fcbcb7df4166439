"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture()
def run(tmp_path):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


@pytest.fixture()
def seeded(run):
    assert run("product", "add", "--name", "Widget", "--price", "20.00",
               "--option", "standard", "--option", "express").exit_code == 0
    assert run("coupon", "add", "--code", "save10", "--type", "percentage", "--value", "10",
               "--valid-from", "2020-01-01", "--valid-to", "2099-12-31").exit_code == 0
    return run


class TestProductCommands:

    def test_add_and_list(self, seeded):
        result = seeded("product", "list")
        assert result.exit_code == 0
        assert "Widget" in result.output
        assert "express,standard" in result.output

    def test_update_missing(self, run):
        result = run("product", "update", "--id", "42", "--price", "1.00")
        assert result.exit_code != 0
        assert "not found" in result.output


class TestCartCommands:

    def test_add_and_show(self, seeded):
        assert seeded("cart", "add", "--user", "u1", "--product", "1", "--quantity", "2").exit_code == 0
        result = seeded("cart", "show", "--user", "u1")
        assert "Widget" in result.output
        assert "$40.00" in result.output

    def test_invalid_option(self, seeded):
        result = seeded("cart", "add", "--user", "u1", "--product", "1", "--option", "bulk")
        assert result.exit_code != 0
        assert "Invalid purchase option" in result.output

    def test_update_and_clear(self, seeded):
        seeded("cart", "add", "--user", "u1", "--product", "1")
        result = seeded("cart", "update", "--user", "u1", "--product", "1", "--quantity", "0")
        assert "Cart is empty." in result.output
        seeded("cart", "add", "--user", "u1", "--product", "1")
        assert "Cart cleared" in seeded("cart", "clear", "--user", "u1").output


class TestCouponCommands:

    def test_list(self, seeded):
        result = seeded("coupon", "list")
        assert "SAVE10" in result.output
        assert "percentage" in result.output

    def test_validate(self, seeded):
        result = seeded("coupon", "validate", "--code", "SAVE10", "--total", "40")
        assert result.exit_code == 0
        assert "$4.00" in result.output

    def test_validate_unknown(self, seeded):
        result = seeded("coupon", "validate", "--code", "NOPE", "--total", "40")
        assert result.exit_code != 0
        assert "Invalid coupon code" in result.output


class TestOrderCommands:

    def test_place_with_coupon_and_list(self, seeded):
        seeded("cart", "add", "--user", "u1", "--product", "1", "--quantity", "2")
        result = seeded("order", "place", "--user", "u1", "--coupon", "SAVE10", "--city", "Springfield")
        assert result.exit_code == 0
        assert "$36.00" in result.output
        assert "Discount (SAVE10)" in result.output

        listed = seeded("order", "list", "--user", "u1")
        assert "pending" in listed.output
        assert "$36.00" in listed.output

    def test_place_reports_dropped_coupon(self, seeded):
        seeded("cart", "add", "--user", "u1", "--product", "1")
        result = seeded("order", "place", "--user", "u1", "--coupon", "BOGUS")
        assert result.exit_code == 0
        assert "was not applied" in result.output

    def test_place_empty_cart(self, run):
        result = run("order", "place", "--user", "u1")
        assert result.exit_code != 0
        assert "empty cart" in result.output

    def test_list_without_orders(self, run):
        assert "No orders found." in run("order", "list", "--user", "u1").output


class TestCatalogAndCouponMaintenance:

    def test_product_update_options(self, seeded):
        result = seeded("product", "update", "--id", "1", "--option", "premium")
        assert result.exit_code == 0
        assert "[premium]" in result.output

        added = seeded("cart", "add", "--user", "u1", "--product", "1")
        assert added.exit_code != 0
        assert "Invalid purchase option" in added.output

    def test_product_update_subcent_price(self, seeded):
        result = seeded("product", "update", "--id", "1", "--price", "2.005")
        assert result.exit_code != 0
        assert "whole cents" in result.output

    def test_coupon_deactivate(self, seeded):
        result = seeded("coupon", "deactivate", "--code", "save10")
        assert result.exit_code == 0
        assert "SAVE10 deactivated" in result.output
        assert "No active coupons." in seeded("coupon", "list").output

        validate = seeded("coupon", "validate", "--code", "SAVE10", "--total", "40")
        assert validate.exit_code != 0
        assert "not active" in validate.output
