"""Tests for formatting helpers."""

from __future__ import annotations

from buildcalc.formatting import format_amount, format_currency, format_quantity


class TestFormatAmount:
    def test_two_decimals(self) -> None:
        assert format_amount(3.14159) == "3.14"

    def test_thousands_separator(self) -> None:
        assert format_amount(1_234_567.891) == "1,234,567.89"

    def test_zero(self) -> None:
        assert format_amount(0) == "0.00"


class TestFormatQuantity:
    def test_with_unit(self) -> None:
        assert format_quantity(12.345, "tons") == "12.35 tons"

    def test_integer_value(self) -> None:
        assert format_quantity(9, "m") == "9.00 m"


class TestFormatCurrency:
    def test_default_currency(self) -> None:
        assert format_currency(1500) == "INR 1,500.00"

    def test_custom_currency(self) -> None:
        assert format_currency(99.5, "USD") == "USD 99.50"
