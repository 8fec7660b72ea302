"""Formatting helpers for estimate output.

All figures are shown with two decimal places and comma separators,
matching how the report and email present quantities and costs.
"""

from __future__ import annotations

DEFAULT_CURRENCY = "INR"


def format_amount(value: float) -> str:
    """Format a number with two decimals, e.g. '1,234.57'."""
    return f"{value:,.2f}"


def format_quantity(value: float, unit: str) -> str:
    """Format a quantity with its unit, e.g. '12.35 tons'."""
    return f"{format_amount(value)} {unit}"


def format_currency(value: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format a cost with a currency code prefix, e.g. 'INR 1,234.57'."""
    return f"{currency} {format_amount(value)}"
