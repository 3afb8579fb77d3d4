"""Formatting utilities for currency and date display."""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from .config import CURRENCY_SYMBOL


def format_currency(amount: Union[float, int], symbol: Optional[str] = None) -> str:
    """Format a currency amount for display.

    Args:
        amount: The amount to format
        symbol: Currency symbol; defaults to the configured one

    Returns:
        Formatted currency string (e.g., "R$ 1,234.56" or "-R$ 12.00")

    Example:
        >>> format_currency(1234.56, symbol="R$")
        'R$ 1,234.56'
    """
    symbol = CURRENCY_SYMBOL if symbol is None else symbol
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {abs(amount):,.2f}"


def format_date(value: date) -> str:
    """Day-first date, e.g. ``17/10/2026``."""
    return value.strftime("%d/%m/%Y")
