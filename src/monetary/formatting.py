"""
formatting.py — Renders Money as display strings.

    to_string(money)          "1234.50"      canonical, round-trips through parse()
    format_money(money)       "1,234.50"     grouped, locale separators
    format_money(money, True) "$1,234.50"    with symbol

Grouping is applied to the integer part only:
- standard: a separator every 3 digits (1,234,567)
- Indian:   the last 3 digits, then every 2 (12,34,567)
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional
import re

if TYPE_CHECKING:
    from .core import Money


_GROUPS = re.compile(r"(\d)(?=(\d{3})+\b)", re.ASCII)
_INDIAN_GROUPS = re.compile(r"(\d)(?=(\d\d)+\d\b)", re.ASCII)
_LAST_DECIMAL = re.compile(r"\.(\d+)$", re.ASCII)


def to_string(money: Money) -> str:
    """Fixed-point string with exactly precision_digits decimals, no grouping."""
    settings = money.settings
    return f"{money.int_value / settings.scale_factor:.{settings.precision_digits}f}"


def format_money(money: Money, use_symbol: Optional[bool] = None) -> str:
    """
    Grouped, locale-aware rendering of ``money``.

    Args:
        money: value to render
        use_symbol: prefix settings.symbol_text; None falls back to
            settings.format_with_symbol

    Returns:
        e.g. "$1,234.50", "$-1,234.50", "12,34,567.00", "1.234,50"
    """
    settings = money.settings
    if use_symbol is None:
        use_symbol = settings.format_with_symbol

    # Split the number before the symbol is attached: a symbol such as
    # "Rs." must not be read as the decimal point.
    number = to_string(money)
    fraction = _LAST_DECIMAL.search(number)
    integer_part = number[:fraction.start()] if fraction else number

    groups = _INDIAN_GROUPS if settings.use_indian_grouping else _GROUPS
    separator = settings.group_separator
    result = groups.sub(lambda match: match.group(1) + separator, integer_part)

    if fraction:
        result += settings.decimal_separator + fraction.group(1)
    return (settings.symbol_text if use_symbol else "") + result
