"""
parsing.py — Turns caller input into a scaled amount (minor units).

Accepted inputs:
- numbers (int, float, Decimal, Fraction): multiplied by the scale factor
- Money: its decimal value, re-scaled to the target precision
- str: cleaned up and read as a decimal ("$1,234.56", "(1.99)", "1.234,56")

Anything else is an invalid input. It becomes 0, or raises InvalidInputError
when the settings say so. Strings that cannot be read are always 0.
"""

from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from typing import Union
import logging
import re

from .errors import InvalidInputError
from .settings import Settings, apply_rounding

logger = logging.getLogger(__name__)

# Accounting notation: "(1.99)" is -1.99
_PARENTHESIZED = re.compile(r"\((.*)\)")

Scaled = Union[int, float]


def _clean_string(text: str, decimal_separator: str) -> str:
    """Keep digits, minus signs and the decimal separator, then canonicalize it to '.'."""
    text = _PARENTHESIZED.sub(r"-\1", text, count=1)
    text = re.sub(f"[^-\\d{re.escape(decimal_separator)}]", "", text, flags=re.ASCII)
    if decimal_separator:
        text = text.replace(decimal_separator, ".")
    return text


def parse(value: object, settings: Settings, rounded: bool = True) -> Scaled:
    """
    Scale ``value`` to an amount of minor units under ``settings``.

    Args:
        value: number, str or Money
        settings: provides scale factor, decimal separator, rounding mode
            and the error_on_invalid_input switch
        rounded: when False the raw scaled value is returned, possibly with
            a fractional part (multiply/divide defer rounding to the end)

    Returns:
        The scaled amount. An int when rounded, except for inf/nan which
        cannot be rounded.

    Raises:
        InvalidInputError: unsupported type and settings.error_on_invalid_input
    """
    from .core import Money  # core imports this module

    scale = settings.scale_factor

    if isinstance(value, bool):
        scaled = _invalid(value, settings)
    elif isinstance(value, int):
        scaled = value * scale
    elif isinstance(value, (float, Decimal, Fraction)):
        scaled = float(value) * scale
    elif isinstance(value, Money):
        scaled = value.value * scale
    elif isinstance(value, str):
        cleaned = _clean_string(value, settings.decimal_separator)
        try:
            scaled = float(cleaned) * scale
        except ValueError:
            logger.debug(f"Unparseable amount {value!r} (cleaned to {cleaned!r}), using 0")
            scaled = 0
    else:
        scaled = _invalid(value, settings)

    return apply_rounding(scaled, settings.rounding) if rounded else scaled


def _invalid(value: object, settings: Settings) -> int:
    if settings.error_on_invalid_input:
        raise InvalidInputError(value)
    logger.debug(f"Unsupported input type {type(value).__name__}, using 0")
    return 0
