"""
core.py — Money value object over integer-scaled amounts

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   An integer count of minor units (int_value = amount * 10 ** precision).
   The float ``value`` is a read-only view for display and interchange.

2. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance built through
   the parser, nothing is mutated in place. Safe to share across threads.

3. PERMISSIVE INPUT
   Operands can be numbers, strings or other Money instances. They are
   scaled with the settings of the left-hand Money.

4. ROUNDING AT THE BOUNDARY
   Results are divided back down to a decimal and re-parsed, so rounding
   happens once per operation, when the value re-enters minor units.
   Multiply and divide keep the operand unrounded until that point.

5. VERIFIABLE INVARIANTS
   distribute(n) guarantees sum(parts) == original, parts differ by at
   most one minor unit.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Optional, Union
import logging
import math

from .formatting import format_money, to_string
from .parsing import Scaled, parse
from .settings import DEFAULT_SETTINGS, Settings, SettingsLike, apply_rounding, resolve_settings

logger = logging.getLogger(__name__)

Operand = Union[int, float, str, "Money"]


def _true_divide(numerator: Scaled, denominator: Scaled) -> float:
    """IEEE-754 division: x / 0 is +-inf, 0 / 0 is nan."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True, order=False)
class Money:
    """
    Monetary amount stored as an integer number of minor units.

    INVARIANTS:
    1. int_value is an int (inf/nan only after a division by zero)
    2. settings.scale_factor == 10 ** settings.precision_digits
    3. operations never mutate, they return new instances

    USAGE:
        price = create("$1,234.56")
        total = price.multiply(3).add("(10.00)")
        total.format(True)        # "$3,693.68"
        create(100).distribute(3) # [33.34, 33.33, 33.33]
    """
    int_value: Scaled
    settings: Settings = DEFAULT_SETTINGS

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, value: Any, options: SettingsLike = None, **overrides: Any) -> Money:
        """
        Parse ``value`` (number, str or Money) into a new Money.

        Args:
            value: amount in major units ("12.34", 12.34, another Money)
            options: Settings, mapping of Settings fields, or None for defaults
            **overrides: individual Settings fields, e.g. precision_digits=3

        Raises:
            InvalidInputError: unsupported type with error_on_invalid_input
        """
        settings = resolve_settings(options, **overrides)
        return cls(int_value=parse(value, settings), settings=settings)

    @classmethod
    def from_scaled(cls, int_value: Scaled, options: SettingsLike = None, **overrides: Any) -> Money:
        """Build from minor units directly (1234 -> 12.34 at precision 2), no parsing."""
        settings = resolve_settings(options, **overrides)
        return cls(int_value=apply_rounding(int_value, settings.rounding), settings=settings)

    @classmethod
    def zero(cls, options: SettingsLike = None, **overrides: Any) -> Money:
        """Zero, handy as the start value of sum()."""
        return cls.from_scaled(0, options, **overrides)

    def with_settings(self, **overrides: Any) -> Money:
        """Same amount re-parsed under modified settings (e.g. another precision)."""
        return Money.of(self, replace(self.settings, **overrides))

    def _rebuild(self, amount: Scaled) -> Money:
        return Money(int_value=parse(amount, self.settings), settings=self.settings)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, operand: Operand) -> Money:
        scaled = self.int_value + parse(operand, self.settings)
        return self._rebuild(scaled / self.settings.scale_factor)

    def subtract(self, operand: Operand) -> Money:
        scaled = self.int_value - parse(operand, self.settings)
        return self._rebuild(scaled / self.settings.scale_factor)

    def multiply(self, operand: Operand) -> Money:
        """
        Multiply by a factor. The operand stays unrounded; the product is
        reduced by 10 ** (precision_digits + 2) before re-entering minor units.
        """
        scaled = self.int_value * parse(operand, self.settings, rounded=False)
        return self._rebuild(scaled / 10 ** (self.settings.precision_digits + 2))

    def divide(self, operand: Operand) -> Money:
        """
        Divide by a divisor. The quotient of two equally scaled amounts is
        already a decimal.

        Division by zero does not raise: the result holds inf, -inf or nan.
        """
        divisor = parse(operand, self.settings, rounded=False)
        if divisor == 0:
            logger.debug(f"{self!r} divided by zero, result is not finite")
        return self._rebuild(_true_divide(self.int_value, divisor))

    # -------------------------------------------------------------------------
    # Distribution
    # -------------------------------------------------------------------------

    def distribute(self, count: int) -> list[Money]:
        """
        Split the amount into ``count`` parts whose sum is exactly self.

        Each part gets the amount divided by count, truncated toward zero.
        The leftover minor units go one each to the first parts, in the
        direction of the sign of the total.

        Args:
            count: number of parts; 0 (or less) yields an empty list

        Returns:
            List of ``count`` Money, differing by at most one minor unit
        """
        if count <= 0:
            return []

        total = self.int_value
        scale = self.settings.scale_factor

        split = total // count if total >= 0 else -(-total // count)
        remainder = abs(total - split * count)

        distribution = []
        for index in range(count):
            item = self._rebuild(split / scale)
            if index < remainder:
                item = item.add(1 / scale) if total >= 0 else item.subtract(1 / scale)
            distribution.append(item)

        return distribution

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def value(self) -> float:
        """Decimal view of the amount. Use for display and interchange only."""
        return self.int_value / self.settings.scale_factor

    def dollars(self) -> int:
        """Whole major units, truncated toward zero."""
        value = self.value
        return math.trunc(value) if math.isfinite(value) else 0

    def cents(self) -> int:
        """Minor units beyond the whole major units, with the sign of the amount."""
        if not isinstance(self.int_value, int):
            return 0
        units = abs(self.int_value) % self.settings.scale_factor
        return units if self.int_value >= 0 else -units

    def format(self, use_symbol: Optional[bool] = None) -> str:
        return format_money(self, use_symbol)

    def to_string(self) -> str:
        return to_string(self)

    def to_json(self) -> float:
        """Plain float for JSON payloads. Not guaranteed to keep every digit."""
        return self.value

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"Money({to_string(self)!r})"

    def __float__(self) -> float:
        return self.value

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> Money:
        return self.add(other)

    def __radd__(self, other: Operand) -> Money:
        return self.add(other)

    def __sub__(self, other: Operand) -> Money:
        return self.subtract(other)

    def __rsub__(self, other: Operand) -> Money:
        return Money.of(other, self.settings).subtract(self)

    def __mul__(self, other: Operand) -> Money:
        return self.multiply(other)

    def __rmul__(self, other: Operand) -> Money:
        return self.multiply(other)

    def __truediv__(self, other: Operand) -> Money:
        return self.divide(other)

    def __neg__(self) -> Money:
        return Money(int_value=-self.int_value, settings=self.settings)

    def __abs__(self) -> Money:
        return Money(int_value=abs(self.int_value), settings=self.settings)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------
    # Equality is structural (amount and settings). Ordering accepts any
    # operand the parser does and compares under self.settings.

    def __lt__(self, other: Operand) -> bool:
        return self.int_value < parse(other, self.settings)

    def __le__(self, other: Operand) -> bool:
        return self.int_value <= parse(other, self.settings)

    def __gt__(self, other: Operand) -> bool:
        return self.int_value > parse(other, self.settings)

    def __ge__(self, other: Operand) -> bool:
        return self.int_value >= parse(other, self.settings)


def create(value: Any, options: SettingsLike = None, **overrides: Any) -> Money:
    """
    Build a Money from a number, a string or another Money.

        create(1.23)
        create("$1,234.56")
        create("1.234,56", decimal_separator=",", group_separator=".")
        create(12, {"precision_digits": 3, "symbol_text": "€"})
    """
    return Money.of(value, options, **overrides)
