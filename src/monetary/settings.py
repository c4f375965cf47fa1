"""
settings.py — Formatting and precision configuration for Money values

================================================================================
DESIGN
================================================================================

1. IMMUTABLE DEFAULTS
   DEFAULT_SETTINGS is built once at import time and never mutated.
   Overrides produce a new Settings via dataclasses.replace().

2. SETTINGS TRAVEL WITH THE VALUE
   Every Money carries the Settings it was created with. Changing what a
   caller passes later has no effect on existing instances.

3. SCALE FACTOR IS CACHED
   scale_factor = 10 ** precision_digits is computed in __post_init__,
   once per Settings object.

4. ROUNDING IS A SETTING
   Scaling a decimal to an integer count of minor units is the only place
   where rounding happens. The strategy is part of the configuration.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Union
import math


# ==============================================================================
# ROUNDING STRATEGIES
# ==============================================================================

class RoundingMode(Enum):
    """
    Strategies used when a scaled amount has a fractional part.

    - HALF_UP: commercial rounding, ties go away from zero (2.5 -> 3, -2.5 -> -3)
    - HALF_EVEN: banker's rounding, Python's round()
    - HALF_DOWN: ties go toward zero
    - HALF_CEILING: ties go toward +infinity (JavaScript Math.round)
    - DOWN: always toward zero (truncation)
    - UP: always away from zero
    """
    HALF_UP = "half_up"
    HALF_EVEN = "half_even"
    HALF_DOWN = "half_down"
    HALF_CEILING = "half_ceiling"
    DOWN = "down"
    UP = "up"


def apply_rounding(value: Union[int, float], mode: RoundingMode) -> Union[int, float]:
    """
    Round a scaled amount to an integer using the given strategy.

    Integers are returned untouched. Non-finite floats (inf, nan) cannot be
    rounded and are returned as they are.
    """
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        return value

    # Compare the fractional part with 0.5 instead of adding 0.5: the sum
    # itself rounds (0.49999999999999994 + 0.5 == 1.0).

    def _half_up(v: float) -> int:
        magnitude = abs(v)
        units = math.floor(magnitude)
        if magnitude - units >= 0.5:
            units += 1
        return units if v >= 0 else -units

    def _half_even(v: float) -> int:
        return round(v)

    def _half_down(v: float) -> int:
        magnitude = abs(v)
        units = math.floor(magnitude)
        if magnitude - units > 0.5:
            units += 1
        return units if v >= 0 else -units

    def _half_ceiling(v: float) -> int:
        units = math.floor(v)
        if v - units >= 0.5:
            units += 1
        return units

    def _down(v: float) -> int:
        return math.trunc(v)

    def _up(v: float) -> int:
        return math.ceil(v) if v >= 0 else math.floor(v)

    strategies = {
        RoundingMode.HALF_UP: _half_up,
        RoundingMode.HALF_EVEN: _half_even,
        RoundingMode.HALF_DOWN: _half_down,
        RoundingMode.HALF_CEILING: _half_ceiling,
        RoundingMode.DOWN: _down,
        RoundingMode.UP: _up,
    }

    strategy = strategies.get(mode)
    if strategy is None:
        raise ValueError(f"Unknown rounding mode: {mode}")

    return strategy(value)


# ==============================================================================
# SETTINGS
# ==============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Per-instance configuration of a Money value.

    symbol_text          prefix used by format() when the symbol is requested
    group_separator      inserted between digit groups of the integer part
    decimal_separator    accepted by the parser, emitted by format()
    format_with_symbol   default for format(use_symbol=None)
    error_on_invalid_input
                         raise InvalidInputError for unsupported input types
                         instead of treating them as 0
    precision_digits     number of fractional digits tracked
    use_indian_grouping  12,34,567 instead of 1,234,567
    rounding             strategy used when scaling to minor units
    """
    symbol_text: str = "$"
    group_separator: str = ","
    decimal_separator: str = "."
    format_with_symbol: bool = False
    error_on_invalid_input: bool = False
    precision_digits: int = 2
    use_indian_grouping: bool = False
    rounding: RoundingMode = RoundingMode.HALF_UP
    scale_factor: int = field(init=False, repr=False)

    def __post_init__(self):
        if isinstance(self.precision_digits, bool) or not isinstance(self.precision_digits, int):
            raise ValueError(
                f"precision_digits must be an int, got {type(self.precision_digits).__name__}"
            )
        if self.precision_digits < 0:
            raise ValueError(f"precision_digits must be >= 0, got {self.precision_digits}")
        if not isinstance(self.rounding, RoundingMode):
            # Accept the enum value ("half_even") as a convenience
            object.__setattr__(self, "rounding", RoundingMode(self.rounding))
        object.__setattr__(self, "scale_factor", 10 ** self.precision_digits)


DEFAULT_SETTINGS = Settings()


SettingsLike = Union[Settings, Mapping[str, Any], None]


def resolve_settings(options: SettingsLike = None, **overrides: Any) -> Settings:
    """
    Merge caller options over the defaults.

    Args:
        options: a Settings, a mapping of Settings field names, or None
        **overrides: field names that take precedence over ``options``

    Returns:
        A Settings instance. Unknown option names raise TypeError.
    """
    if options is None:
        base = DEFAULT_SETTINGS
    elif isinstance(options, Settings):
        base = options
    else:
        base = replace(DEFAULT_SETTINGS, **dict(options))

    if overrides:
        return replace(base, **overrides)
    return base
