"""
monetary — Exact money arithmetic over integer-scaled amounts

Amounts are stored as integer counts of minor units (cents at the default
precision of 2), so sums, differences and splits never pick up binary
floating-point noise.

================================================================================
QUICK START
================================================================================

Basic usage:

    from monetary import create

    price = create("$1,234.56")
    price.add(0.44).value              # 1235.0
    price.multiply(2).format(True)     # "$2,469.12"
    create(10).divide(4).value         # 2.5
    create("(1.99)").value             # -1.99

Even splits (sum is ALWAYS the original):

    parts = create(100).distribute(3)  # [33.34, 33.33, 33.33]
    sum(parts).int_value == 10000      # True

Locale formatting:

    euro = create("1.234,56", decimal_separator=",", group_separator=".",
                  symbol_text="€ ")
    euro.format(True)                  # "€ 1.234,56"
    create(1234567, use_indian_grouping=True).format()  # "12,34,567.00"

================================================================================
"""

from .core import (
    Money,
    create,
)
from .errors import (
    InvalidInputError,
    MoneyError,
)
from .settings import (
    DEFAULT_SETTINGS,
    RoundingMode,
    Settings,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "Money",
    "create",
    "Settings",
    "DEFAULT_SETTINGS",
    "RoundingMode",
    "MoneyError",
    "InvalidInputError",
]
