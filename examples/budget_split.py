#!/usr/bin/env python3
"""
budget_split.py — Splitting a yearly budget without losing a cent

================================================================================
THE BUG
================================================================================

    >>> 0.1 + 0.2
    0.30000000000000004
    >>> 2026.0 / 12 * 12
    2025.9999999999998

Binary floating point cannot represent most decimal fractions. Summing or
splitting amounts as floats drifts away from the real total.

================================================================================
THE FIX
================================================================================

Store amounts as integer minor units and only go back to a decimal for
display:

    from monetary import create

    budget = create(2026)
    monthly = budget.distribute(12)
    assert sum(monthly).int_value == budget.int_value

================================================================================
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from monetary import create, InvalidInputError


def demonstrate_bug():
    """Show the floating-point drift."""
    print("=" * 60)
    print("THE BUG")
    print("=" * 60)
    print()
    print(">>> 0.1 + 0.2")
    print(f"{0.1 + 0.2}")
    print()
    print(">>> 2026.0 / 12 * 12")
    print(f"{2026.0 / 12 * 12}")
    print()


def demonstrate_arithmetic():
    """Same operations on scaled integers."""
    print("=" * 60)
    print("ARITHMETIC")
    print("=" * 60)
    print()

    print(f">>> create(0.1).add(0.2)        -> {create(0.1).add(0.2)}")
    print(f">>> create(2.5).multiply(4)     -> {create(2.5).multiply(4)}")
    print(f">>> create(10).divide(4)        -> {create(10).divide(4)}")
    print(f">>> create('(1.99)')            -> {create('(1.99)')}")
    print(f">>> create('$1,234.56').dollars() -> {create('$1,234.56').dollars()}")
    print(f">>> create('$1,234.56').cents()   -> {create('$1,234.56').cents()}")
    print()


def demonstrate_distribution():
    """Split 2026 into 12 monthly parts."""
    print("=" * 60)
    print("DISTRIBUTION")
    print("=" * 60)
    print()

    budget = create(2026)
    monthly = budget.distribute(12)
    for i, part in enumerate(monthly, 1):
        print(f"  Month {i:2d}: {part.format(True)}")
    print()

    total = sum(monthly)
    print(f"Sum of parts: {total.format(True)}")
    print(f"Original:     {budget.format(True)}")
    print(f"Equal?        {total.int_value == budget.int_value}")
    print()
    print("  202600 cents // 12 = 16883, remainder 4")
    print("  4 parts x 16884 + 8 parts x 16883 = 202600")
    print()


def demonstrate_formatting():
    """Locale-specific output."""
    print("=" * 60)
    print("FORMATTING")
    print("=" * 60)
    print()

    amount = 1234567.891
    print(f"  US:      {create(amount).format(True)}")
    print(f"  Euro:    {create(amount, symbol_text='€ ', group_separator='.', decimal_separator=',').format(True)}")
    print(f"  Swiss:   {create(amount, symbol_text='CHF ', group_separator=chr(39)).format(True)}")
    print(f"  Indian:  {create(amount, symbol_text='₹', use_indian_grouping=True).format(True)}")
    print(f"  Yen:     {create(amount, symbol_text='¥', precision_digits=0).format(True)}")
    print()


def demonstrate_invalid_input():
    """Unsupported types are 0 unless asked to fail."""
    print("=" * 60)
    print("INVALID INPUT")
    print("=" * 60)
    print()

    print(f">>> create(None)                -> {create(None)}")
    print(f">>> create('not a number')      -> {create('not a number')}")
    print(">>> create(None, error_on_invalid_input=True)")
    try:
        create(None, error_on_invalid_input=True)
    except InvalidInputError as e:
        print(f"InvalidInputError: {e}")
    print()


def main():
    demonstrate_bug()
    demonstrate_arithmetic()
    demonstrate_distribution()
    demonstrate_formatting()
    demonstrate_invalid_input()


if __name__ == "__main__":
    main()
