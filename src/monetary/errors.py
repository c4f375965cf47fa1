"""
errors.py — Exceptions raised by the monetary package.

Only one condition is ever reported to the caller as a domain error: an input
of an unsupported type, and only when the settings ask for it
(``error_on_invalid_input=True``). Malformed strings and division by zero
degrade to 0 or to a non-finite amount instead.
"""


class MoneyError(Exception):
    """Base class for errors raised by the monetary package."""


class InvalidInputError(MoneyError, TypeError):
    """
    The value handed to the parser is not a number, a string or a Money.

    Subclasses TypeError so callers that already guard against wrong input
    types keep working without importing this module.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid Input: {type(value).__name__} {value!r}")
