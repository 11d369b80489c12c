"""Input validation functions with strict type checking."""

import math
from typing import Any

from mathops.exceptions import ValidationError

VOWELS = frozenset("aeiou")
OPERATORS = ("+", "-", "*", "/")

INTEGER_MESSAGE = "Error: Input must be an integer."
NUMBER_MESSAGE = "Error: Input must be a number."
NON_NEGATIVE_MESSAGE = "Error: Input must be a non-negative integer."
POSITIVE_MESSAGE = "Error: Input must be a positive integer."
LETTER_MESSAGE = "Error: Input must be a single alphabet character (e.g., 'a', 'B')."
OPERATOR_MESSAGE = "Error: Invalid operator. Please use '+', '-', '*', or '/'."


def is_number(value: Any) -> bool:
    """Return True for an int or a non-NaN float; bools are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_integer(value: Any) -> bool:
    """Return True for an int or a finite float with an integral value."""
    if not is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


def validate_number(value: Any, message: str = NUMBER_MESSAGE) -> float:
    """
    Validate that a value is a number.

    Args:
        value: The value to validate
        message: Failure message to raise with

    Returns:
        The validated value

    Raises:
        ValidationError: If value is not an int or float, or is NaN
    """
    if not is_number(value):
        raise ValidationError(value, message)
    return value


def validate_integer(value: Any, message: str = INTEGER_MESSAGE) -> int:
    """
    Validate that a value is a whole number.

    Integral floats such as ``5.0`` are accepted and returned as ``int``.

    Args:
        value: The value to validate
        message: Failure message to raise with

    Returns:
        The validated value as an int

    Raises:
        ValidationError: If value is not integral
    """
    if not is_integer(value):
        raise ValidationError(value, message)
    return int(value)


def validate_non_negative_integer(value: Any, message: str = NON_NEGATIVE_MESSAGE) -> int:
    """Validate that a value is an integer >= 0."""
    number = validate_integer(value, message)
    if number < 0:
        raise ValidationError(value, message)
    return number


def validate_positive_integer(value: Any, message: str = POSITIVE_MESSAGE) -> int:
    """Validate that a value is an integer > 0."""
    number = validate_integer(value, message)
    if number <= 0:
        raise ValidationError(value, message)
    return number


def validate_letter(value: Any, message: str = LETTER_MESSAGE) -> str:
    """
    Validate that a value is exactly one ASCII letter.

    Args:
        value: The value to validate
        message: Failure message to raise with

    Returns:
        The validated character

    Raises:
        ValidationError: If value is not a one-character alphabetic string
    """
    if not isinstance(value, str) or len(value) != 1:
        raise ValidationError(value, message)
    if not (value.isascii() and value.isalpha()):
        raise ValidationError(value, message)
    return value


def validate_operator(value: Any, message: str = OPERATOR_MESSAGE) -> str:
    """Validate that a value is one of ``+ - * /``."""
    if not isinstance(value, str) or value not in OPERATORS:
        raise ValidationError(value, message)
    return value
