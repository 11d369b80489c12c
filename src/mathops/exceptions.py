"""Exceptions raised by validators and turned into failure results."""

from typing import Any


class MathOpsError(Exception):
    """Base exception for all operation errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(MathOpsError):
    """Raised when an input has the wrong type, range or format."""

    def __init__(self, value: Any, message: str) -> None:
        super().__init__(message, value)


class DivisionByZeroError(MathOpsError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Error: Division by zero is not allowed.", numerator)
        self.numerator = numerator


class ComputationOverflowError(MathOpsError):
    """Raised when a result exceeds the float range or the int-to-str digit limit."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__("Error: Result is too large to represent.", operands)
        self.operation = operation
        self.operands = operands
