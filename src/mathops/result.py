"""
Two-variant result type returned by every operation.

Operations never raise: a computed value comes back as ``Success`` and a
violated precondition as ``Failure`` carrying the human-readable message.

Example:
    >>> from mathops import check_prime_number
    >>> check_prime_number(97)
    Success(value='Prime')
    >>> str(check_prime_number(-4))
    'Error: Input must be a non-negative integer.'
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, ParamSpec, TypeVar, Union

from mathops.exceptions import ComputationOverflowError, MathOpsError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
P = ParamSpec("P")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A computed value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def __str__(self) -> str:
        return format_value(self.value)


@dataclass(frozen=True)
class Failure:
    """A violated precondition, described by ``message``."""

    message: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the failure as a ``MathOpsError``."""
        raise MathOpsError(self.message)

    def __str__(self) -> str:
        return self.message


Result = Union[Success[Any], Failure]


def format_value(value: Any) -> str:
    """
    Render a result value for display.

    Integral floats drop their trailing ``.0`` so ``10 / 2`` shows as ``5``.
    Integers past the interpreter's string conversion limit render as a
    placeholder naming their bit length; everything else uses ``str``.

    Args:
        value: The value to render

    Returns:
        Display text for the value
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    try:
        return str(value)
    except ValueError:
        if isinstance(value, int):
            return f"<integer too large to display ({value.bit_length()} bits)>"
        raise


def to_text(value: int) -> str:
    """
    Convert an integer to its decimal digits.

    Raises:
        ComputationOverflowError: If the integer exceeds the interpreter's
            int-to-str digit limit
    """
    try:
        return str(value)
    except ValueError as e:
        raise ComputationOverflowError("string conversion", value) from e


def returns_result(func: Callable[P, Any]) -> Callable[P, Result]:
    """
    Wrap an operation so it returns a ``Result`` instead of raising.

    The wrapped function's return value becomes ``Success``; a raised
    ``MathOpsError`` becomes ``Failure`` with the error's message. Integer
    results too long to print fail the same way as any other overflow.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result:
        try:
            value = func(*args, **kwargs)
            if isinstance(value, int) and not isinstance(value, bool):
                to_text(value)
        except MathOpsError as e:
            return Failure(e.message)
        return Success(value)

    return wrapper
