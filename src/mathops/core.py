"""Registry mapping operation names and menu numbers to library functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from mathops import operations
from mathops.result import Failure

if TYPE_CHECKING:
    from collections.abc import Callable

    from mathops.result import Result


class ParameterKind(str, Enum):
    """Primitive type an input line is parsed into before dispatch."""

    INTEGER = "integer"
    NUMBER = "number"
    CHARACTER = "character"
    OPERATOR = "operator"


@dataclass(frozen=True)
class Parameter:
    """One input of an operation: the prompt shown and how to parse the reply."""

    prompt: str
    kind: ParameterKind


@dataclass(frozen=True)
class Operation:
    """
    An entry of the operation menu.

    Attributes:
        number: 1-based position in the menu
        name: Stable identifier, also accepted by the command line
        title: Menu label
        function: The library function to call
        parameters: Inputs in call order
    """

    number: int
    name: str
    title: str
    function: Callable[..., Result]
    parameters: tuple[Parameter, ...]

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def invoke(self, *args: Any) -> Result:
        """Call the function, failing instead of raising on a wrong argument count."""
        if len(args) != self.arity:
            return Failure(
                f"Error: {self.name} expects {self.arity} input(s), got {len(args)}."
            )
        return self.function(*args)

    def __str__(self) -> str:
        return f"{self.number:2d}. {self.title}"


def _integer(prompt: str) -> Parameter:
    return Parameter(prompt, ParameterKind.INTEGER)


def _number(prompt: str) -> Parameter:
    return Parameter(prompt, ParameterKind.NUMBER)


_ENTRIES: tuple[tuple[str, str, Callable[..., Result], tuple[Parameter, ...]], ...] = (
    (
        "even-odd",
        "Check Even or Odd",
        operations.check_even_or_odd,
        (_integer("Enter an integer: "),),
    ),
    (
        "max",
        "Find the Maximum of Two Numbers",
        operations.find_max_of_two_numbers,
        (_number("Enter the first number: "), _number("Enter the second number: ")),
    ),
    (
        "leap-year",
        "Check Leap Year",
        operations.check_leap_year,
        (_integer("Enter a year (e.g., 2020): "),),
    ),
    (
        "sum-naturals",
        "Sum of Natural Numbers",
        operations.sum_of_natural_numbers,
        (_integer("Enter a non-negative integer (n): "),),
    ),
    (
        "factorial",
        "Factorial of a Number",
        operations.factorial_of_number,
        (_integer("Enter a non-negative integer (n): "),),
    ),
    (
        "table",
        "Print Multiplication Table",
        operations.print_multiplication_table,
        (_integer("Enter a number for its multiplication table: "),),
    ),
    (
        "reverse",
        "Reverse a Number",
        operations.reverse_number,
        (_integer("Enter an integer to reverse: "),),
    ),
    (
        "palindrome",
        "Palindrome Check (Number)",
        operations.palindrome_check,
        (_integer("Enter an integer to check if it's a palindrome: "),),
    ),
    (
        "prime",
        "Check Prime Number",
        operations.check_prime_number,
        (_integer("Enter a non-negative integer to check if it's prime: "),),
    ),
    (
        "count-digits",
        "Count Digits in a Number",
        operations.count_digits_in_number,
        (_integer("Enter an integer to count its digits: "),),
    ),
    (
        "sum-digits",
        "Sum of Digits",
        operations.sum_of_digits,
        (_integer("Enter an integer to sum its digits: "),),
    ),
    (
        "armstrong",
        "Check Armstrong Number",
        operations.check_armstrong_number,
        (_integer("Enter a non-negative integer to check if it's an Armstrong number: "),),
    ),
    (
        "fibonacci",
        "Generate Fibonacci Series",
        operations.generate_fibonacci_series,
        (_integer("Enter the number of Fibonacci terms to generate: "),),
    ),
    (
        "vowel",
        "Check Vowel or Consonant",
        operations.check_vowel_or_consonant,
        (Parameter("Enter a single alphabet character: ", ParameterKind.CHARACTER),),
    ),
    (
        "calculator",
        "Simple Calculator",
        operations.simple_calculator,
        (
            _number("Enter the first number: "),
            Parameter("Enter an operator (+, -, *, /): ", ParameterKind.OPERATOR),
            _number("Enter the second number: "),
        ),
    ),
    (
        "gcd",
        "Find GCD (HCF)",
        operations.find_gcd,
        (
            _integer("Enter the first non-negative integer: "),
            _integer("Enter the second non-negative integer: "),
        ),
    ),
    (
        "perfect",
        "Check Perfect Number",
        operations.check_perfect_number,
        (_integer("Enter a positive integer to check if it's a perfect number: "),),
    ),
    (
        "divisors",
        "Print All Divisors",
        operations.print_all_divisors,
        (_integer("Enter a positive integer to print its divisors: "),),
    ),
    (
        "sign",
        "Number is Positive, Negative or Zero",
        operations.check_positive_negative_or_zero,
        (_number("Enter a number: "),),
    ),
    (
        "power",
        "Find Power (Exponentiation)",
        operations.find_power,
        (_number("Enter the base number: "), _integer("Enter the integer exponent: ")),
    ),
)

OPERATIONS: tuple[Operation, ...] = tuple(
    Operation(number, name, title, function, parameters)
    for number, (name, title, function, parameters) in enumerate(_ENTRIES, start=1)
)

EXIT_CHOICE = len(OPERATIONS) + 1

_BY_NAME = {operation.name: operation for operation in OPERATIONS}


def get_operation(key: int | str) -> Operation:
    """
    Look up an operation by menu number or name.

    Args:
        key: A 1-based menu number (int or digit string) or an operation name

    Returns:
        The matching operation

    Raises:
        KeyError: If nothing matches
    """
    if isinstance(key, str) and key.strip().isdigit():
        key = int(key)
    if isinstance(key, int) and not isinstance(key, bool):
        if 1 <= key <= len(OPERATIONS):
            return OPERATIONS[key - 1]
        raise KeyError(key)
    if key in _BY_NAME:
        return _BY_NAME[key]
    raise KeyError(key)
