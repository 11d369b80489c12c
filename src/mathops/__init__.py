"""
Arithmetic and logic operations behind an interactive console menu.

The library is a flat set of pure functions. Each one:
- Validates its own inputs
- Returns ``Success(value)`` or ``Failure(message)`` instead of raising
- Has no side effects, so it can be called from any context
"""

from mathops.core import OPERATIONS, Operation, Parameter, ParameterKind, get_operation
from mathops.exceptions import (
    ComputationOverflowError,
    DivisionByZeroError,
    MathOpsError,
    ValidationError,
)
from mathops.operations import (
    check_armstrong_number,
    check_even_or_odd,
    check_leap_year,
    check_perfect_number,
    check_positive_negative_or_zero,
    check_prime_number,
    check_vowel_or_consonant,
    count_digits_in_number,
    factorial_of_number,
    find_gcd,
    find_max_of_two_numbers,
    find_power,
    generate_fibonacci_series,
    palindrome_check,
    print_all_divisors,
    print_multiplication_table,
    reverse_number,
    simple_calculator,
    sum_of_digits,
    sum_of_natural_numbers,
)
from mathops.result import Failure, Result, Success

__all__ = [
    "OPERATIONS",
    "ComputationOverflowError",
    "DivisionByZeroError",
    "Failure",
    "MathOpsError",
    "Operation",
    "Parameter",
    "ParameterKind",
    "Result",
    "Success",
    "ValidationError",
    "check_armstrong_number",
    "check_even_or_odd",
    "check_leap_year",
    "check_perfect_number",
    "check_positive_negative_or_zero",
    "check_prime_number",
    "check_vowel_or_consonant",
    "count_digits_in_number",
    "factorial_of_number",
    "find_gcd",
    "find_max_of_two_numbers",
    "find_power",
    "generate_fibonacci_series",
    "get_operation",
    "palindrome_check",
    "print_all_divisors",
    "print_multiplication_table",
    "reverse_number",
    "simple_calculator",
    "sum_of_digits",
    "sum_of_natural_numbers",
]

__version__ = "0.1.0"
