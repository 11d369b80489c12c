"""
Core arithmetic and logic operations.

Every function validates its own inputs and returns a ``Result``: ``Success``
with the computed value, or ``Failure`` with a message naming the violated
precondition. None of them print, log or keep state.
"""

import math

from mathops.exceptions import ComputationOverflowError, DivisionByZeroError
from mathops.result import returns_result, to_text
from mathops.validators import (
    VOWELS,
    validate_integer,
    validate_letter,
    validate_non_negative_integer,
    validate_number,
    validate_operator,
    validate_positive_integer,
)

TABLE_ROWS = 10


@returns_result
def check_even_or_odd(num: int) -> str:
    """
    Check whether an integer is even or odd.

    Args:
        num: The integer to check

    Returns:
        "Even" or "Odd"
    """
    num = validate_integer(num, "Error: Input must be an integer (a whole number).")
    return "Even" if num % 2 == 0 else "Odd"


@returns_result
def find_max_of_two_numbers(num1: float, num2: float) -> float:
    """
    Return the larger of two numbers.

    Properties:
        - Commutative: max(a, b) == max(b, a)
        - Idempotent: max(a, a) == a
    """
    message = "Error: Both inputs must be numbers."
    validate_number(num1, message)
    validate_number(num2, message)
    return max(num1, num2)


@returns_result
def check_leap_year(year: int) -> str:
    """
    Check whether a year is a leap year.

    A year is a leap year when it is divisible by 4 and not by 100, or when
    it is divisible by 400.

    Args:
        year: The year, a non-negative integer

    Returns:
        "Leap Year" or "Not a Leap Year"
    """
    year = validate_non_negative_integer(
        year, "Error: Input must be a positive integer representing a year."
    )
    if (year % 4 == 0 and year % 100 != 0) or year % 400 == 0:
        return "Leap Year"
    return "Not a Leap Year"


@returns_result
def sum_of_natural_numbers(n: int) -> int:
    """
    Sum the natural numbers 1..n with the closed form n(n+1)/2.

    Properties:
        - Base: sum_of_natural_numbers(0) == 0
        - Step: f(n) == f(n - 1) + n
    """
    n = validate_non_negative_integer(
        n, "Error: Input must be a non-negative integer (0 or a positive whole number)."
    )
    return n * (n + 1) // 2


@returns_result
def factorial_of_number(n: int) -> int:
    """
    Compute n! for a non-negative integer.

    Properties:
        - Base: factorial(0) == 1
        - Step: factorial(n) == n * factorial(n - 1)
    """
    n = validate_non_negative_integer(n)
    factorial = 1
    for i in range(2, n + 1):
        factorial *= i
    return factorial


@returns_result
def print_multiplication_table(num: int) -> str:
    """Return the ten lines ``num x i = product`` for i in 1..10, newline-joined."""
    num = validate_integer(num)
    label = to_text(num)
    return "\n".join(
        f"{label} x {i} = {to_text(num * i)}" for i in range(1, TABLE_ROWS + 1)
    )


@returns_result
def reverse_number(num: int) -> int:
    """
    Reverse the digits of an integer, keeping its sign.

    Leading zeros of the reversed digits disappear, so 1200 reverses to 21.
    """
    num = validate_integer(num)
    reversed_digits = int(to_text(abs(num))[::-1])
    return -reversed_digits if num < 0 else reversed_digits


@returns_result
def palindrome_check(num: int) -> str:
    """Check whether the digits of |num| read the same in both directions."""
    num = abs(validate_integer(num))
    reversed_num = 0
    remaining = num
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        reversed_num = reversed_num * 10 + digit
    return "Palindrome" if num == reversed_num else "Not a Palindrome"


@returns_result
def check_prime_number(num: int) -> str:
    """
    Check primality by trial division up to floor(sqrt(num)).

    0 and 1 are reported as "Not Prime".
    """
    num = validate_non_negative_integer(num)
    if num <= 1:
        return "Not Prime"
    for i in range(2, math.isqrt(num) + 1):
        if num % i == 0:
            return "Not Prime"
    return "Prime"


@returns_result
def count_digits_in_number(num: int) -> int:
    """Count the decimal digits of num, ignoring the sign."""
    num = validate_integer(num)
    return len(to_text(abs(num)))


@returns_result
def sum_of_digits(num: int) -> int:
    """Sum the decimal digits of num, ignoring the sign."""
    remaining = abs(validate_integer(num))
    total = 0
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        total += digit
    return total


@returns_result
def check_armstrong_number(num: int) -> str:
    """
    Check whether num equals the sum of its digits each raised to the digit count.

    Example:
        153 == 1**3 + 5**3 + 3**3, so 153 is an Armstrong number.
    """
    num = validate_non_negative_integer(num)
    digits = to_text(num)
    sum_of_powers = sum(int(digit) ** len(digits) for digit in digits)
    return "Armstrong" if sum_of_powers == num else "Not Armstrong"


@returns_result
def generate_fibonacci_series(n: int) -> str:
    """
    Return the first n Fibonacci terms, space-separated, starting 0 1 1 2.

    Args:
        n: Number of terms, a non-negative integer

    Returns:
        The terms joined by single spaces; an empty string when n is 0
    """
    n = validate_non_negative_integer(n)
    terms = []
    current, following = 0, 1
    for _ in range(n):
        terms.append(current)
        current, following = following, current + following
    return " ".join(map(to_text, terms))


@returns_result
def check_vowel_or_consonant(char: str) -> str:
    """Classify a single letter, case-insensitively, as "Vowel" or "Consonant"."""
    char = validate_letter(char)
    return "Vowel" if char.lower() in VOWELS else "Consonant"


@returns_result
def simple_calculator(num1: float, operator: str, num2: float) -> float:
    """
    Apply one of ``+ - * /`` to two numbers.

    Operands are checked before the operator, so two bad inputs report the
    operand message.

    Args:
        num1: Left operand
        operator: One of "+", "-", "*", "/"
        num2: Right operand

    Returns:
        The arithmetic result

    Failures:
        ValidationError: If an operand is not a number or the operator is unknown
        DivisionByZeroError: If dividing by zero
    """
    message = "Error: Both numbers must be valid."
    validate_number(num1, message)
    validate_number(num2, message)
    validate_operator(operator)

    if operator == "+":
        return num1 + num2
    if operator == "-":
        return num1 - num2
    if operator == "*":
        return num1 * num2

    if num2 == 0:
        raise DivisionByZeroError(num1)
    try:
        return num1 / num2
    except OverflowError as e:
        raise ComputationOverflowError("division", num1, num2) from e


@returns_result
def find_gcd(num1: int, num2: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    Properties:
        - Commutative: gcd(a, b) == gcd(b, a)
        - Identity: gcd(a, 0) == a
        - gcd(0, 0) == 0
    """
    message = "Error: Both inputs must be non-negative integers."
    num1 = validate_non_negative_integer(num1, message)
    num2 = validate_non_negative_integer(num2, message)
    while num2 != 0:
        num1, num2 = num2, num1 % num2
    return num1


@returns_result
def check_perfect_number(num: int) -> str:
    """
    Check whether num equals the sum of its proper divisors.

    Divisors are paired up to sqrt(num): each divisor i below the root also
    contributes num // i, counted once when i is the exact root.
    """
    num = validate_positive_integer(num)
    if num == 1:
        return "Not Perfect"

    divisor_sum = 1
    i = 2
    while i * i <= num:
        if num % i == 0:
            divisor_sum += i
            if i * i != num:
                divisor_sum += num // i
        i += 1
    return "Perfect" if divisor_sum == num else "Not Perfect"


@returns_result
def print_all_divisors(num: int) -> str:
    """Return every divisor of num in ascending order, space-separated."""
    num = validate_positive_integer(num)
    return " ".join(str(i) for i in range(1, num + 1) if num % i == 0)


@returns_result
def check_positive_negative_or_zero(num: float) -> str:
    """Return "Positive", "Negative" or "Zero" for the sign of num."""
    validate_number(num)
    if num > 0:
        return "Positive"
    if num < 0:
        return "Negative"
    return "Zero"


@returns_result
def find_power(base: float, exponent: int) -> float:
    """
    Raise base to an integer exponent.

    Zero raised to a negative exponent follows IEEE 754 and yields infinity
    rather than failing.

    Args:
        base: Any number
        exponent: An integer exponent

    Returns:
        base ** exponent

    Failures:
        ValidationError: If base is not a number or exponent is not integral
        ComputationOverflowError: If a float result exceeds the float range
    """
    message = "Error: Base must be a number, exponent must be an integer (a whole number)."
    validate_number(base, message)
    exponent = validate_integer(exponent, message)

    try:
        return base**exponent
    except ZeroDivisionError:
        # 0 ** -k: odd k keeps the sign of a negative zero base
        return math.copysign(math.inf, base) if exponent % 2 else math.inf
    except OverflowError as e:
        raise ComputationOverflowError("exponentiation", base, exponent) from e
