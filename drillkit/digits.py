"""Exercises on the decimal digits of integers."""

from __future__ import annotations


def count_digits(number: int) -> int:
    """Count the decimal digits of a positive integer; zero and negatives give 0."""
    count = 0
    while number > 0:
        number //= 10
        count += 1
    return count


def reverse_digits(number: int) -> int:
    """Reverse the decimal digits of an integer, keeping its sign."""
    sign = -1 if number < 0 else 1
    remaining = abs(number)
    reversed_number = 0
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        reversed_number = reversed_number * 10 + digit
    return sign * reversed_number


def is_palindrome(number: int) -> bool:
    """Tell whether a non-negative integer reads the same backwards."""
    if number < 0:
        return False
    return reverse_digits(number) == number


def modulus(number: int, divisor: int) -> int:
    """Remainder by repeated subtraction: number is returned as is when below divisor."""
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")
    if number < divisor:
        return number
    return number % divisor