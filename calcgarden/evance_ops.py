"""Arithmetic and scientific operations of the numbered-menu calculator."""

import math

from calcgarden.codescience import power as _pow


class CalcError(Exception):
    """Raised where the calculator stops with an error; the message is shown to the user."""


def add(a, b):
    """Return a + b."""
    return a + b


def sub(a, b):
    """Return a - b."""
    return a - b


def mul(a, b):
    """Return a * b."""
    return a * b


def division(a, b):
    """Return a / b, refusing a zero divisor."""
    if b == 0:
        raise CalcError("Error: Division by 0.")
    return a / b


def mod(a, b):
    """Return the remainder of the truncated integer division of a by b."""
    a, b = int(a), int(b)
    if b == 0:
        raise CalcError("Error: Modulo by 0.")
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def root(num, degree):
    """Return the degree'th root of num."""
    if degree == 0:
        raise CalcError("Error: Root by 0.")
    return _pow(num, 1 / degree)


def exponent(base, exp):
    """Return base raised to exp."""
    return _pow(base, exp)


def logten(a):
    """Return the base-10 logarithm of a positive number."""
    if a <= 0:
        raise CalcError("Error: Log of 0 or a negative number.")
    return math.log10(a)


def factorial(a):
    """Return a! for a non-negative integer."""
    a = int(a)
    if a < 0:
        raise CalcError("Error: Factorial of a negative number.")
    return math.factorial(a)


def fib(n):
    """Return the Fibonacci value the calculator shows for n (0 for n below 2)."""
    n = int(n)
    if n <= 0:
        return 0
    previous, current, result = 0, 1, 0
    for _ in range(2, n + 1):
        result = previous + current
        previous, current = current, result
    return result