"""Calculator with arithmetic, power, square root, sine and cosine."""

import math
import sys


def add(num1, num2):
    """Return num1 + num2."""
    return num1 + num2


def subtract(num1, num2):
    """Return num1 - num2."""
    return num1 - num2


def multiply(num1, num2):
    """Return num1 * num2."""
    return num1 * num2


def divide(num1, num2):
    """Return num1 / num2, or 0 when num2 is zero."""
    if num2 == 0:
        return 0.0
    return num1 / num2


def power(base, exponent):
    """Return base raised to exponent; nan where the result is not real."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def square_root(num):
    """Return the square root of num; nan for a negative number."""
    if num < 0:
        return math.nan
    return math.sqrt(num)


def sine(angle):
    """Return the sine of an angle in radians."""
    return math.sin(angle)


def cosine(angle):
    """Return the cosine of an angle in radians."""
    return math.cos(angle)


_OPERATIONS = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "^": power,
    "r": lambda num1, num2: square_root(num1),
    "s": lambda num1, num2: sine(num1),
    "c": lambda num1, num2: cosine(num1),
}


def calculate(operator, num1, num2):
    """Apply the operator (+, -, *, /, ^, r, s, c); unary ones use num1."""
    operation = _OPERATIONS.get(operator)
    if operation is None:
        raise ValueError("Invalid operator")
    return operation(num1, num2)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Read two numbers and an operator, then print the result."""
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number one: ", end="")
        num1 = float(next(tokens))
        print("Enter number two: ", end="")
        num2 = float(next(tokens))
        print("Enter an operator (+, -, *, /, ^, r, s, c): ", end="")
        operator = next(tokens)[0]
    except (StopIteration, ValueError):
        print("\nInvalid input")
        return 1
    try:
        result = calculate(operator, num1, num2)
    except ValueError as error:
        print(error)
        return 1
    print(f"Result: {result:.2f}")
    return 0