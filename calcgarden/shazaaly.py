"""Calculator that reads two numbers and an operator, then applies it."""

import sys
import time

from calcgarden.codescience import power as _pow


def add(a, b):
    """Return a + b."""
    return a + b


def sub(a, b):
    """Return a - b."""
    return a - b


def mul(a, b):
    """Return a * b."""
    return a * b


def divide(a, b):
    """Return a / b, refusing a zero divisor."""
    if b == 0:
        raise ZeroDivisionError("Error: Division by zero")
    return a / b


def expo(a, b):
    """Return a raised to the power of b."""
    return _pow(a, b)


_OPERATIONS = {"+": add, "-": sub, "*": mul, "/": divide, "^": expo}


def operation_for(op):
    """Return the function for one of +, -, *, / or ^."""
    try:
        return _OPERATIONS[op]
    except KeyError:
        raise ValueError("Invalid operator") from None


def _tokens(stream):
    for line in iter(stream.readline, ""):
        yield from line.split()


def main(argv=None):
    """Read two numbers and an operator and print the result."""
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the first number: ", end="", flush=True)
        a = float(next(tokens))
        time.sleep(2)
        print("Enter the second number: ", end="", flush=True)
        b = float(next(tokens))
        print("Enter an arithmetic operator (+, -, *, /, ^): ", end="", flush=True)
        op = next(tokens)[0]
    except (StopIteration, ValueError):
        print("\nInvalid input")
        return 1
    try:
        operation = operation_for(op)
    except ValueError as error:
        print(error)
        return 1
    try:
        result = operation(a, b)
    except ZeroDivisionError as error:
        print(error)
        result = 0.0
    print(f"Result: {result:f}")
    return 0