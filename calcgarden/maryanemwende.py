"""One-shot calculator that asks for the operator before the numbers."""

import operator
import sys

from calcgarden.edwin_ops import divide as _ieee_divide

_OPERATIONS = {
    "+": ("addition", operator.add),
    "-": ("subtraction", operator.sub),
    "*": ("multiplication", operator.mul),
    "/": ("division", _ieee_divide),
}


def calculate(operator, first, second):
    """Apply one of +, -, * or / to the two numbers."""
    try:
        _, operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"{operator} is an invalid arithmetic operator") from None
    return operation(first, second)


def _tokens(stream):
    for line in iter(stream.readline, ""):
        yield from line.split()


def main(argv=None):
    """Read an operator and two numbers, then print the result."""
    print("Enter an arithmetic operator. Choose between +, -, *, / :")
    symbol = sys.stdin.read(1)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the first number: ")
        first = float(next(tokens))
        print("Enter the second number: ")
        second = float(next(tokens))
    except (StopIteration, ValueError):
        print("Invalid number")
        return 1
    try:
        value = calculate(symbol, first, second)
    except ValueError as error:
        print(error)
        return 0
    label, _ = _OPERATIONS[symbol]
    print(f"Resulting {label} is: {value:.2f}")
    return 0