"""Integer calculator reading a number, an operator and a number."""

import re
import sys

_INTEGER_PREFIX = re.compile(r"[+-]?\d+")


def add(a, b):
    """Return a + b."""
    return a + b


def subtract(a, b):
    """Return a - b."""
    return a - b


def multiply(a, b):
    """Return a * b."""
    return a * b


def divide(a, b):
    """Return a / b truncated toward zero."""
    if b == 0:
        raise ZeroDivisionError("Error: Cannot divide by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS = {"+": add, "-": subtract, "*": multiply, "/": divide}


class _Scanner:
    """Reads integers and single characters the way formatted input does."""

    def __init__(self, stream):
        self._tokens = (token for line in iter(stream.readline, "") for token in line.split())
        self._pending = []

    def _next(self):
        return self._pending.pop() if self._pending else next(self._tokens)

    def _push(self, rest):
        if rest:
            self._pending.append(rest)

    def integer(self):
        token = self._next()
        match = _INTEGER_PREFIX.match(token)
        if match is None:
            raise ValueError(f"not an integer: {token!r}")
        self._push(token[match.end():])
        return int(match.group())

    def character(self):
        token = self._next()
        self._push(token[1:])
        return token[0]


def main(argv=None):
    """Read an integer expression and print its result."""
    scanner = _Scanner(sys.stdin)
    print("Simple Calculator")
    print("=================")
    try:
        print("Enter the first number: ", end="", flush=True)
        num1 = scanner.integer()
        print("Enter the operator (+, -, *, /): ", end="", flush=True)
        operator = scanner.character()
        print("Enter the second number: ", end="", flush=True)
        num2 = scanner.integer()
    except (StopIteration, ValueError):
        print("Invalid input")
        return 1
    operation = _OPERATIONS.get(operator)
    if operation is None:
        print("Invalid operator")
        return 0
    try:
        print(f"Result: {operation(num1, num2)}")
    except ZeroDivisionError as error:
        print(error)
    return 0