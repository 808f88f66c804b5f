"""Line-oriented calculator that reads two numbers and an operation."""

import math
import re
import sys

from calcgarden.edwin_ops import divide as _ieee_divide

_NUMBER = re.compile(
    r"\s*[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


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
    """Return a / b; a zero divisor gives an infinity or nan."""
    return _ieee_divide(a, b)


def power(a, b):
    """Return a multiplied by itself b times, for a whole non-negative b."""
    if not (math.isfinite(b) and b >= 0 and b == int(b)):
        raise ValueError("exponent must be a non-negative whole number")
    result = 1.0
    for _ in range(int(b)):
        result = a * result
    return result


_OPERATIONS = {"+": add, "-": sub, "*": mul, "/": divide, "^": power}


def parse_number(text):
    """Return text as a number; the whole text must be one number."""
    if _NUMBER.fullmatch(text):
        return float(text)
    raise ValueError("INVALID NUMBER")


def lookup_operation(symbol):
    """Return the function for one of +, -, *, / or ^."""
    try:
        return _OPERATIONS[symbol]
    except KeyError:
        raise ValueError("INVALID OPERATION") from None


def _read_line():
    line = sys.stdin.readline()
    if not line.endswith("\n"):
        raise EOFError
    return line[:-1]


def _read_until_valid(prompt, retry_prompt, parse):
    print(prompt, end="", flush=True)
    while True:
        try:
            return parse(_read_line())
        except ValueError as error:
            print(error, file=sys.stderr)
            print(retry_prompt, end="", flush=True)


def main(argv=None):
    """Read two numbers and an operation and print the result."""
    try:
        num1 = _read_until_valid("Enter a number: ", "Enter a valid number: ", parse_number)
        num2 = _read_until_valid("Enter a number: ", "Enter a valid number: ", parse_number)
        operation = _read_until_valid(
            "Enter the operation: ", "Enter a valid operation: ", lookup_operation
        )
        answer = operation(num1, num2)
    except EOFError:
        print()
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"{answer:g}")
    return 0