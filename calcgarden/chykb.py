"""Four-operation calculator whose operation is chosen by index."""

import math
import sys


def add(n1, n2):
    """Return n1 + n2."""
    return n1 + n2


def multiply(n1, n2):
    """Return n1 * n2."""
    return n1 * n2


def divide(n1, n2):
    """Return n1 / n2 with floating-point semantics for a zero divisor."""
    try:
        return n1 / n2
    except ZeroDivisionError:
        if n1 == 0 or math.isnan(n1):
            return math.nan
        return math.copysign(math.inf, n1) * math.copysign(1.0, n2)


def subtract(n1, n2):
    """Return n1 - n2."""
    return n1 - n2


OPERATIONS = (add, multiply, divide, subtract)


def apply(select, n1, n2):
    """Apply operation number ``select`` (0 sum, 1 multiply, 2 divide, 3 subtract)."""
    if not 0 <= select < len(OPERATIONS):
        raise ValueError(f"no operation with index {select}")
    return OPERATIONS[select](n1, n2)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Ask for an operation and two numbers, then print the result."""
    tokens = _tokens(sys.stdin)
    print("Select operation : 0 for sum, 1 for multiply, 2 for division, 3 for subtraction")
    try:
        select = int(next(tokens))
        print("Enter 2 numbers, one at a time: ")
        n1 = float(next(tokens))
        n2 = float(next(tokens))
        result = apply(select, n1, n2)
    except StopIteration:
        print("Error: not enough input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"The result is : {result:f}")
    return 0