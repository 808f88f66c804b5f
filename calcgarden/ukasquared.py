"""Integer calculator that checks its input digit by digit."""

import sys


def add(a, b):
    """Return a + b."""
    return a + b


def mul(a, b):
    """Return a * b."""
    return a * b


def sub(a, b):
    """Return a - b."""
    return a - b


def divz(a, b):
    """Return a / b truncated toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS = {"+": add, "*": mul, "-": sub, "/": divz}


def opr(c, first_num, second_num):
    """Apply the operator named by the first character of c."""
    operation = _OPERATIONS.get(c[:1])
    if operation is None:
        raise ValueError(f"unknown operator {c!r}")
    return operation(first_num, second_num)


def is_number(text):
    """Tell whether text is a non-empty run of decimal digits."""
    return bool(text) and all(char in "0123456789" for char in text)


def _tokens(stream):
    for line in iter(stream.readline, ""):
        yield from line.split()


def _read_number(tokens, prompt):
    while True:
        print(prompt, end="", flush=True)
        text = next(tokens)
        if is_number(text):
            return int(text)
        print("error, not a number")


def _read_operator(tokens):
    while True:
        print(
            "input an operator: \naddition = +\nsubtraction = -\n"
            "multiplication = *\ndivision = /",
            flush=True,
        )
        text = next(tokens)
        if text[0] in _OPERATIONS:
            return text
        print("use the correct operator")


def main(argv=None):
    """Read a number, an operator and a number, then print the result."""
    tokens = _tokens(sys.stdin)
    print(
        "Welcome to myhandy calculator. "
        "This calculator accepts user input according to instruction"
    )
    try:
        first_num = _read_number(tokens, "input first number: ")
        symbol = _read_operator(tokens)
        second_num = _read_number(tokens, "input second number: ")
    except StopIteration:
        print()
        return 1
    try:
        result = opr(symbol, first_num, second_num)
    except ZeroDivisionError:
        print("error, division by zero")
        return 1
    print(f"The result of this computation is {result}")
    return 0