"""Looping calculator that reads a value, an operator and a value."""

import operator
import re
import subprocess
import sys

from calcgarden.edwin_ops import divide as _ieee_divide

_NUMBER = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)

_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _ieee_divide,
}


def calculate(value1, operator, value2):
    """Apply one of +, -, * or / to the two values."""
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError("invalid operator") from None
    return operation(value1, value2)


class _Scanner:
    """Reads numbers and single characters the way formatted input does."""

    def __init__(self, stream):
        self._stream = stream
        self._rest = ""

    def _skip(self):
        self._rest = self._rest.lstrip()
        while not self._rest:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._rest = line.lstrip()

    def number(self):
        self._skip()
        match = _NUMBER.match(self._rest)
        if match is None:
            raise ValueError("not a number")
        self._rest = self._rest[match.end():]
        return float(match.group())

    def character(self):
        self._skip()
        char, self._rest = self._rest[0], self._rest[1:]
        return char


def _clear_screen():
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def main(argv=None):
    """Run calculations until input ends."""
    _clear_screen()
    print("=" * 49)
    print()
    print("\tWELCOME TO THE CALCULATOR")
    print()
    print("=" * 51)
    scanner = _Scanner(sys.stdin)
    try:
        while True:
            print("\nEnter the value1: ", end="", flush=True)
            value1 = scanner.number()
            print("operator['+', '-', '*', '/']: ", end="", flush=True)
            symbol = scanner.character()
            print("Enter the value2: ", end="", flush=True)
            value2 = scanner.number()
            try:
                result = calculate(value1, symbol, value2)
            except ValueError as error:
                print(error)
                continue
            print(f"{value1:.2f} {symbol} {value2:.2f} = {result:.2f}")
    except EOFError:
        print()
        return 0
    except ValueError:
        print("\nInvalid number")
        return 1