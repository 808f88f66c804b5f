"""Greeting calculator with basic and advanced (root, log, trigonometry) modes."""

import math
import re
import sys
from dataclasses import dataclass

from calcgarden.codescience import power as _pow
from calcgarden.codescience import square_root as _sqrt

_INVALID_OPERAND = "Invalid Operand, please try again"
_WORD = re.compile(r"\S+")


@dataclass
class OperandChoice:
    """The user's name, first number and chosen operation."""

    operand: int
    name: str
    first_number: float


def _divide(first_num, second_num):
    if second_num == 0:
        raise ZeroDivisionError("You can't divide by zero please")
    return first_num / second_num


_BASIC = {
    1: lambda a, b: a + b,
    2: lambda a, b: a - b,
    3: lambda a, b: a * b,
    4: _divide,
    5: _pow,
}


def basic_op(first_num, second_num, operand):
    """Apply operation 1-5 (add, subtract, multiply, divide, power)."""
    operation = _BASIC.get(operand)
    if operation is None:
        raise ValueError(_INVALID_OPERAND)
    return operation(first_num, second_num)


def _ln(x):
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return math.log(x)


def _trig(function, radians):
    return function(radians) if math.isfinite(radians) else math.nan


def advanced_op(first_number, advanced_operand):
    """Apply 1 square root, 2 natural log, or 3-5 sin, cos, tan of an angle in degrees."""
    radians = first_number * math.pi / 180.0
    if advanced_operand == 1:
        return _sqrt(first_number)
    if advanced_operand == 2:
        return _ln(first_number)
    if advanced_operand == 3:
        return _trig(math.sin, radians)
    if advanced_operand == 4:
        return _trig(math.cos, radians)
    if advanced_operand == 5:
        return _trig(math.tan, radians)
    raise ValueError(_INVALID_OPERAND)


class _Reader:
    """Reads whole lines and whitespace-separated words from one stream."""

    def __init__(self, stream):
        self._stream = stream
        self._rest = ""

    def _fill(self):
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line

    def line(self):
        text, self._rest = (self._rest or self._fill()), ""
        return text.split("\n", 1)[0]

    def word(self):
        while not self._rest.strip():
            self._rest = self._fill()
        match = _WORD.search(self._rest)
        self._rest = self._rest[match.end():]
        return match.group()


def _get_operand_choice(reader):
    print("What's your name")
    name = reader.line()
    print(f"****Hi {name}, welcome to this calculator*****\n")
    print("Enter the first number: ", end="", flush=True)
    first_number = float(reader.word())
    print("Select the operation you wish to perform:")
    print("1. Addition (+)")
    print("2. Subtraction (-)")
    print("3. Multiplication (x)")
    print("4. Division (/)")
    print("5. Exponentiation(**)")
    print("6. Advanced Functionalities")
    print("Enter the number relating to your choice: ", end="", flush=True)
    return OperandChoice(int(reader.word()), name, first_number)


def _ask_advanced(reader, first_number):
    print("Select the operation you wish to perform:")
    print("1. Square root(\u221a)")
    print("2. Logarithm Operations(log)")
    print("3. Trigonometry(sin)")
    print("4. Trigonometry(cos)")
    print("5. Trigonometry(tan)")
    print("Enter the number relating to your choice: ", end="", flush=True)
    advanced_operand = int(reader.word())
    try:
        return advanced_op(first_number, advanced_operand)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 0.0


def main(argv=None):
    """Run calculations until the user answers anything but "yes"."""
    reader = _Reader(sys.stdin)
    try:
        while True:
            choice = _get_operand_choice(reader)
            if 1 <= choice.operand <= 5:
                print("Enter the second number: ", end="", flush=True)
                second_number = float(reader.word())
                try:
                    result = basic_op(choice.first_number, second_number, choice.operand)
                except ZeroDivisionError as error:
                    print(error, file=sys.stderr)
                    return 0
            elif choice.operand == 6:
                result = _ask_advanced(reader, choice.first_number)
            else:
                print(_INVALID_OPERAND, file=sys.stderr)
                continue
            print(f"----\n{result:.2f}\n----")
            print(f"Thank you {choice.name}, you wanna do more? (yes/no): ", end="", flush=True)
            if reader.word() != "yes":
                print(f"{choice.name}, thanks for using this calculator")
                break
    except EOFError:
        print()
    except ValueError:
        print("Invalid input", file=sys.stderr)
        return 1
    return 0