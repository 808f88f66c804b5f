"""Menu calculator with integer arithmetic and special functions."""

import math
import re
import subprocess
import sys
import time

from calcgarden.codescience import power as _pow

_INTEGER = re.compile(r"[+-]?\d+")
_NUMBER = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_CHARACTER = re.compile(r"\S")
_EXPRESSION = re.compile(r"\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)")

_DIVISION_BY_ZERO = "Error: division by 0 is not valid"
_INVALID_INPUT = "Invalid input. Please try again."

_CAPABILITIES = (
    "I can perform basic calculations like\n"
    "1. addition\n"
    "2. subtraction\n"
    "3. multiplication\n"
    "4. division\n"
    "5. modulo\n"
    "I can also perform special calculations like\n"
    "1. square root\n"
    "2. cosine\n"
    "3. sine\n"
    "4. exponentiation\n"
    "5. logarithm\n"
)
_SPECIAL_MENU = (
    "Please select the special calculation:\n"
    "1. Square root\n"
    "2. Cosine\n"
    "3. Sine\n"
    "4. Exponentiation\n"
    "5. Logarithm\n"
    "Enter your choice: "
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


def division(a, b):
    """Return a / b truncated toward zero."""
    if b == 0:
        raise ZeroDivisionError("Error: Division by 0 is not valid")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def mod(a, b):
    """Return the remainder of the truncated division; it takes the sign of a."""
    if b == 0:
        raise ZeroDivisionError("Error: Division by 0 is not valid")
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def square(x):
    """Return the square root of a non-negative number."""
    if x < 0:
        raise ValueError("Error: The input value must be greater than or equal to 0")
    return math.sqrt(x)


def cosine(x):
    """Return the cosine of x radians."""
    return math.cos(x)


def sine(x):
    """Return the sine of x radians."""
    return math.sin(x)


def expon(base, exp):
    """Return base raised to exp."""
    return _pow(base, exp)


def logarithm(x):
    """Return the natural logarithm of a positive number."""
    if x <= 0:
        raise ValueError("Error: The input value must be greater than 0")
    return math.log(x)


def _basic(num_1, operator, num_2):
    if operator == "+":
        return f"The sum of {num_1} & {num_2} = {add(num_1, num_2)}"
    if operator == "-":
        return f"The difference of {num_1} & {num_2} = {sub(num_1, num_2)}"
    if operator == "*":
        return f"The product of {num_1} & {num_2} = {mul(num_1, num_2)}"
    if operator in ("/", "%") and num_2 == 0:
        raise ZeroDivisionError(_DIVISION_BY_ZERO)
    if operator == "/":
        return f"The quotient of {num_1} / {num_2} = {division(num_1, num_2)}"
    if operator == "%":
        return f"The remainder of {num_1} / {num_2} = {mod(num_1, num_2)}"
    raise ValueError("Invalid operator. Please try again.")


def basic_calculation(expression):
    """Evaluate ``num1 operator num2`` on integers and return the line to show."""
    match = _EXPRESSION.match(expression)
    if match is None:
        raise ValueError(_INVALID_INPUT)
    left, operator, right = match.groups()
    return _basic(int(left), operator, int(right))


class _Scanner:
    """Reads lines, integers, numbers and characters from one stream."""

    def __init__(self, stream):
        self._stream = stream
        self._rest = ""

    def _fill(self):
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line

    def line(self):
        text = self._rest or self._fill()
        self._rest = ""
        return text.split("\n", 1)[0]

    def _skip(self):
        self._rest = self._rest.lstrip()
        while not self._rest:
            self._rest = self._fill().lstrip()

    def _take(self, pattern):
        self._skip()
        match = pattern.match(self._rest)
        if match is None:
            raise ValueError(_INVALID_INPUT)
        self._rest = self._rest[match.end():]
        return match.group()

    def integer(self):
        return int(self._take(_INTEGER))

    def number(self):
        return float(self._take(_NUMBER))

    def character(self):
        return self._take(_CHARACTER)

    def choice(self):
        """Read an integer, or discard the next word and return None."""
        try:
            return self.integer()
        except ValueError:
            parts = self._rest.split(None, 1)
            self._rest = parts[1] if len(parts) > 1 else ""
            return None


def _special(scanner):
    print("Please enter a number: ", end="", flush=True)
    num_3 = scanner.number()
    if num_3 < 0:
        print("Error: the input value must be greater than or equal to 0")
        return
    print(_SPECIAL_MENU, end="", flush=True)
    choice = scanner.choice()
    if choice == 1:
        print(f"The square root of {num_3:.2f} is {square(num_3):.2f}")
    elif choice == 2:
        print(f"The cosine of {num_3:.2f} is {cosine(num_3):.2f}")
    elif choice == 3:
        print(f"The sine of {num_3:.2f} is {sine(num_3):.2f}")
    elif choice == 4:
        print("Please enter the exponent: ", end="", flush=True)
        num_4 = scanner.number()
        print(f"{num_3:.2f} raised to the power of {num_4:.2f} is {expon(num_3, num_4):.2f}")
    elif choice == 5:
        print(f"The logarithm of {num_3:.2f} is {logarithm(num_3):.2f}")
    else:
        print("Invalid choice. Please try again.")


def _clear_screen():
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _leave(message):
    print(message, end="", flush=True)
    time.sleep(0.5)
    for _ in range(3):
        time.sleep(0.5)
        print(" .", end="", flush=True)
        time.sleep(0.4)
    time.sleep(0.7)
    _clear_screen()


def main(argv=None):
    """Greet the user and run calculations until they choose to exit."""
    scanner = _Scanner(sys.stdin)
    tries = 0
    try:
        print("Please enter your name: ", end="", flush=True)
        name = scanner.line()
        print(f"Hello {name}, I am a simple implementation of a calculator")
        print(_CAPABILITIES, end="")
        while True:
            print(
                "Please enter 1 for basic calculations or 2 for special calculations, "
                "or 3 to exit: ",
                end="",
                flush=True,
            )
            opt = scanner.choice()
            if opt == 1:
                print(
                    "Please make a calculation in the format 'num1 operator num2' "
                    "(e.g., 2 + 2): ",
                    end="",
                    flush=True,
                )
                try:
                    print(_basic(scanner.integer(), scanner.character(), scanner.integer()))
                except (ValueError, ZeroDivisionError) as error:
                    print(error)
            elif opt == 2:
                try:
                    _special(scanner)
                except ValueError as error:
                    print(error)
            elif opt == 3:
                _leave("Exiting the calculator")
                break
            else:
                print("Invalid selection. Please try again.")
                tries += 1
                if tries == 3:
                    _leave("Exceeded trial period. Exiting the calculator")
                    break
    except EOFError:
        print()
    return 0