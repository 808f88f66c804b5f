"""Interactive front end of the menu calculator."""

import math
import re
import time

from calcgarden.edwin_ops import OPERATIONS, execute_operation, is_trig

_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_VALID_OPERATORS = ", ".join(OPERATIONS)
_AGAIN_MESSAGE = "Invalid input. Please try again."


class SessionEnded(Exception):
    """Raised when the user types "off" or input runs out."""

    def __init__(self, new_line=False):
        super().__init__("session ended")
        self.new_line = new_line


def parse_number(text):
    """Parse the leading number of text, ignoring what follows it."""
    match = _NUMBER_PREFIX.match(text.strip())
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group())


def _read_line(prompt):
    try:
        return input(prompt)
    except EOFError:
        raise SessionEnded(new_line=True) from None


def read_number(prompt_name):
    """Prompt until a number is entered and return it."""
    while True:
        line = _read_line(f"Enter the value of {prompt_name}: ")
        if line == "off":
            raise SessionEnded()
        try:
            return parse_number(line)
        except ValueError:
            print(_AGAIN_MESSAGE)


def read_operator():
    """Prompt until a known operator is entered and return it."""
    while True:
        operator = _read_line("Enter the operator: ").strip()
        if operator == "off":
            raise SessionEnded()
        if operator in OPERATIONS:
            return operator
        print(_AGAIN_MESSAGE)
        time.sleep(0.32)
        print(f"Valid operators are: {_VALID_OPERATORS}")
        time.sleep(0.5)


def _print_sleep(message):
    time.sleep(1.5)
    print(message)


def welcome():
    """Greet the user, list the operators and return the user's name."""
    print("\n  C A L C U L A T O R  \n_______________________\n")
    print("Welcome to the calculator!")
    name = _read_line("What's your name: ").strip()
    if name == "off":
        raise SessionEnded()
    if name[:1].isascii() and name[:1].islower():
        name = name[0].upper() + name[1:]
    time.sleep(0.2)
    print(f"\nHi, {name}!\n")
    print("These are the valid operators:")
    for line in (
        "+ - adds first and second operand",
        "- - subtracts second from first operand",
        "* - multiplies first operand by second operand",
        "/ - divides first operand by second operand",
        "^ - raises first operand to power of second operand",
        "root - takes second operand'th root of first operand",
        "sin, cos & tan - takes sin, cos and tan of angle (degrees)",
        '\nEnter "off" or press Ctrl + D at any time to exit\n',
    ):
        _print_sleep(line)
    return name


def format_result(num1, operator, num2, result):
    """Render one calculation as the calculator shows it."""
    if operator == "root":
        if num2 != 2:
            return f"\\{num2:.0f}|{num1:.4f} = {result:.4f}"
        return f"\\|{num1:.4f} = {result:.4f}"
    if is_trig(operator):
        return f"{operator}({num1:0.2f}) = {result:.4f}"
    return f"{num1:.4f} {operator} {num2:.4f} = {result:.4f}"


def _print_thank_you(new_line):
    if new_line:
        print()
    print("\nThank you for using the calculator")
    print("Goodbye!")


def main(argv=None):
    """Run calculations until the user types "off" or input ends."""
    try:
        welcome()
        while True:
            num1 = read_number("the first operand")
            operator = read_operator()
            num2 = 0.0 if is_trig(operator) else read_number("the second operand")
            if operator == "/" and num2 == 0:
                print("Zero Division error\n")
            if operator == "tan" and num1 == 90:
                print("Math error: Tan 90 is infinite\n")
                continue
            result = execute_operation(num1, num2, operator)
            if math.isinf(result):
                continue
            extra = "\n" if operator == "root" and num2 == 2 else ""
            print(format_result(num1, operator, num2, result), end="\n\n" + extra)
    except SessionEnded as ended:
        _print_thank_you(ended.new_line)
    return 0