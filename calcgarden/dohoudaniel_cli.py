"""Guided calculator session: greeting, two whole numbers, an operator, a result."""

import re
import sys
import time

from calcgarden.dohoudaniel_ops import is_valid_operator, perform_calculation

MAX_USERNAME_LENGTH = 25
_INTEGER = re.compile(r"[+-]?\d+")

_INTRO = (
    ("Thank you for using this basic calculator.\n", 2),
    ("This calculator takes in two numbers and your arithmetic operator.\n\n", 2),
    ("The arithmetic operators are:\n", 2),
    ("Addition: +\n", 1),
    ("Subtraction: -\n", 1),
    ("Multiplication: *\n", 1),
    ("Division: /\n", 2),
    ("\nRemember to enter valid numbers and an arithmetic operator as listed...\n\n", 1),
    (".", 1),
    (".", 1),
    (".", 1),
    (".", 1),
    (".\n\n", 1),
)


def read_username(max_length):
    """Prompt for a name and return at most max_length - 1 characters of it."""
    print("Enter your username (max. of 25 chars): ", end="", flush=True)
    text = sys.stdin.readline(max(max_length - 1, 0)) if max_length > 1 else ""
    time.sleep(3)
    return text.split("\n", 1)[0]


def intro_message():
    """Print the introduction that lists the operators."""
    for text, pause in _INTRO:
        print(text, end="", flush=True)
        time.sleep(pause)


def result_message(result):
    """Return the line that reports a result."""
    return f"The result of your arithmetic operation is {result:.2f}."


def exit_message():
    """Print the closing message."""
    print("\n\nThank you for this basic calculator.", flush=True)
    time.sleep(2)
    print("Recompile to use again...", flush=True)
    time.sleep(1)


class _Scanner:
    """Reads whole numbers and raw characters the way formatted input does."""

    def __init__(self, stream):
        self._stream = stream
        self._rest = ""

    def _fill(self):
        line = self._stream.readline()
        if not line:
            raise EOFError
        self._rest += line

    def integer(self):
        while not self._rest.strip():
            self._rest = ""
            self._fill()
        self._rest = self._rest.lstrip()
        match = _INTEGER.match(self._rest)
        if match is None:
            raise ValueError("not a whole number")
        self._rest = self._rest[match.end():]
        return int(match.group())

    def character(self):
        if not self._rest:
            self._fill()
        char, self._rest = self._rest[0], self._rest[1:]
        return char


def _read_integer(scanner, prompt, error):
    print(prompt, end="", flush=True)
    try:
        return scanner.integer()
    except (EOFError, ValueError):
        print(error)
        return None


def main(argv=None):
    """Run one guided calculation on standard input."""
    print("\n\nWelcome!.", flush=True)
    time.sleep(2)
    username = read_username(MAX_USERNAME_LENGTH)
    print(f"\nHello, {username}!", flush=True)
    time.sleep(1)
    intro_message()

    scanner = _Scanner(sys.stdin)
    num1 = _read_integer(
        scanner,
        "Enter your first number: ",
        "Error: First number invalid! Please enter a valid number.",
    )
    if num1 is None:
        return 1
    num2 = _read_integer(
        scanner,
        "Enter your second number: ",
        "Error: Second number invalid! Please enter a valid number.",
    )
    if num2 is None:
        return 1

    try:
        scanner.character()
        print("Enter your arithmetic operator: ", end="", flush=True)
        operator = scanner.character()
    except EOFError:
        operator = ""
    if not is_valid_operator(operator):
        print("Error: Invalid operator! Please enter a valid arithmetic operator.")
        return 1

    try:
        result = perform_calculation(num1, num2, operator)
    except (ZeroDivisionError, ValueError) as error:
        print(error)
        return 1
    time.sleep(1)
    print("Performing operation...", flush=True)
    time.sleep(4)
    print(result_message(result) + "\n", flush=True)
    time.sleep(2)
    time.sleep(4)

    exit_message()
    print(f"Goodbye, {username}!")
    time.sleep(2)
    return 0