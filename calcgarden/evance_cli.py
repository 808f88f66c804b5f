"""Numbered-menu front end of the scientific calculator."""

import re
import sys

from calcgarden.evance_ops import (
    CalcError,
    add,
    division,
    exponent,
    factorial,
    fib,
    logten,
    mod,
    mul,
    root,
    sub,
)

_DECIMAL = re.compile(
    r"\s*[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_HEXADECIMAL = re.compile(r"\s*[+-]?0[xX][0-9a-fA-F.]+(?:[pP][+-]?\d+)?")
_INTEGER_PREFIX = re.compile(r"[+-]?\d+")
_INVALID = "Error: Input must be a double or an integer."

_BINARY = {1: ("+", add), 2: ("-", sub), 3: ("*", mul), 4: ("/", division)}

_MENU = (
    "\nPlease choose an operation:\n"
    "1. Addition\n"
    "2. Subtraction\n"
    "3. Multiplication\n"
    "4. Division\n"
    "5. Modulo\n"
    "6. Nth Root\n"
    "7. Exponentiation\n"
    "8. log\u2081\u2080\n"
    "9. Factorial\n"
    "10. Fibonacci\n"
    "Enter your choice (Ctrl+C to quit): "
)


def valid_input(text):
    """Return text as a number, or raise CalcError if any of it is not a number."""
    if text == "":
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _HEXADECIMAL.fullmatch(text):
        try:
            return float.fromhex(text.strip())
        except ValueError:
            pass
    raise CalcError(_INVALID)


def two_operand_calc(n, m, choice):
    """Apply operation 1-5 to two operands and return the line to show."""
    a, b = valid_input(n), valid_input(m)
    if choice == 5:
        return f"{a:.0f} % {b:.0f} = {mod(a, b):.0f}"
    try:
        symbol, operation = _BINARY[choice]
    except KeyError:
        raise ValueError(f"no two-operand operation {choice}") from None
    return f"{a:.2f} {symbol} {b:.2f} = {operation(a, b):.2f}"


def single_operand_calc(n, choice):
    """Apply operation 8-10 to one operand and return the line to show."""
    a = valid_input(n)
    if choice == 8:
        return f"log\u2081\u2080({a:.2f}) = {logten(a):.2f}"
    if choice == 9:
        return f"{a:.0f}! = {factorial(int(a))}"
    if choice == 10:
        return f"Fibonacci of {a:.0f} = {fib(int(a))}"
    raise ValueError(f"no single-operand operation {choice}")


def special_calc(n, m, choice):
    """Apply the root (6) or power (7) operation and return the line to show."""
    a, b = valid_input(n), valid_input(m)
    if choice == 6:
        return f"{b:.2f}\u221a{a:.2f} = {root(a, b):.2f}"
    if choice == 7:
        return f"{a:.2f} ^ {b:.2f} = {exponent(a, b):.2f}"
    raise ValueError(f"no special operation {choice}")


def _tokens(stream):
    for line in iter(stream.readline, ""):
        yield from line.split()


def _ask(tokens, prompt):
    print(prompt, end="", flush=True)
    return next(tokens)


def _read_choice(tokens):
    match = _INTEGER_PREFIX.match(next(tokens))
    return int(match.group()) if match else None


def main(argv=None):
    """Run the menu loop until input ends or an error stops it."""
    tokens = _tokens(sys.stdin)
    print("Welcome to the Calculator Program")
    print("=" * 44, end="")
    try:
        while True:
            print(_MENU, end="", flush=True)
            choice = _read_choice(tokens)
            if choice is not None and 1 <= choice <= 5:
                first = _ask(tokens, "Enter first number: ")
                second = _ask(tokens, "Enter second number: ")
                print(two_operand_calc(first, second, choice))
            elif choice == 6:
                first = _ask(tokens, "Enter \u221aroot: ")
                second = _ask(tokens, "Enter n\u221a: ")
                print(special_calc(first, second, choice))
            elif choice == 7:
                first = _ask(tokens, "Enter base: ")
                second = _ask(tokens, "Enter exponent: ")
                print(special_calc(first, second, choice))
            elif choice is not None and 8 <= choice <= 10:
                print(single_operand_calc(_ask(tokens, "Enter number: "), choice))
            else:
                print("Error: Invalid input.")
                return 1
    except StopIteration:
        print()
        return 0
    except (CalcError, ValueError, OverflowError) as error:
        print(error)
        return 1