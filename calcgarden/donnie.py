"""Demo calculator with an expression mode and a base-10 logarithm mode."""

import math
import re
import time

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan)"
_EXPRESSION = re.compile(rf"\s*({_NUMBER})\s*(\S)\s*({_NUMBER})", re.IGNORECASE)


class CalculatorError(Exception):
    """Base class for calculator errors; the message is what the user sees."""

    message = "Error: Input not accepted!"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when dividing by zero."""

    message = "Error: Division by Zero is not allowed!"


class NegativeNumberError(CalculatorError, ValueError):
    """Raised when a logarithm is asked of a number that is not positive."""

    message = "Error: You can't input Negative numbers!"


class WrongInputError(CalculatorError, ValueError):
    """Raised when the user's input cannot be understood."""

    message = "Error: Input not accepted!"


def add(first, second):
    """Return the sum of two numbers."""
    return first + second


def subtract(first, second):
    """Return first minus second."""
    return first - second


def multiply(first, second):
    """Return the product of two numbers."""
    return first * second


def divide(dividend, divisor):
    """Return dividend / divisor, refusing a zero divisor."""
    if divisor == 0:
        raise DivisionByZeroError()
    return dividend / divisor


def logarithm(num):
    """Return the base-10 logarithm of a positive number."""
    if not num > 0:
        raise NegativeNumberError()
    return math.log10(num)


_OPERATORS = {"+": add, "-": subtract, "*": multiply, "/": divide}


def evaluate_expression(text):
    """Evaluate an expression such as ``2 + 2`` and return the result."""
    match = _EXPRESSION.match(text)
    if match is None:
        raise WrongInputError()
    left, operator, right = match.groups()
    operation = _OPERATORS.get(operator)
    if operation is None:
        raise WrongInputError()
    return operation(float(left), float(right))


def _intro():
    print("Welcome To This Demo Calculator!")
    time.sleep(2)
    print("Loading Files...")
    time.sleep(5)
    print("Files Compiled and Ready to Operate!")
    time.sleep(3)
    name = input("\nWhat is your Name?\n==> ")
    print(f"Nice to have you here {name}\n")


def _read_rule(prompt):
    return input(prompt).strip()[:1]


def _logarithm_step():
    text = input("Enter the number: ")
    try:
        number = float(text.strip())
    except ValueError:
        raise WrongInputError() from None
    result = logarithm(number)
    print(f"{result:.2f}")


def _expression_step():
    text = input("Enter your Expression: ")
    result = evaluate_expression(text)
    print(f"{result:.2f}")


def main(argv=None):
    """Run the interactive calculator on standard input."""
    try:
        _intro()
        time.sleep(2)
        print("Time to perform some operations")
        print("Rules:\n\t1.) Enter 'e' for arithmetic expression. (e.g 2 + 2)")
        print("\t\tAllowed Operators(+, -, *, /)")
        ruler = _read_rule("\t2.) Enter 'l' for Logarithm Question\n==> ")
        while True:
            if ruler == "q":
                print("Exiting the calculator program.")
                break
            try:
                if ruler == "l":
                    _logarithm_step()
                elif ruler == "e":
                    _expression_step()
            except CalculatorError as error:
                print(error)
            ruler = _read_rule("\nEnter Rules: e | l | q ")
    except EOFError:
        print()
    return 0