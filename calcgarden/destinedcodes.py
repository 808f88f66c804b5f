"""One-shot evaluator of a simple arithmetic expression."""

import re

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan)"
_EXPRESSION = re.compile(rf"\s*({_NUMBER})\s*(\S)\s*({_NUMBER})", re.IGNORECASE)


def parse_expression(text):
    """Split ``number operator number`` into a (float, str, float) triple."""
    match = _EXPRESSION.match(text)
    if match is None:
        raise ValueError("Error: Invalid expression.")
    left, operator, right = match.groups()
    return float(left), operator, float(right)


def evaluate(num1, operator, num2):
    """Apply one of +, -, * or / to the two numbers."""
    if operator == "+":
        return num1 + num2
    if operator == "-":
        return num1 - num2
    if operator == "*":
        return num1 * num2
    if operator == "/":
        if num2 == 0:
            raise ZeroDivisionError("Error: Division by zero is not allowed.")
        return num1 / num2
    raise ValueError(f"Error: Invalid operator '{operator}'.")


def main(argv=None):
    """Read one expression from standard input and print its value."""
    print("Enter a simple arithmetic expression. Example: 23 * 5")
    print("(allowed operators: +, -, *, or /)")
    try:
        text = input(" => ")
    except EOFError:
        text = ""
    try:
        result = evaluate(*parse_expression(text))
    except (ValueError, ZeroDivisionError) as error:
        print(error)
        return 1
    print(f"Result: {result:.2f}")
    return 0