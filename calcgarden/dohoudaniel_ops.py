"""Whole-number arithmetic of the guided four-operation calculator."""

DIVISION_BY_ZERO = "Error: Division by zero is not allowed."
INVALID_OPERATOR = "You have entered an invalid operator. Try again."
OPERATORS = ("+", "-", "*", "/")


def _whole(number):
    """Truncate a number toward zero, as the operations take whole numbers."""
    return int(number)


def add(num1, num2):
    """Return the sum of the whole parts of two numbers as a float."""
    return float(_whole(num1) + _whole(num2))


def subtract(num1, num2):
    """Return num1 minus num2, using their whole parts, as a float."""
    return float(_whole(num1) - _whole(num2))


def mult(num1, num2):
    """Return the product of the whole parts of two numbers as a float."""
    return float(_whole(num1) * _whole(num2))


def divide(num1, num2):
    """Return num1 / num2 using their whole parts, refusing a zero divisor."""
    dividend, divisor = _whole(num1), _whole(num2)
    if divisor == 0:
        raise ZeroDivisionError(DIVISION_BY_ZERO)
    return dividend / divisor


def is_valid_operator(operator):
    """Tell whether operator is one of +, -, * or /."""
    return operator in OPERATORS


_OPERATIONS = {"+": add, "-": subtract, "*": mult, "/": divide}


def perform_calculation(num1, num2, operator):
    """Apply the operator to the two numbers and return the result."""
    operation = _OPERATIONS.get(operator)
    if operation is None:
        raise ValueError(INVALID_OPERATOR)
    return operation(num1, num2)