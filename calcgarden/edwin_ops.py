"""Operations of the menu calculator: arithmetic, roots, powers and trigonometry in degrees."""

import math

PI = 3.1415926535
TRIG_OPERATORS = ("sin", "cos", "tan")


def _ieee_divide(num1, num2):
    try:
        return num1 / num2
    except ZeroDivisionError:
        if num1 == 0 or math.isnan(num1):
            return math.nan
        return math.copysign(math.inf, num1) * math.copysign(1.0, num2)


def _pow(base, exponent):
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def add(num1, num2):
    """Return num1 + num2."""
    return num1 + num2


def subtract(num1, num2):
    """Return num1 - num2."""
    return num1 - num2


def multiply(num1, num2):
    """Return num1 * num2."""
    return num1 * num2


def divide(num1, num2):
    """Return num1 / num2; a zero divisor gives an infinity or nan."""
    return _ieee_divide(num1, num2)


def root(num1, num2):
    """Return the num2'th root of num1."""
    return _pow(num1, _ieee_divide(1.0, num2))


def power(num1, num2):
    """Return num1 raised to num2."""
    return _pow(num1, num2)


def sin_func(num1, num2):
    """Return the sine of num1 degrees; num2 is ignored."""
    return math.sin(num1 * (PI / 180))


def cos_func(num1, num2):
    """Return the cosine of num1 degrees; num2 is ignored."""
    return math.cos(num1 * (PI / 180))


def tan_func(num1, num2):
    """Return the tangent of num1 degrees; num2 is ignored."""
    return _ieee_divide(sin_func(num1, num2), cos_func(num1, num2))


OPERATIONS = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "root": root,
    "^": power,
    "sin": sin_func,
    "cos": cos_func,
    "tan": tan_func,
}


def is_trig(operator):
    """Tell whether the operator takes a single angle."""
    return operator in TRIG_OPERATORS


def execute_operation(num1, num2, operation):
    """Apply the named operation to the operands."""
    function = OPERATIONS.get(operation)
    if function is None:
        raise ValueError(f"unknown operation {operation!r}")
    return function(num1, num2)