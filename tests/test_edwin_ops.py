import math

import pytest

from calcgarden import edwin_ops


def test_known_angles():
    assert edwin_ops.sin_func(30.0, 0.0) == pytest.approx(0.5)
    assert edwin_ops.cos_func(60.0, 0.0) == pytest.approx(0.5)
    assert edwin_ops.tan_func(45.0, 0.0) == pytest.approx(1.0)


def test_trig_ignores_second_operand():
    assert edwin_ops.sin_func(30.0, 0.0) == edwin_ops.sin_func(30.0, 99.0)
    assert edwin_ops.cos_func(30.0, 0.0) == edwin_ops.cos_func(30.0, -5.0)


@pytest.mark.parametrize("angle", [0.0, 17.0, 135.0, 300.0])
def test_trig_identities(angle):
    s = edwin_ops.sin_func(angle, 0.0)
    c = edwin_ops.cos_func(angle, 0.0)
    assert s * s + c * c == pytest.approx(1.0)
    assert edwin_ops.tan_func(angle, 0.0) == pytest.approx(s / c)


@pytest.mark.parametrize("x, n", [(2.0, 2.0), (3.0, 3.0), (1.5, 4.0)])
def test_root_inverts_power(x, n):
    assert edwin_ops.root(edwin_ops.power(x, n), n) == pytest.approx(x)


def test_divide_by_zero_is_infinite():
    assert edwin_ops.divide(1.0, 0.0) == math.inf
    assert edwin_ops.divide(-2.0, 0.0) == -math.inf
    assert str(edwin_ops.divide(0.0, 0.0)) == "nan"


def test_power_of_negative_base_with_fraction_is_nan():
    result = edwin_ops.power(-8.0, 0.5)
    assert str(result) == "nan"


def test_subtract_inverts_add():
    assert edwin_ops.subtract(edwin_ops.add(4.25, 2.0), 2.0) == 4.25


@pytest.mark.parametrize("operation", sorted(edwin_ops.OPERATIONS))
def test_execute_operation_dispatches(operation):
    expected = edwin_ops.OPERATIONS[operation](27.0, 3.0)
    assert edwin_ops.execute_operation(27.0, 3.0, operation) == expected


def test_execute_operation_rejects_unknown():
    with pytest.raises(ValueError):
        edwin_ops.execute_operation(1.0, 2.0, "log")


@pytest.mark.parametrize(
    "operator, expected",
    [("sin", True), ("cos", True), ("tan", True), ("+", False), ("root", False)],
)
def test_is_trig(operator, expected):
    assert edwin_ops.is_trig(operator) is expected


def test_sin_of_180_degrees_uses_truncated_pi():
    result = edwin_ops.sin_func(180.0, 0.0)
    assert result == pytest.approx(0.0, abs=1e-9)
    assert result > 0.0