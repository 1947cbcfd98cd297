import pytest

from spatial import math_utils


@pytest.mark.parametrize("a,b,expected", [
    (1.0, 1.0, True),
    (1.0, 1.0 + 1e-7, True),
    (1.0, 1.0 + 1e-3, False),
    (-2.0, -2.0 - 5e-7, True),
])
def test_equals_with_epsilon(a, b, expected):
    assert math_utils.equals_with_epsilon(a, b) == expected


def test_equals_with_epsilon_custom_tolerance():
    assert math_utils.equals_with_epsilon(1.0, 1.5, epsilon=0.5)
    assert not math_utils.equals_with_epsilon(1.0, 1.6, epsilon=0.5)


def test_equals_with_epsilon_nan_never_equal():
    assert not math_utils.equals_with_epsilon(float("nan"), float("nan"))
