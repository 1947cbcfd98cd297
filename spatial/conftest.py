import pytest

from spatial import math_utils


@pytest.fixture
def eps():
    """Tolerance used when comparing computed coordinates."""
    return math_utils.DEFAULT_EPSILON
