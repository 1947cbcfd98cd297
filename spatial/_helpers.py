import numbers
from typing import Any


def is_scalar(var: Any) -> bool:
    """
    True for real numbers (including numpy scalars), False for vectors and
    complex values.

    Used to tell the `(x, y, z)` form of an overloaded call apart from the
    single vector form.

    :param var: Argument to check.
    """
    return isinstance(var, numbers.Real)
