"""Tolerance helpers for comparing floating point values."""

DEFAULT_EPSILON = 1e-6


def equals_with_epsilon(a: float, b: float,
                        epsilon: float = DEFAULT_EPSILON) -> bool:
    """Checks whether `a` and `b` differ by at most `epsilon`.

    Args:
        a: First value.
        b: Second value.
        epsilon: Allowed absolute deviation.

    Returns:
        True if `|a - b| <= epsilon`.
    """
    return abs(a - b) <= epsilon
