import numpy as np
import pytest

from spatial import GeometryError, Vector3


def test_create_new_components():
    vec = Vector3.create_new(1, -2, 3.5)
    assert vec.x == 1
    assert vec.y == -2
    assert vec.z == 3.5


def test_create_new_defaults_to_origin():
    assert Vector3.create_new() == Vector3(0, 0, 0)


def test_components_writable():
    vec = Vector3.create_new(1, 2, 3)
    vec.x = 4
    vec.z = -1
    np.testing.assert_array_equal(vec.to_array(), [4, 2, -1])


def test_arithmetic():
    a = Vector3.create_new(1, 2, 3)
    b = Vector3.create_new(-1, 4, 0.5)

    np.testing.assert_array_almost_equal((a + b).to_array(), [0, 6, 3.5])
    np.testing.assert_array_almost_equal((a - b).to_array(), [2, -2, 2.5])
    np.testing.assert_array_almost_equal((-a).to_array(), [-1, -2, -3])
    np.testing.assert_array_almost_equal(abs(b * -2).to_array(), [2, 8, 1])
    np.testing.assert_array_almost_equal((2 * a).to_array(), [2, 4, 6])
    np.testing.assert_array_almost_equal((a / 2).to_array(), [0.5, 1, 1.5])


def test_arithmetic_does_not_mutate_operands():
    a = Vector3.create_new(1, 2, 3)
    b = Vector3.create_new(1, 1, 1)
    a + b
    abs(-a)
    assert a == Vector3(1, 2, 3)
    assert b == Vector3(1, 1, 1)


def test_from_array_copies():
    arr = np.array([1.0, 2.0, 3.0])
    vec = Vector3.from_array(arr)
    arr[0] = 10
    assert vec.x == 1

    other = Vector3.from_array(vec)
    other.y = 7
    assert vec.y == 2


@pytest.mark.parametrize("values", [
    [1, 2],
    [1, 2, 3, 4],
    [],
])
def test_from_array_wrong_size_raises_geometry_error(values):
    with pytest.raises(GeometryError, match="Expected exactly 3 components"):
        Vector3.from_array(values)


def test_set_and_iter():
    vec = Vector3().set(3, 2, 1)
    assert list(vec) == [3, 2, 1]
    assert vec[1] == 2
    assert len(vec) == 3


def test_equality():
    assert Vector3(1, 2, 3) == Vector3(1, 2, 3)
    assert Vector3(1, 2, 3) != Vector3(1, 2, 3.5)
    assert Vector3(1, 2, 3) != [1, 2, 3]
