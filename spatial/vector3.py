"""Three component vector used by the bounding box types."""
from typing import List, Union

import numbers

import numpy as np

from spatial.error import GeometryError


class Vector3:
    """A 3D vector with float components.

    The components are stored in a length-3 numpy array and can be read and
    written through the `x`, `y` and `z` attributes. Arithmetic always returns
    new vectors.
    """

    __slots__ = ("_data",)

    def __init__(self, x: float = 0, y: float = 0, z: float = 0) -> None:
        self._data = np.array([x, y, z], dtype=float)

    @staticmethod
    def create_new(x: float = 0, y: float = 0, z: float = 0) -> "Vector3":
        """Creates a new vector with the given components."""
        return Vector3(x, y, z)

    @staticmethod
    def from_array(
            values: Union[np.ndarray, List[float], "Vector3"]) -> "Vector3":
        """Creates a vector from any sequence of exactly three numbers.

        Args:
            values: List, tuple, numpy array or another `Vector3`.

        Returns:
            A new vector holding a copy of `values`.

        Raises:
            GeometryError: If `values` does not hold exactly three elements.
        """
        if isinstance(values, Vector3):
            return values.copy()
        arr = np.asarray(values, dtype=float).flatten()
        if arr.size != 3:
            raise GeometryError(
                "Expected exactly 3 components, got {}".format(arr.size))
        vec = Vector3()
        vec._data = arr.copy()
        return vec

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._data[1] = value

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._data[2] = value

    def set(self, x: float, y: float, z: float) -> "Vector3":
        """Overwrites all components in place and returns `self`."""
        self._data[:] = (x, y, z)
        return self

    def to_array(self) -> np.ndarray:
        """Returns a copy of the components as a numpy array."""
        return self._data.copy()

    def to_list(self) -> List[float]:
        return self._data.tolist()

    def copy(self) -> "Vector3":
        return Vector3.from_array(self._data)

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        return iter(self.to_list())

    def __getitem__(self, axis: int) -> float:
        return float(self._data[axis])

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3.from_array(self._data + _as_array(other))

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3.from_array(self._data - _as_array(other))

    def __neg__(self) -> "Vector3":
        return Vector3.from_array(-self._data)

    def __abs__(self) -> "Vector3":
        return Vector3.from_array(np.abs(self._data))

    def __mul__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return Vector3.from_array(self._data * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return Vector3.from_array(self._data / scalar)

    def __eq__(self, other) -> bool:
        if isinstance(other, Vector3):
            return bool(np.all(self._data == other._data))
        return False

    def __repr__(self) -> str:
        return "Vector3({}, {}, {})".format(self.x, self.y, self.z)


def _as_array(value) -> np.ndarray:
    if isinstance(value, Vector3):
        return value._data
    return Vector3.from_array(value)._data
