"""Axis-aligned bounding box described by a center and a per-axis extent.

The extent holds the half-widths of the box along x, y and z and is kept
non-negative on every mutation, so a box can be built from arbitrarily signed
inputs. All point queries are closed: points on a face belong to the box.
"""
from typing import Dict, Union

import numpy as np

from spatial._helpers import is_scalar
from spatial.corner import Corner, to_corner
from spatial.error import GeometryError
from spatial.vector3 import Vector3

VectorLike = Union[Vector3, np.ndarray, list, tuple]


class Box:
    """Axis-aligned box.

    Boxes own their `center` and `extent` vectors: inputs are copied on the
    way in, and derived points are returned as new vectors.

    Attributes:
        center: Geometric center of the box.
        extent: Half-widths along each axis. Every component is `>= 0`.
    """

    def __init__(self, center: VectorLike = None,
                 extent: VectorLike = None) -> None:
        if center is None:
            center = Vector3.create_new(0, 0, 0)
        if extent is None:
            extent = Vector3.create_new(0.5, 0.5, 0.5)

        self.center = Vector3.from_array(center)
        self.extent = _normalize_extent(extent)

    @staticmethod
    def create_new(*args: float) -> "Box":
        """Creates a new box.

        Called without arguments this returns the unit box: centered at the
        origin with side length 1 on every axis. Called with six numbers
        `(cx, cy, cz, ex, ey, ez)` it returns a box centered at `(cx, cy, cz)`
        with extent `(|ex|, |ey|, |ez|)`.

        Raises:
            GeometryError: If neither zero nor six arguments are given.
        """
        if not args:
            return Box()
        if len(args) != 6:
            raise GeometryError(
                "Expected 0 or 6 arguments, got {}".format(len(args)))
        return Box(args[:3], args[3:])

    @staticmethod
    def from_points(point1: VectorLike, point2: VectorLike) -> "Box":
        """Creates the smallest box containing two arbitrary points.

        The points do not need to be ordered: the center is their midpoint
        and the extent their per-axis half-span.

        Args:
            point1: First corner.
            point2: Opposite corner.

        Returns:
            A new box.
        """
        p1 = Vector3.from_array(point1)
        p2 = Vector3.from_array(point2)
        return Box((p1 + p2) / 2, abs(p1 - p2) / 2)

    def set_extent(self, *args: Union[float, VectorLike]) -> None:
        """Sets the half-widths of the box.

        Accepts either three numbers `(ex, ey, ez)` or a single vector. The
        sign of each component is dropped.
        """
        self.extent = _normalize_extent(_vector_from_args(args))

    def set_center(self, *args: Union[float, VectorLike]) -> None:
        """Moves the box. Accepts three numbers or a single vector."""
        self.center = _vector_from_args(args)

    @property
    def min_point(self) -> Vector3:
        return self.center - self.extent

    @property
    def max_point(self) -> Vector3:
        return self.center + self.extent

    def calculate_area(self) -> float:
        """Returns the product of the full side lengths of the box.

        The unit box yields 1 and a box with extent (1, 1, 1) yields 8.
        """
        return float(np.prod(2 * self.extent.to_array()))

    def calculate_volume(self) -> float:
        return self.calculate_area()

    def calculate_surface_area(self) -> float:
        """Returns the summed area of the six faces of the box."""
        w, h, d = 2 * self.extent.to_array()
        return float(2 * (w * h + h * d + w * d))

    def get_corner_point(self, which: Union[Corner, str]) -> Vector3:
        """Returns the position of a corner of the box.

        Left/Right select -x/+x, Bottom/Top select -y/+y and Front/Back
        select +z/-z.

        Args:
            which: The `Corner` (or its name) to compute.

        Returns:
            A new vector holding the corner position.

        Raises:
            GeometryError: If `which` is not a known corner.
        """
        sx, sy, sz = to_corner(which).signs
        return Vector3(self.center.x + sx * self.extent.x,
                       self.center.y + sy * self.extent.y,
                       self.center.z + sz * self.extent.z)

    def get_corner_points(self) -> Dict[Corner, Vector3]:
        """Returns all eight corners keyed by their identifier."""
        return {corner: self.get_corner_point(corner) for corner in Corner}

    def intersects_aabb(self, *args: Union[float, VectorLike]) -> bool:
        """Checks whether a point lies inside or on the box.

        The point is given either as a single vector or as three numbers.
        The test is exact (no tolerance) and includes the boundary. Any NaN
        coordinate, in the point or in the box, makes the test fail.

        Returns:
            True if `|p - center| <= extent` holds along every axis.
        """
        point = _vector_from_args(args).to_array()
        dist = np.abs(point - self.center.to_array())
        return bool(np.all(dist <= self.extent.to_array()))

    def copy(self) -> "Box":
        return Box(self.center, self.extent)

    def __eq__(self, other) -> bool:
        if isinstance(other, Box):
            return self.center == other.center and self.extent == other.extent
        return False

    def __repr__(self) -> str:
        return "Box(center={}, extent={})".format(self.center, self.extent)


def _normalize_extent(extent: VectorLike) -> Vector3:
    """Returns a copy of `extent` with every component made non-negative."""
    return abs(Vector3.from_array(extent))


def _vector_from_args(args) -> Vector3:
    """Builds a vector from either `(vector,)` or `(x, y, z)`."""
    if len(args) == 1 and not is_scalar(args[0]):
        return Vector3.from_array(args[0])
    if len(args) == 3 and all(is_scalar(arg) for arg in args):
        return Vector3.create_new(*args)
    raise GeometryError(
        "Expected a single vector or three numbers, got {}".format(args))
