"""Symbolic identifiers for the eight corners of an axis-aligned box."""
from typing import Tuple, Union

from enum import Enum

from spatial.error import GeometryError


class Corner(Enum):
    """
    Enum for corner->axis sign mapping

    Each value holds the sign applied to the extent along x, y and z.
    Left/Right is -x/+x, Bottom/Top is -y/+y and Front/Back is +z/-z.
    """
    FrontBottomLeft = (-1, -1, 1)
    FrontBottomRight = (1, -1, 1)
    FrontTopLeft = (-1, 1, 1)
    FrontTopRight = (1, 1, 1)
    BackBottomLeft = (-1, -1, -1)
    BackBottomRight = (1, -1, -1)
    BackTopLeft = (-1, 1, -1)
    BackTopRight = (1, 1, -1)

    @property
    def signs(self) -> Tuple[int, int, int]:
        return self.value


def to_corner(which: Union[Corner, str]) -> Corner:
    """Resolves a corner identifier.

     Args:
         which: Either a `Corner` or the name of one, e.g. "FrontTopLeft".

     Returns:
         The matching `Corner`.

     Raises:
         GeometryError: If `which` does not name one of the eight corners.
    """
    if isinstance(which, Corner):
        return which
    if isinstance(which, str) and which in Corner.__members__:
        return Corner[which]
    raise GeometryError("Unknown corner identifier, got: {}".format(which))
