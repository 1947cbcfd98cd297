"""This module defines the `schematics` models used to describe boxes.

Boxes are serialized as their center and extent, each a list of three floats.
"""
from typing import List

from schematics import models
from schematics import types

from spatial.box import Box


def Vec3d(**kwargs) -> types.ListType:
    """Returns a 3D vector type."""
    return types.ListType(types.FloatType(), min_size=3, max_size=3, **kwargs)


class BoxSpec(models.Model):
    """Represents an axis-aligned 3D box.

    Attributes:
        center: Center of the box.
        extent: Half-widths of the box along x, y and z. Negative values are
            accepted and made positive when the box is built.
    """
    center = Vec3d(required=True)
    extent = Vec3d(required=True)


class BoxSpecList(models.Model):
    """A collection of boxes, as stored in a box file."""
    boxes = types.ListType(types.ModelType(BoxSpec), default=list)


def box_to_spec(box: Box) -> BoxSpec:
    return BoxSpec({
        "center": box.center.to_list(),
        "extent": box.extent.to_list(),
    })


def box_from_spec(spec: BoxSpec) -> Box:
    """Builds a box from its schema.

    Args:
        spec: The box description.

    Returns:
        A new box.

    Raises:
        schematics.exceptions.DataError: If `spec` fails validation.
    """
    spec.validate()
    return Box(spec.center, spec.extent)


def boxes_to_spec_list(boxes: List[Box]) -> BoxSpecList:
    return BoxSpecList({"boxes": [box_to_spec(box) for box in boxes]})


def boxes_from_spec_list(spec_list: BoxSpecList) -> List[Box]:
    spec_list.validate()
    return [box_from_spec(spec) for spec in spec_list.boxes]
