"""
Axis-aligned bounding boxes

A `Box` is stored as a center point and a non-negative extent (per-axis
half-width). It provides its corner points, its area and a closed point
containment test, for use in spatial partitioning, collision detection and
culling.


Dependencies:
- numpy
- schematics   [schema_types, box_io]
- pyyaml       [box_io]
"""
LOG_FORMAT = "[%(asctime)-15s][%(levelname)s][%(module)s][%(funcName)s] %(message)s"

from .error import GeometryError
from .math_utils import DEFAULT_EPSILON
from .math_utils import equals_with_epsilon
from .vector3 import Vector3
from .corner import Corner
from .corner import to_corner
from .box import Box
from . import box_io
from . import schema_types
from . import util
