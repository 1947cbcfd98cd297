"""Reading and writing boxes to YAML and JSON."""
from typing import List

import json
import logging

import yaml

from spatial.box import Box
from spatial import schema_types

logger = logging.getLogger(__name__)


def save_to_yml(boxes: List[Box], filename: str) -> None:
    """Saves a list of boxes to a yml file.

    Args:
        boxes: Boxes to save.
        filename: String specifying the yml file name to save to.
    """
    spec_list = schema_types.boxes_to_spec_list(boxes)
    with open(filename, "w") as fp:
        yaml.safe_dump(spec_list.to_primitive(), fp)
    logger.debug("Saved %d boxes to %s", len(boxes), filename)


def load_from_yml(filename: str) -> List[Box]:
    """Reads boxes from a yml file.

    The file holds a single `boxes` entry listing a center and an extent per
    box.

    Args:
        filename: String specifying the box yml filename.

    Returns:
        List of boxes in file order.
    """
    with open(filename) as fp:
        spec_list = schema_types.BoxSpecList(yaml.safe_load(fp))
    boxes = schema_types.boxes_from_spec_list(spec_list)
    logger.debug("Loaded %d boxes from %s", len(boxes), filename)
    return boxes


def dumps(box: Box) -> str:
    """Serializes a box into a JSON string."""
    return json.dumps(schema_types.box_to_spec(box).to_primitive())


def loads(serialized_box: str) -> Box:
    """Deserializes a box from a JSON string produced by `dumps`."""
    spec = schema_types.BoxSpec(json.loads(serialized_box))
    return schema_types.box_from_spec(spec)
