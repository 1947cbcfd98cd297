import pytest
from schematics import exceptions

from spatial import Box, Vector3
from spatial import schema_types


def test_box_to_spec():
    box = Box.create_new(1, 2, 3, 4, 5, 6)
    spec = schema_types.box_to_spec(box)
    spec.validate()
    assert spec.to_primitive() == {
        "center": [1, 2, 3],
        "extent": [4, 5, 6],
    }


def test_box_from_spec_normalizes_extent():
    spec = schema_types.BoxSpec({
        "center": [0, 1, 2],
        "extent": [-1, 2, -3],
    })
    box = schema_types.box_from_spec(spec)
    assert box.center == Vector3(0, 1, 2)
    assert box.extent == Vector3(1, 2, 3)


@pytest.mark.parametrize("data", [
    {"center": [0, 0], "extent": [1, 1, 1]},
    {"center": [0, 0, 0], "extent": [1, 1, 1, 1]},
    {"center": [0, 0, 0]},
])
def test_box_from_spec_invalid_raises_data_error(data):
    with pytest.raises(exceptions.DataError):
        schema_types.box_from_spec(schema_types.BoxSpec(data))


def test_spec_list():
    boxes = [Box.create_new(), Box.create_new(1, 1, 1, 2, 2, 2)]
    spec_list = schema_types.boxes_to_spec_list(boxes)
    assert len(spec_list.to_primitive()["boxes"]) == 2

    loaded = schema_types.boxes_from_spec_list(
        schema_types.BoxSpecList(spec_list.to_primitive()))
    assert loaded == boxes


def test_empty_spec_list():
    spec_list = schema_types.BoxSpecList({})
    assert schema_types.boxes_from_spec_list(spec_list) == []
