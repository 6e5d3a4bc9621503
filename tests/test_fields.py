import pytest

from response_mapper.fields import (
    add_mapping,
    field_choices,
    mapping_from_row,
    mappings_from_rows,
    mappings_to_rows,
    remove_mapping,
    update_mapping,
)
from response_mapper.models import FieldMapping, MappingConfig, TargetCategory, label_for


def test_label_lookup():
    assert label_for("attributes", "room_count") == "Room Count"
    assert label_for("data", "occupancy") == "Occupancy"
    assert label_for("data", "region") is None
    assert label_for("bogus", "region") is None


def test_output_label_falls_back_to_identifier():
    assert FieldMapping(id="1", internal_field="region").output_label == "Region"
    assert FieldMapping(id="1", internal_type="data", internal_field="adr").output_label == "adr"


def test_field_choices():
    assert field_choices("data") == [("Occupancy", "occupancy")]
    assert field_choices(TargetCategory.ATTRIBUTES)[0] == ("Region", "region")


def test_add_mapping_defaults():
    mappings = add_mapping([], mapping_id="x")
    assert mappings == [FieldMapping(id="x", external_path="", internal_type="attributes", internal_field="region")]
    assert add_mapping(mappings)[1].id != "x"


def test_changing_category_resets_field():
    mappings = [FieldMapping(id="1", external_path="3", internal_field="brand")]
    updated = update_mapping(mappings, "1", "internal_type", "data")
    assert updated[0].internal_type is TargetCategory.DATA
    assert updated[0].internal_field == "occupancy"
    back = update_mapping(updated, "1", "internal_type", "attributes")
    assert back[0].internal_field == "region"
    assert mappings[0].internal_field == "brand"


def test_update_other_fields():
    mappings = [FieldMapping(id="1"), FieldMapping(id="2")]
    updated = update_mapping(mappings, "2", "external_path", "$.x")
    assert updated[0].external_path == ""
    assert updated[1].external_path == "$.x"


def test_update_unknown_field_raises():
    with pytest.raises(ValueError):
        update_mapping([FieldMapping(id="1")], "1", "id", "2")


def test_update_field_within_category():
    mappings = [FieldMapping(id="1", internal_type=TargetCategory.ATTRIBUTES)]
    assert update_mapping(mappings, "1", "internal_field", "brand")[0].internal_field == "brand"


def test_update_field_from_other_category_raises():
    mappings = [FieldMapping(id="1", internal_type=TargetCategory.DATA, internal_field="occupancy")]
    with pytest.raises(ValueError):
        update_mapping(mappings, "1", "internal_field", "region")
    assert mappings[0].internal_field == "occupancy"


def test_remove_mapping():
    mappings = [FieldMapping(id="1"), FieldMapping(id="2")]
    assert [m.id for m in remove_mapping(mappings, "1")] == ["2"]


def test_row_with_foreign_field_gets_category_default():
    m = mapping_from_row(["19", "data", "region"], "1")
    assert m.internal_field == "occupancy"


def test_rows_skip_blank_sources_and_bad_categories():
    rows = [["3", "attributes", "brand"], ["", "data", "occupancy"], ["4", "nope", "x"], ["5"]]
    mappings = mappings_from_rows(rows)
    assert [(m.external_path, m.internal_field) for m in mappings] == [("3", "brand")]


def test_rows_round_trip_default_config():
    mappings = MappingConfig().mappings
    rows = mappings_to_rows(mappings)
    assert rows == [["3", "attributes", "region"], ["19", "data", "occupancy"]]
    assert [m.internal_field for m in mappings_from_rows(rows)] == ["region", "occupancy"]
