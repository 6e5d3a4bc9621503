from response_mapper.directory import StaticEntityDirectory
from response_mapper.evaluator import evaluate, map_fields
from response_mapper.models import (
    ABSENT,
    FieldMapping,
    MappingConfig,
    ResolvedRecord,
    ResponseFormat,
    TargetCategory,
    TargetMode,
)


def test_positional_collection(positional_doc, positional_config):
    result = evaluate(positional_doc, positional_config)
    assert [r.entity_key for r in result] == ["RENEW", "HNLMC"]
    assert [r.fields["Region"] for r in result] == [72, 85]
    assert [r.display_name for r in result] == ["Hotel Renew", "Waikiki Beach Marriott"]


def test_keyed_collection_uses_envelope(keyed_config):
    result = evaluate({"data": [{"id": "RENEW", "occupancy": 85}]}, keyed_config)
    assert len(result) == 1
    assert result[0].entity_key == "RENEW"
    assert result[0].fields["Occupancy"] == 85
    assert result[0].fields["Region"] is ABSENT


def test_unknown_entities_get_placeholder_names(keyed_doc, keyed_config):
    result = evaluate(keyed_doc, keyed_config)
    assert result[1].entity_key == "ZZZZZ"
    assert result[1].display_name == "Property ZZZZZ"
    assert result[1].fields == {"Occupancy": None, "Region": ABSENT}


def test_missing_key_becomes_unknown(keyed_config):
    result = evaluate([{"occupancy": 5}], keyed_config)
    assert result[0].entity_key == "unknown"
    assert result[0].display_name == "Property unknown"


def test_injected_directory(positional_doc, positional_config):
    directory = StaticEntityDirectory({"RENEW": "Renewed"})
    result = evaluate(positional_doc, positional_config, directory)
    assert result[0].display_name == "Renewed"
    assert result[1].display_name == "Property HNLMC"


def test_portfolio_resolves_against_whole_document():
    config = MappingConfig(
        target=TargetMode.PORTFOLIO,
        response_format=ResponseFormat.JSON,
        mappings=[
            FieldMapping(id="1", external_path="$.summary.occupancy", internal_type="data", internal_field="occupancy"),
            FieldMapping(id="2", external_path="$.summary.brand", internal_type="attributes", internal_field="brand"),
        ],
    )
    result = evaluate({"summary": {"occupancy": 91, "brand": "Acme"}}, config)
    assert result == {"Occupancy": 91, "Brand": "Acme"}


def test_portfolio_positional():
    config = MappingConfig(
        target=TargetMode.PORTFOLIO,
        response_format=ResponseFormat.POSITIONAL,
        mappings=[FieldMapping(id="1", external_path="2", internal_type="attributes", internal_field="region")],
    )
    assert evaluate([1, 2, "West"], config) == {"Region": "West"}


def test_unknown_field_keeps_raw_identifier():
    mappings = [FieldMapping(id="1", external_path="$.x", internal_type=TargetCategory.DATA, internal_field="adr")]
    assert map_fields({"x": 3}, mappings, ResponseFormat.JSON) == {"adr": 3}


def test_no_document_is_absent(positional_config):
    assert evaluate(None, positional_config) is ABSENT


def test_empty_collection(keyed_config):
    assert evaluate({"data": []}, keyed_config) == []


def test_evaluation_is_repeatable(positional_doc, positional_config):
    first = evaluate(positional_doc, positional_config)
    second = evaluate(positional_doc, positional_config)
    assert first == second
    assert all(isinstance(r, ResolvedRecord) for r in first)


def test_document_is_not_mutated(keyed_doc, keyed_config):
    import copy

    before = copy.deepcopy(keyed_doc)
    evaluate(keyed_doc, keyed_config)
    assert keyed_doc == before


def test_record_to_dict_substitutes_placeholder(keyed_doc, keyed_config):
    record = evaluate(keyed_doc, keyed_config)[1]
    assert record.to_dict("—") == {
        "entityKey": "ZZZZZ",
        "displayName": "Property ZZZZZ",
        "fields": {"Occupancy": None, "Region": "—"},
    }
