from response_mapper.formats import detect_format, format_mismatch_warning, looks_positional
from response_mapper.models import ResponseFormat


def test_scalar_array_looks_positional():
    assert looks_positional([1, "RENEW", "Hotel", 72]) is True


def test_array_of_arrays_looks_positional(positional_doc):
    assert looks_positional(positional_doc) is True


def test_null_first_item_looks_positional():
    assert looks_positional([None, {"a": 1}]) is True


def test_keyed_shapes_do_not_look_positional(keyed_doc):
    assert looks_positional(keyed_doc) is False
    assert looks_positional([{"id": 1}]) is False
    assert looks_positional([]) is False
    assert looks_positional("text") is False
    assert looks_positional(None) is False


def test_detect_format(positional_doc, keyed_doc):
    assert detect_format(positional_doc) is ResponseFormat.POSITIONAL
    assert detect_format(keyed_doc) is ResponseFormat.JSON


def test_warning_only_when_json_chosen_for_positional_data(positional_doc, keyed_doc):
    assert format_mismatch_warning(positional_doc, "json")
    assert format_mismatch_warning(positional_doc, ResponseFormat.POSITIONAL) is None
    assert format_mismatch_warning(keyed_doc, "json") is None
    assert format_mismatch_warning(keyed_doc, "positional") is None
    assert format_mismatch_warning(None, "json") is None
