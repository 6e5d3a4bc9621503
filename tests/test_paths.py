from response_mapper.paths import parse_index, parse_segment, split_path, strip_root


def test_strip_root_variants():
    assert strip_root("$.a.b") == "a.b"
    assert strip_root("$a") == "a"
    assert strip_root("a.b") == "a.b"


def test_split_path_drops_empty_segments():
    assert split_path("$.a..b") == ["a", "b"]
    assert split_path("$") == []
    assert split_path(None) == []


def test_parse_segment():
    assert parse_segment("items[3]") == ("items", "3")
    assert parse_segment("items[*]") == ("items", "*")
    assert parse_segment("[0]") == ("", "0")
    assert parse_segment("name") == ("name", None)
    assert parse_segment("items[-1]") == ("items[-1]", None)


def test_parse_index():
    assert parse_index("3") == 3
    assert parse_index(" 12 ") == 12
    assert parse_index(4) == 4
    assert parse_index("-1") is None
    assert parse_index("abc") is None
    assert parse_index("") is None
    assert parse_index(True) is None
    assert parse_index(None) is None
