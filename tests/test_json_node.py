import pytest

from genco.json_node import JsonNode, JsonParseError
from genco.json_node_type import JsonNodeType


def _write(tmp_path, text, name="data.json"):
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return path


def test_object_structure(tmp_path):
    path = _write(tmp_path, '{"a": 1}')

    root = JsonNode.from_path(path)

    assert root.node_type == JsonNodeType.DOCUMENT
    (obj,) = root.children
    assert obj.node_type == JsonNodeType.OBJECT
    assert [child.node_type for child in obj.children] == [
        JsonNodeType.L_BRACE,
        JsonNodeType.PAIR,
        JsonNodeType.R_BRACE,
    ]
    pair = obj.children[1]
    assert [child.node_type for child in pair.children] == [
        JsonNodeType.STRING,
        JsonNodeType.COLON,
        JsonNodeType.NUMBER,
    ]
    assert pair.children[0].content() == '"a"'
    assert pair.children[2].content() == "1"
    assert pair.content() == '"a": 1'


def test_tree_str(tmp_path):
    path = _write(tmp_path, '{"a": 1}')

    result = JsonNode.from_path(path).tree_str()

    expected = (
        "{\n"
        '  "1. Document": {\n'
        '    "1. Object": {\n'
        '      "1. LBrace": "{",\n'
        '      "2. Pair": {\n'
        '        "1. String": "\\"a\\"",\n'
        '        "2. Colon": ":",\n'
        '        "3. Number": "1"\n'
        "      },\n"
        '      "3. RBrace": "}"\n'
        "    }\n"
        "  }\n"
        "}"
    )
    assert result == expected


def test_escape_sequence_is_child_of_string_content(tmp_path):
    path = _write(tmp_path, r'["a\nb"]')

    root = JsonNode.from_path(path)

    string = root.children[0].children[1]
    assert string.node_type == JsonNodeType.STRING
    content = string.children[1]
    assert content.node_type == JsonNodeType.STRING_CONTENT
    assert content.content() == r"a\nb"
    (escape,) = content.children
    assert escape.node_type == JsonNodeType.ESCAPE_SEQUENCE
    assert escape.content() == r"\n"


def test_empty_string_has_only_quotes(tmp_path):
    path = _write(tmp_path, '[""]')

    string = JsonNode.from_path(path).children[0].children[1]

    assert [child.node_type for child in string.children] == [
        JsonNodeType.QUOTATION_MARK,
        JsonNodeType.QUOTATION_MARK,
    ]


def test_non_ascii_content_uses_byte_offsets(tmp_path):
    path = _write(tmp_path, '["é", null]')

    array = JsonNode.from_path(path).children[0]

    assert array.children[1].content() == '"é"'
    assert array.children[3].node_type == JsonNodeType.NULL
    assert array.children[3].content() == "null"


def test_printable_nodes():
    string_node = JsonNode(None, 0, 0, [], JsonNodeType.STRING)
    object_node = JsonNode(None, 0, 0, [], JsonNodeType.OBJECT)

    assert string_node.is_composed_node_printable() is True
    assert object_node.is_composed_node_printable() is False


def test_depth_first_search_bytes(tmp_path):
    path = _write(tmp_path, '{"key": [1, 2]}')

    root = JsonNode.from_path(path)

    start, end = root.depth_first_search_bytes(JsonNodeType.ARRAY)
    assert path.read_bytes()[start:end] == b"[1, 2]"


@pytest.mark.parametrize(
    "text", ['{"a": true}', "[false]", '{"a": 1', "[1,]", '["open', '{"a" 1}', "@"]
)
def test_invalid_json_raises(tmp_path, text):
    path = _write(tmp_path, text)

    with pytest.raises(JsonParseError):
        JsonNode.from_path(path)


def test_invalid_utf8_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_bytes(b'["\xff"]')

    with pytest.raises(JsonParseError):
        JsonNode.from_path(path)