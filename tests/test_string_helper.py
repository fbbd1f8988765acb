import pytest

from genco import string_helper


def test_trim_quotation_marks():
    assert string_helper.trim_quotation_marks("") == ""
    assert string_helper.trim_quotation_marks('"abc"') == "abc"
    assert string_helper.trim_quotation_marks('"a"b"c"') == 'a"b"c'


def test_trim_quotation_marks_only_one_side():
    assert string_helper.trim_quotation_marks('"abc') == "abc"
    assert string_helper.trim_quotation_marks('abc"') == "abc"
    assert string_helper.trim_quotation_marks("abc") == "abc"


def test_trim_lone_quotation_mark_fails():
    with pytest.raises(ValueError):
        string_helper.trim_quotation_marks('"')


def test_to_medial_case():
    assert string_helper.to_medial_case("MedialCase") == "medialCase"


def test_to_str_from_bytes():
    example = "StringExample"
    assert string_helper.to_str(example.encode()) == example


def test_to_str_invalid_utf8():
    with pytest.raises(UnicodeDecodeError):
        string_helper.to_str(b"\xff\xfe")


def test_to_lowercase_with_hyphens():
    assert string_helper.to_lowercase_with_hyphens("UpperCamelCase") == "upper-camel-case"


def test_to_lowercase_space_separated():
    assert string_helper.to_lowercase_space_separated("UpperCamelCase") == "upper camel case"


def test_escape_single_line():
    assert string_helper.escape_str_for_json('say "hi"') == 'say \\"hi\\"'


def test_escape_multiple_lines():
    assert string_helper.escape_str_for_json("a\nb\nc") == '[\\"a\\",\\"b\\",\\"c\\"]'


def test_escape_empty():
    assert string_helper.escape_str_for_json("") == ""