"""String utilities shared by the parsers and generators."""

from __future__ import annotations

import re

_WORD_PATTERN = re.compile(r"[A-Z][a-z]+")


def _split_lines(text: str) -> list[str]:
    """Split into lines on ``\\n`` or ``\\r\\n``, dropping the final empty line."""
    if not text:
        return []
    pieces = text.split("\n")
    terminated = text.endswith("\n")
    if terminated:
        pieces.pop()
    lines = []
    last_index = len(pieces) - 1
    for position, piece in enumerate(pieces):
        ends_with_newline = terminated or position < last_index
        if ends_with_newline and piece.endswith("\r"):
            piece = piece[:-1]
        lines.append(piece)
    return lines


def _escape_line(line: str) -> str:
    return line.replace('"', '\\"')


def _escape_line_with_quotes(line: str) -> str:
    return f'\\"{_escape_line(line)}\\"'


def escape_str_for_json(input_string: str) -> str:
    """Escape text so it can be embedded in a JSON string.

    A single line has its quotation marks escaped; several lines become an
    escaped list of quoted lines.
    """
    lines = _split_lines(input_string)
    if len(lines) == 1:
        return _escape_line(input_string)
    if not lines:
        return ""
    return "[" + ",".join(_escape_line_with_quotes(line) for line in lines) + "]"


def trim_quotation_marks(string: str) -> str:
    """Remove one leading and one trailing quotation mark, if present."""
    if not string:
        return string
    start = 1 if string.startswith('"') else 0
    end = len(string) - (1 if string.endswith('"') else 0)
    if start > end:
        raise ValueError("Can not trim a lone quotation mark")
    return string[start:end]


def _find_words(upper_camel_case_str: str) -> list[str]:
    return _WORD_PATTERN.findall(upper_camel_case_str)


def _first_letter_upper(text: str) -> str:
    return text[:1].upper() + text[1:]


def _first_letter_lower(text: str) -> str:
    return text[:1].lower() + text[1:]


def to_medial_case(upper_camel_case_str: str) -> str:
    """Turn ``UpperCamelCase`` into ``upperCamelCase``."""
    joined = "".join(
        _first_letter_upper(word.lower()) for word in _find_words(upper_camel_case_str)
    )
    return _first_letter_lower(joined)


def to_lowercase_with_hyphens(upper_camel_case_str: str) -> str:
    """Turn ``UpperCamelCase`` into ``upper-camel-case``."""
    return "-".join(word.lower() for word in _find_words(upper_camel_case_str))


def to_lowercase_space_separated(upper_camel_case_str: str) -> str:
    """Turn ``UpperCamelCase`` into ``upper camel case``."""
    return " ".join(word.lower() for word in _find_words(upper_camel_case_str))


def to_str(buf: bytes | bytearray) -> str:
    """Decode UTF-8 bytes, raising ``UnicodeDecodeError`` on invalid input."""
    return bytes(buf).decode("utf-8")