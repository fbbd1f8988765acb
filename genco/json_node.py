"""Concrete syntax tree of a JSON file, with byte offsets into the file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, NoReturn

from genco.file_reader import read_all_bytes
from genco.json_node_type import JsonNodeType
from genco.parser_node import ParserNode

_WHITESPACE = b" \t\n\r\f\v"
_NUMBER = re.compile(rb"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_ESCAPABLE = frozenset(
    {b'"', b"\\", b"/", b"b", b"f", b"n", b"r", b"t", b"u"}
)
_UNSUPPORTED_LITERALS = (b"true", b"false")

_PRINTABLE_TYPES = frozenset(
    {
        JsonNodeType.QUOTATION_MARK,
        JsonNodeType.STRING,
        JsonNodeType.COMMA,
        JsonNodeType.NUMBER,
        JsonNodeType.L_BRACE,
        JsonNodeType.R_BRACE,
        JsonNodeType.COLON,
        JsonNodeType.L_BRACKET,
        JsonNodeType.R_BRACKET,
        JsonNodeType.NULL,
    }
)


class JsonParseError(ValueError):
    """Raised when a file is not JSON this parser can represent."""


@dataclass
class JsonNode(ParserNode):
    """A node of a JSON syntax tree covering ``[start_byte, end_byte)``."""

    file_path: Path
    start_byte: int
    end_byte: int
    children: list[JsonNode] = field(default_factory=list)
    node_type: JsonNodeType | None = None

    @classmethod
    def from_path(cls, file_path: str | os.PathLike) -> JsonNode:
        """Parse the JSON file at ``file_path`` and return its document node."""
        path = Path(file_path)
        data = read_all_bytes(path)
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise JsonParseError(f"Invalid UTF-8 in json file {path}: {err}") from err
        return _Parser(data, path).document()

    def is_composed_node_printable(self) -> bool:
        return self.node_type in _PRINTABLE_TYPES


class _Parser:
    """Recursive descent parser producing :class:`JsonNode` trees."""

    def __init__(self, data: bytes, file_path: Path) -> None:
        self._data = data
        self._path = file_path
        self._pos = 0

    def _error(self, message: str) -> NoReturn:
        raise JsonParseError(f"{message} at byte {self._pos} of {self._path}")

    def _peek(self) -> bytes:
        return self._data[self._pos : self._pos + 1]

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._data) and self._data[self._pos] in _WHITESPACE:
            self._pos += 1

    def _node(
        self,
        node_type: JsonNodeType,
        start: int,
        end: int,
        children: list[JsonNode] | None = None,
    ) -> JsonNode:
        return JsonNode(self._path, start, end, children or [], node_type)

    def _token(self, node_type: JsonNodeType) -> JsonNode:
        start = self._pos
        self._pos += 1
        return self._node(node_type, start, self._pos)

    def _expect(self, char: bytes, node_type: JsonNodeType) -> JsonNode:
        if self._peek() != char:
            self._error(f"Expected {char.decode()!r}")
        return self._token(node_type)

    def document(self) -> JsonNode:
        self._skip_whitespace()
        start = self._pos
        children = []
        while self._pos < len(self._data):
            children.append(self._value())
            self._skip_whitespace()
        return self._node(JsonNodeType.DOCUMENT, start, len(self._data), children)

    def _value(self) -> JsonNode:
        char = self._peek()
        if char == b"{":
            return self._sequence(
                JsonNodeType.OBJECT,
                JsonNodeType.L_BRACE,
                b"}",
                JsonNodeType.R_BRACE,
                self._pair,
            )
        if char == b"[":
            return self._sequence(
                JsonNodeType.ARRAY,
                JsonNodeType.L_BRACKET,
                b"]",
                JsonNodeType.R_BRACKET,
                self._value,
            )
        if char == b'"':
            return self._string()
        if char == b"-" or char.isdigit():
            return self._number()
        if self._data.startswith(b"null", self._pos):
            start = self._pos
            self._pos += 4
            return self._node(JsonNodeType.NULL, start, self._pos)
        for literal in _UNSUPPORTED_LITERALS:
            if self._data.startswith(literal, self._pos):
                raise JsonParseError(
                    f"Not possible to parse JsonNode: {literal.decode()}"
                )
        if not char:
            self._error("Unexpected end of input")
        self._error(f"Unexpected character {char!r}")

    def _sequence(
        self,
        node_type: JsonNodeType,
        open_type: JsonNodeType,
        close_char: bytes,
        close_type: JsonNodeType,
        item: Callable[[], JsonNode],
    ) -> JsonNode:
        start = self._pos
        children = [self._token(open_type)]
        self._skip_whitespace()
        if self._peek() == close_char:
            children.append(self._token(close_type))
            return self._node(node_type, start, self._pos, children)
        while True:
            children.append(item())
            self._skip_whitespace()
            if self._peek() != b",":
                break
            children.append(self._token(JsonNodeType.COMMA))
            self._skip_whitespace()
        children.append(self._expect(close_char, close_type))
        return self._node(node_type, start, self._pos, children)

    def _pair(self) -> JsonNode:
        char = self._peek()
        if char == b'"':
            key = self._string()
        elif char == b"-" or char.isdigit():
            key = self._number()
        else:
            self._error("Expected object key")
        self._skip_whitespace()
        colon = self._expect(b":", JsonNodeType.COLON)
        self._skip_whitespace()
        value = self._value()
        return self._node(
            JsonNodeType.PAIR, key.start_byte, value.end_byte, [key, colon, value]
        )

    def _string(self) -> JsonNode:
        start = self._pos
        children = [self._token(JsonNodeType.QUOTATION_MARK)]
        content_start = self._pos
        escapes = []
        while True:
            char = self._peek()
            if char == b'"':
                break
            if char in (b"", b"\n"):
                self._error("Unterminated string")
            if char == b"\\":
                escape_start = self._pos
                if self._data[self._pos + 1 : self._pos + 2] not in _ESCAPABLE:
                    self._error("Invalid escape sequence")
                self._pos += 2
                escapes.append(
                    self._node(JsonNodeType.ESCAPE_SEQUENCE, escape_start, self._pos)
                )
            else:
                self._pos += 1
        if self._pos > content_start:
            children.append(
                self._node(
                    JsonNodeType.STRING_CONTENT, content_start, self._pos, escapes
                )
            )
        children.append(self._token(JsonNodeType.QUOTATION_MARK))
        return self._node(JsonNodeType.STRING, start, self._pos, children)

    def _number(self) -> JsonNode:
        match = _NUMBER.match(self._data, self._pos)
        if match is None:
            self._error("Invalid number")
        self._pos = match.end()
        return self._node(JsonNodeType.NUMBER, match.start(), match.end())