"""Kinds of nodes in a JSON syntax tree."""

from __future__ import annotations

from enum import Enum


class JsonNodeType(Enum):
    """A JSON syntax node kind, valued by the grammar's kind name."""

    DOCUMENT = "document"
    OBJECT = "object"
    L_BRACE = "{"
    R_BRACE = "}"
    L_BRACKET = "["
    R_BRACKET = "]"
    PAIR = "pair"
    STRING = "string"
    STRING_CONTENT = "string_content"
    QUOTATION_MARK = '"'
    NUMBER = "number"
    COMMA = ","
    COLON = ":"
    ARRAY = "array"
    NULL = "null"
    ESCAPE_SEQUENCE = "escape_sequence"

    @classmethod
    def from_kind(cls, kind: str) -> JsonNodeType:
        """Return the node type for a grammar kind name."""
        try:
            return cls(kind)
        except ValueError:
            raise ValueError(f"Unknown json node kind: {kind}") from None

    def __str__(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))