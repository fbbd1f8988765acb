"""Reading Avro schema files into :class:`AvroItem` values."""

from __future__ import annotations

import os

from genco import json_parser
from genco.avro_item import AvroItem, AvroItemKind, AvroItemType
from genco.file_cache import FileCache
from genco.json_node import JsonNode
from genco.json_node_type import JsonNodeType
from genco.string_helper import trim_quotation_marks

_BASIC_TYPES = {
    '"record"': AvroItemKind.RECORD_SIMPLE,
    '"enum"': AvroItemKind.ENUM,
    '"null"': AvroItemKind.NULL,
    '"int"': AvroItemKind.INT,
    '"long"': AvroItemKind.LONG,
    '"float"': AvroItemKind.FLOAT,
    '"double"': AvroItemKind.DOUBLE,
    '"string"': AvroItemKind.STRING,
    '"bytes"': AvroItemKind.BYTES,
    '"boolean"': AvroItemKind.BOOLEAN,
    '"map"': AvroItemKind.MAP,
}

_NOT_ARRAY_MEMBERS = frozenset(
    {
        JsonNodeType.ARRAY,
        JsonNodeType.COMMA,
        JsonNodeType.L_BRACE,
        JsonNodeType.R_BRACE,
        JsonNodeType.COLON,
        JsonNodeType.L_BRACKET,
        JsonNodeType.R_BRACKET,
        JsonNodeType.NULL,
    }
)


class AvroParseError(ValueError):
    """Raised when a schema file lacks what an Avro item needs."""


def parse(json_file_path: str | os.PathLike) -> list[AvroItem]:
    """Return the outermost Avro objects described in a schema file."""
    root = json_parser.parse(json_file_path)
    reader = _AvroReader(FileCache(json_file_path))
    return [reader.item(node) for node in _first_level(root, JsonNodeType.OBJECT)]


def _first_level(root: JsonNode, node_type: JsonNodeType) -> list[JsonNode]:
    """Return the nodes of ``node_type`` closest to ``root``, without nesting."""
    if root.node_type == node_type:
        return [root]
    return [
        found for child in root.children for found in _first_level(child, node_type)
    ]


def _types_in_array(node: JsonNode) -> list[JsonNode]:
    """Return the member type nodes of a union, skipping punctuation and nulls."""
    if node.node_type not in _NOT_ARRAY_MEMBERS:
        return [node]
    return [found for child in node.children for found in _types_in_array(child)]


class _AvroReader:
    def __init__(self, cache: FileCache) -> None:
        self._cache = cache

    def _text(self, node: JsonNode) -> str:
        return self._cache.get_content(node.start_byte, node.end_byte)

    def item(self, node: JsonNode) -> AvroItem:
        pairs = {
            self._text(pair.children[0]): pair.children[2]
            for pair in _first_level(node, JsonNodeType.PAIR)
        }
        return AvroItem(
            name=self._content(pairs, '"name"'),
            namespace=self._content(pairs, '"namespace"'),
            doc=self._content(pairs, '"doc"'),
            item_type=self._item_type(pairs),
            symbols=self._symbols(pairs),
            default=self._content(pairs, '"default"'),
            fields=self._fields(pairs),
        )

    def _content(self, pairs: dict[str, JsonNode], key: str) -> str | None:
        node = pairs.get(key)
        return None if node is None else trim_quotation_marks(self._text(node))

    def _symbols(self, pairs: dict[str, JsonNode]) -> tuple[str, ...] | None:
        node = pairs.get('"symbols"')
        if node is None:
            return None
        return tuple(
            trim_quotation_marks(self._text(symbol))
            for symbol in _first_level(node, JsonNodeType.STRING)
        )

    def _fields(self, pairs: dict[str, JsonNode]) -> tuple[AvroItem, ...] | None:
        node = pairs.get('"fields"')
        if node is None or node.node_type != JsonNodeType.ARRAY:
            return None
        return tuple(self.item(obj) for obj in _first_level(node, JsonNodeType.OBJECT))

    def _item_type(self, pairs: dict[str, JsonNode]) -> AvroItemType:
        type_node = pairs.get('"type"')
        if (
            type_node is not None
            and type_node.node_type == JsonNodeType.STRING
            and self._text(type_node) == '"array"'
        ):
            items = pairs.get('"items"')
            if items is None:
                raise AvroParseError(
                    'Avro resource must have "items" when "type" is provided.'
                )
            return AvroItemType(AvroItemKind.ARRAY_ITEMS, self._base_type(items))
        return self._base_type(type_node)

    def _base_type(self, type_node: JsonNode | None) -> AvroItemType:
        if type_node is not None:
            if type_node.node_type == JsonNodeType.STRING:
                content = self._text(type_node)
                kind = _BASIC_TYPES.get(content)
                if kind is not None:
                    return AvroItemType(kind)
                return AvroItemType(
                    AvroItemKind.RECORD_NAME, trim_quotation_marks(content)
                )
            if type_node.node_type == JsonNodeType.ARRAY:
                return AvroItemType(
                    AvroItemKind.ARRAY,
                    tuple(
                        self._base_type(member)
                        for member in _types_in_array(type_node)
                    ),
                )
            if type_node.node_type == JsonNodeType.OBJECT:
                return AvroItemType(AvroItemKind.RECORD, self.item(type_node))
        raise AvroParseError("Avro resource must have base type.")