"""Common behaviour of syntax tree nodes that point into a source file."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Sequence

from genco.file_cache import FileCache
from genco.file_reader import read_string
from genco.string_helper import escape_str_for_json


class ParserNode(ABC):
    """A node covering bytes ``[start_byte, end_byte)`` of ``file_path``.

    Subclasses provide the attributes ``file_path``, ``start_byte``,
    ``end_byte``, ``children`` and ``node_type`` (``None`` when unknown).
    """

    file_path: Path
    start_byte: int
    end_byte: int
    children: Sequence[ParserNode]
    node_type: Any

    @classmethod
    @abstractmethod
    def from_path(cls, file_path):
        """Parse the file at ``file_path`` and return its root node."""

    @abstractmethod
    def is_composed_node_printable(self) -> bool:
        """Whether a node with children is printed as its text in a tree dump."""

    def tree_str(self, show_bytes: bool = False) -> str:
        """Return the tree below this node as a JSON-like text."""
        cache = FileCache(self.file_path)
        return self._tree_str(cache, 0, 1, show_bytes)

    def _tree_str(
        self, cache: FileCache, depth: int, child_index: int, show_bytes: bool
    ) -> str:
        indent = "  " * (depth + 1)
        parts = []
        if depth == 0:
            parts.append("{\n")
        parts.append(indent)

        type_str = "UnknownType" if self.node_type is None else str(self.node_type)
        if show_bytes:
            parts.append(
                f'"{child_index}. {type_str} [{self.start_byte}, {self.end_byte}]"'
            )
        else:
            parts.append(f'"{child_index}. {type_str}"')

        children = self.children
        if self.is_composed_node_printable() or not children:
            escaped = escape_str_for_json(self.content_from_cache(cache))
            parts.append(f': "{escaped}"')
        else:
            parts.append(": {\n")
            rendered = [
                child._tree_str(cache, depth + 1, index, show_bytes)
                for index, child in enumerate(children, start=1)
            ]
            parts.append(",\n".join(rendered))
            parts.append("\n")
            parts.append(indent + "}")

        if depth == 0:
            parts.append("\n}")
        return "".join(parts)

    def content(self) -> str:
        """Read this node's text from its file."""
        return read_string(self.file_path, self.start_byte, self.end_byte)

    def content_from_cache(self, file_cache: FileCache) -> str:
        """Return this node's text from an already loaded file."""
        return file_cache.get_content(self.start_byte, self.end_byte)

    def content_with_previous_empty_space(self) -> str:
        """Return this node's text starting at the beginning of its line.

        On the file's first line the text starts at the node itself.
        """
        line_start = 0
        with open(self.file_path, "rb") as handle:
            for line in handle:
                if line_start + len(line) > self.start_byte:
                    break
                line_start += len(line)
        if line_start == 0:
            line_start = self.start_byte
        return read_string(self.file_path, line_start, self.end_byte)

    def depth_first_search_bytes(self, node_type) -> tuple[int, int] | None:
        """Return the byte range of the first node of ``node_type``, depth first."""
        if self.node_type is not None and self.node_type == node_type:
            return (self.start_byte, self.end_byte)
        for child in self.children:
            found = child.depth_first_search_bytes(node_type)
            if found is not None:
                return found
        return None