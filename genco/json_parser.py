"""Entry point for parsing JSON files into syntax trees."""

from __future__ import annotations

import os

from genco.json_node import JsonNode


def parse(json_file_path: str | os.PathLike) -> JsonNode:
    """Parse the JSON file and return its document node."""
    return JsonNode.from_path(json_file_path)