"""In-memory copy of a file for repeated byte-range reads."""

from __future__ import annotations

import os
from pathlib import Path

from genco.file_reader import read_all_bytes
from genco.string_helper import to_str


class FileCache:
    """Holds a file's bytes so slices can be read without touching the disk."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._content = read_all_bytes(self.path)

    def get_content(self, start_byte: int, end_byte: int) -> str:
        """Return the bytes ``[start_byte, end_byte)`` decoded as UTF-8."""
        if not 0 <= start_byte <= end_byte <= len(self._content):
            raise IndexError(
                f"Byte range [{start_byte}, {end_byte}) out of bounds for "
                f"{len(self._content)} bytes"
            )
        return to_str(self._content[start_byte:end_byte])