"""Collecting byte-range edits of a file and writing them out in one go."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from genco.file_editor import create_or_replace_file_with_bytes
from genco.file_reader import read_all_bytes
from genco.path_helper import try_to_absolute_path

_NEW_LINE = b"\n"


class FileOverwritingError(ValueError):
    """Raised when edits can not be created or applied to a file."""


@dataclass(frozen=True)
class FileOverwritingItem:
    """One edit: replace ``[start_byte, end_byte)`` or append at the end."""

    start_byte: int | None
    end_byte: int | None
    previous_new_line: bool
    to_append: bool
    content: str

    def __post_init__(self) -> None:
        if self.to_append:
            if self.start_byte is not None or self.end_byte is not None:
                raise FileOverwritingError(
                    "Can not create FileOverwritingItem type 'to_append' and set "
                    "intermediate bytes at the same time."
                )
            return
        if self.start_byte is None or self.end_byte is None:
            raise FileOverwritingError(
                "Can not create FileOverwritingItem without start & end bytes selected."
            )
        if self.start_byte < 0:
            raise FileOverwritingError(
                "Can not create FileOverwritingItem with a negative start byte."
            )
        if self.start_byte > self.end_byte:
            raise FileOverwritingError(
                "Can not create FileOverwritingItem with start byte after end_byte."
            )

    def content_bytes(self) -> bytes:
        """Return the bytes to write, with a leading newline if requested."""
        encoded = self.content.encode("utf-8")
        return _NEW_LINE + encoded if self.previous_new_line else encoded


class FileOverwriting:
    """Pending edits of ``input_file``, applied together when written."""

    def __init__(self, input_file: str | os.PathLike) -> None:
        self.input_file = Path(input_file)
        self.items: list[FileOverwritingItem] = []

    @classmethod
    def from_path(cls, file_path: str | os.PathLike) -> FileOverwriting:
        """Create edits for an existing regular file."""
        path = Path(file_path)
        if not path.is_file():
            raise FileOverwritingError(
                "Error creating FileOverwriting with invalid input file path:\n"
                f'"{try_to_absolute_path(path)}"\n'
            )
        return cls(path)

    @classmethod
    def from_unchecked_path(cls, file_path: str | os.PathLike) -> FileOverwriting:
        """Create edits without checking that the file exists."""
        return cls(file_path)

    def append_with_previous_newline(self, content: str) -> None:
        """Append a newline and ``content`` at the end of the file."""
        self.items.append(FileOverwritingItem(None, None, True, True, content))

    def insert_content_at(self, byte: int, content: str) -> None:
        """Insert ``content`` before byte ``byte``."""
        self.items.append(FileOverwritingItem(byte, byte, False, False, content))

    def insert_content_with_previous_newline_at(self, byte: int, content: str) -> None:
        """Insert a newline and ``content`` before byte ``byte``."""
        self.items.append(FileOverwritingItem(byte, byte, True, False, content))

    def replace(self, start_byte: int, end_byte: int, content: str) -> None:
        """Replace bytes ``[start_byte, end_byte)`` with ``content``."""
        self.items.append(
            FileOverwritingItem(start_byte, end_byte, False, False, content)
        )

    def written_buffer(self) -> bytes:
        """Return the file content with every edit applied."""
        data = read_all_bytes(self.input_file)
        intermediate, to_append = self._prepare_to_overwrite(len(data))

        result = bytearray()
        position = 0
        for item in intermediate:
            result += data[position : item.start_byte]
            result += item.content_bytes()
            position = item.end_byte
        result += data[position:]
        for item in to_append:
            result += item.content_bytes()
        return bytes(result)

    def write_all_to_file(self, output_file: str | os.PathLike) -> None:
        """Write the edited content to ``output_file``, creating it if needed."""
        create_or_replace_file_with_bytes(output_file, self.written_buffer())

    def write_all(self) -> None:
        """Write the edited content back over the input file."""
        create_or_replace_file_with_bytes(self.input_file, self.written_buffer())

    def _prepare_to_overwrite(
        self, input_size: int
    ) -> tuple[list[FileOverwritingItem], list[FileOverwritingItem]]:
        intermediate = sorted(
            (item for item in self.items if not item.to_append),
            key=lambda item: item.start_byte,
        )
        self._check_replacements(intermediate, input_size)
        to_append = [item for item in self.items if item.to_append]
        if len(intermediate) + len(to_append) != len(self.items):
            raise FileOverwritingError(
                "Not all the elements from FileOverwriting.content_nodes are valid writes"
            )
        return intermediate, to_append

    def _check_replacements(
        self, items: list[FileOverwritingItem], input_size: int
    ) -> None:
        max_end_byte = max((item.end_byte for item in items), default=0)
        if max_end_byte > input_size:
            raise FileOverwritingError(
                f"Invalid FileOverwritingItem with end_byte {max_end_byte} to resource "
                f'with {input_size} bytes: "{self.input_file}"'
            )
        for previous, current in zip(items, items[1:]):
            if current.start_byte < previous.end_byte:
                raise FileOverwritingError(
                    "Error: can not overwrite resource, bytes "
                    f"[{current.start_byte}, {current.end_byte}] intersect with "
                    f"[{previous.start_byte}, {previous.end_byte}] at resource "
                    f'"{self.input_file}"'
                )