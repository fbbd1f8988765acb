"""Reading whole files or byte ranges of files."""

from __future__ import annotations

import os
from pathlib import Path

from genco.path_helper import try_to_absolute_path
from genco.string_helper import to_str


class FileReadError(OSError):
    """Raised when a file can not be read as requested."""


def read_all_bytes(file_path: str | os.PathLike) -> bytes:
    """Return the full content of a file."""
    path = Path(file_path)
    try:
        handle = open(path, "rb")
    except OSError as err:
        raise FileReadError(
            f'File can not be opened to read ({err}):\n"{try_to_absolute_path(path)}"\n'
        ) from err
    with handle:
        try:
            return handle.read()
        except OSError as err:
            raise FileReadError(
                f"Can not read file ({err}):\n{try_to_absolute_path(path)}\n"
            ) from err


def read_to_string(file: str | os.PathLike) -> str:
    """Return the full content of a UTF-8 text file."""
    path = Path(file)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise FileReadError(
            f"Unable to read file:\n{try_to_absolute_path(path)}\n"
        ) from err


def read_bytes(file: str | os.PathLike, start_byte: int, end_byte: int) -> bytes:
    """Return exactly the bytes ``[start_byte, end_byte)`` of a file."""
    path = Path(file)
    if start_byte < 0 or end_byte < start_byte:
        raise FileReadError(
            f"Invalid byte range [{start_byte}, {end_byte}) for file:\n"
            f"{try_to_absolute_path(path)}\n"
        )
    try:
        with open(path, "rb") as handle:
            handle.seek(start_byte)
            data = handle.read(end_byte - start_byte)
    except OSError as err:
        raise FileReadError(
            f'File can not be opened to read ({err}):\n"{try_to_absolute_path(path)}"\n'
        ) from err
    if len(data) != end_byte - start_byte:
        raise FileReadError(
            f"File ends before byte {end_byte}:\n{try_to_absolute_path(path)}\n"
        )
    return data


def read_string(file: str | os.PathLike, start_byte: int, end_byte: int) -> str:
    """Return the bytes ``[start_byte, end_byte)`` of a file decoded as UTF-8."""
    return to_str(read_bytes(file, start_byte, end_byte))


def get_number_of_bytes(file: str | os.PathLike) -> int:
    """Return the size of a file in bytes."""
    path = Path(file)
    try:
        return path.stat().st_size
    except OSError as err:
        raise FileReadError(
            f"Can not get bytes from file ({err}):\n{try_to_absolute_path(path)}\n"
        ) from err