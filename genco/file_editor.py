"""Creating, replacing and copying files on disk."""

from __future__ import annotations

import os
from pathlib import Path

from genco.path_helper import try_to_absolute_path


class FileEditError(OSError):
    """Raised when a file or directory can not be created, written or removed."""


def _paths_to_create(file_path: Path) -> list[Path]:
    """Return the missing path and its missing ancestors, deepest first."""
    missing = []
    for candidate in (file_path, *file_path.parents):
        if candidate.exists():
            break
        missing.append(candidate)
    return missing


def _make_dir(directory: Path) -> None:
    try:
        directory.mkdir()
    except OSError as err:
        raise FileEditError(str(err)) from err


def _write_from_start(output_file: Path, data: bytes) -> None:
    """Open for writing (creating if needed, without truncating) and write at offset 0."""
    flags = os.O_WRONLY | os.O_CREAT | getattr(os, "O_BINARY", 0)
    try:
        descriptor = os.open(output_file, flags, 0o666)
    except OSError as err:
        raise FileEditError(
            f'File can not be opened to write ({err}):\n"{try_to_absolute_path(output_file)}"\n'
        ) from err
    try:
        with os.fdopen(descriptor, "wb") as handle:
            handle.seek(0)
            handle.write(bytes(data))
    except OSError as err:
        raise FileEditError(
            f"Can not write to file ({err}):\n{try_to_absolute_path(output_file)}\n"
        ) from err


def create_or_replace_file_with_bytes(
    output_file: str | os.PathLike, data: bytes
) -> None:
    """Write ``data`` as the whole content of ``output_file``, creating parents."""
    path = Path(output_file)
    remove_file_if_exists(path)
    create_file_if_not_exist(path)
    replace_bytes_in_existing_file(path, data)


def replace_bytes_in_existing_file(output_file: str | os.PathLike, data: bytes) -> None:
    """Replace the content of an existing file with ``data``."""
    path = Path(output_file)
    try:
        os.remove(path)
    except OSError as err:
        raise FileEditError(str(err)) from err
    _write_from_start(path, data)


def remove_file_if_exists(file_path: str | os.PathLike) -> None:
    """Delete ``file_path`` if it is an existing regular file."""
    path = Path(file_path)
    if path.is_file():
        try:
            os.remove(path)
        except OSError as err:
            raise FileEditError(str(err)) from err


def create_file_if_not_exist(input_file: str | os.PathLike) -> None:
    """Create an empty file, and any missing directories above it."""
    path = Path(input_file)
    if path.exists():
        return
    missing = _paths_to_create(path)
    for directory in reversed(missing[1:]):
        _make_dir(directory)
    try:
        path.touch(exist_ok=False)
    except OSError as err:
        raise FileEditError(str(err)) from err


def copy(input_file: str | os.PathLike, output_file: str | os.PathLike) -> None:
    """Copy the content of ``input_file`` into ``output_file``."""
    source = Path(input_file)
    target = Path(output_file)
    try:
        data = source.read_bytes()
    except OSError as err:
        raise FileEditError(
            f"Error reading resource to get content from {str(source)!r}"
        ) from err
    remove_file_if_exists(target)
    create_file_if_not_exist(target)
    _write_from_start(target, data)


def create_empty_file_if_not_exist_with_ancestor(file: str | os.PathLike) -> None:
    """Create an empty file and its missing ancestors, unless it exists."""
    path = Path(file)
    if path.exists():
        return
    create_ancestor_dirs(path)
    create_non_existent_file_with_content(path, b"")


def create_non_existent_file_with_content(
    output_file: str | os.PathLike, data: bytes
) -> None:
    """Write ``data`` at the start of ``output_file``; its directory must exist."""
    _write_from_start(Path(output_file), data)


def create_ancestor_dirs(input_file: str | os.PathLike) -> Path | None:
    """Create the missing directories above ``input_file``.

    Returns the highest directory created, or ``None`` if none was needed.
    """
    missing = _paths_to_create(Path(input_file))
    highest_created = None
    for directory in reversed(missing[1:]):
        if not directory.exists():
            _make_dir(directory)
            if highest_created is None:
                highest_created = directory
    return highest_created