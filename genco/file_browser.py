"""Finding files inside directories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from genco.directory_browser import read_dir
from genco.logger import log_warning

_JAVA_EXTENSION = ".java"


def get_first_file_from_dir_if_exists(
    path: str | os.PathLike, filenames: Iterable[str]
) -> Path | None:
    """Return the first file in ``path`` whose name is one of ``filenames``."""
    directory = Path(path)
    if not directory.is_dir():
        log_warning(
            'Function "get_first_file_if_exists" requires a directory, '
            f"found: {str(directory)!r}"
        )
        return None
    wanted = set(filenames)
    return next(
        (
            entry
            for entry in read_dir(directory)
            if entry.is_file() and entry.name in wanted
        ),
        None,
    )


def get_file_map(path: str | os.PathLike) -> dict[str, Path]:
    """Map each regular file's name in ``path`` to its path."""
    return {entry.name: entry for entry in read_dir(path) if entry.is_file()}


def do_last_element_in_path_ends_with(path: str | os.PathLike, ending: str) -> bool:
    """Whether the last component of ``path`` ends with ``ending``."""
    parts = Path(path).parts
    if not parts:
        raise ValueError("Last item in path must exist")
    return parts[-1].endswith(ending)


def remove_java_extension(java_file_name: str) -> str:
    """Drop the trailing five characters of a ``.java`` file name."""
    if len(java_file_name) < len(_JAVA_EXTENSION):
        raise ValueError(f'"{java_file_name}" is too short to hold a java extension')
    return java_file_name[: -len(_JAVA_EXTENSION)]