"""Listing and finding directories."""

from __future__ import annotations

import os
from pathlib import Path


def read_dir(path: str | os.PathLike) -> list[Path]:
    """Return the entries of a directory, sorted by path."""
    directory = Path(path)
    if not directory.is_dir():
        raise NotADirectoryError(f"Error: expecting directory in {str(directory)!r}")
    return sorted(directory.iterdir())


def get_dir_of_file(input_path: str | os.PathLike) -> Path:
    """Return the directory that contains ``input_path``."""
    return Path(input_path).parent


def get_dir_ending_with(input_path: str | os.PathLike, ending: str) -> Path | None:
    """Return the first subdirectory whose path ends with ``ending``."""
    return next(
        (
            entry
            for entry in read_dir(input_path)
            if entry.is_dir() and str(entry).endswith(ending)
        ),
        None,
    )


def get_dir_map(path: str | os.PathLike) -> dict[str, Path]:
    """Map each subdirectory's name to its path."""
    return {entry.name: entry for entry in read_dir(path) if entry.is_dir()}


def get_dir(input_dir: str | os.PathLike, dir_name: str) -> Path | None:
    """Return the subdirectory named ``dir_name``, if any."""
    return next(
        (
            entry
            for entry in read_dir(input_dir)
            if entry.is_dir() and entry.name == dir_name
        ),
        None,
    )


def check_dir_exist(input_dir: str | os.PathLike, start_error_message: str) -> None:
    """Raise ``NotADirectoryError`` unless ``input_dir`` is an existing directory."""
    directory = Path(input_dir)
    if not directory.is_dir():
        raise NotADirectoryError(f"{start_error_message}: {str(directory)!r}")