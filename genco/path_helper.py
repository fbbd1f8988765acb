"""Path display helpers."""

from __future__ import annotations

import os
from pathlib import Path


def try_to_absolute_path(file: str | os.PathLike) -> str:
    """Return the canonical path of ``file`` if it exists, else the path as given."""
    path = Path(file)
    if not path.exists():
        return str(path)
    try:
        return str(path.resolve(strict=True))
    except OSError:
        return str(path)