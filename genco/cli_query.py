"""Asking the user for values on the command line."""

from __future__ import annotations

import sys
from pathlib import Path


def _ask(input_text: str) -> str:
    print(input_text)
    return sys.stdin.readline()


def ask_path(input_text: str) -> Path:
    """Show ``input_text`` and return the line typed, as a path."""
    return Path(_ask(input_text))


def ask_input(input_text: str) -> str:
    """Show ``input_text`` and return the line typed, without its last character."""
    return _ask(input_text)[:-1]