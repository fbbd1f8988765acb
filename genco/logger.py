"""Minimal console logging."""

from __future__ import annotations


class UnrecoverableError(RuntimeError):
    """Raised after logging an error the program can not recover from."""


def log_warning(warn_message: str) -> None:
    """Print a warning line."""
    print(f"WARN: {warn_message}")


def log_unrecoverable_error(error_message: str) -> None:
    """Print an error line and abort with :class:`UnrecoverableError`."""
    print(f"ERROR: {error_message}")
    raise UnrecoverableError("Unexpected program end.")