"""Semantic version numbers as written in recipe files."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUMBER = re.compile(r"\+?[0-9]+")


def _to_number(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f'can not parse "{text}" to non-negative number')
    return int(text)


@dataclass(frozen=True)
class SemVer:
    """A ``major.minor.patch`` version; missing parts default to zero."""

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, semver_str: str) -> SemVer:
        """Parse ``x``, ``x.y`` or ``x.y.z``."""
        parts = semver_str.split(".")
        if not 1 <= len(parts) <= 3:
            raise ValueError(f'Invalid SemVer "{semver_str}"')
        return cls(*(_to_number(part) for part in parts))

    def is_greater_than_program_version(self) -> bool:
        """Whether this version is newer than the running program."""
        return False

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"