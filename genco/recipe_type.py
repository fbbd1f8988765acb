"""Languages a recipe can target."""

from __future__ import annotations

from enum import Enum


class RecipeType(Enum):
    """Target language of a recipe."""

    JAVA = "java"

    @classmethod
    def all_types_set_str(cls) -> str:
        """Return the accepted names written as a set, e.g. ``{java}``."""
        return "{" + ", ".join(member.value for member in cls) + "}"

    @classmethod
    def from_str(cls, value: str) -> RecipeType:
        """Return the recipe type named ``value``."""
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(
            f'Unexpected test type "{value}", only values in '
            f"{cls.all_types_set_str()} are allowed"
        )