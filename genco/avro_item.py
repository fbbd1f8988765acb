"""Avro schema items and their types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class AvroItemKind(Enum):
    """The kind of an Avro type."""

    ENUM = auto()
    RECORD_SIMPLE = auto()
    RECORD = auto()
    RECORD_NAME = auto()
    ARRAY = auto()
    ARRAY_ITEMS = auto()
    NULL = auto()
    INT = auto()
    LONG = auto()
    FLOAT = auto()
    DOUBLE = auto()
    STRING = auto()
    BYTES = auto()
    BOOLEAN = auto()
    MAP = auto()


@dataclass(frozen=True)
class AvroItemType:
    """An Avro type; some kinds carry a value.

    ``RECORD`` holds an :class:`AvroItem`, ``RECORD_NAME`` a type name,
    ``ARRAY`` a tuple of union member types and ``ARRAY_ITEMS`` the type of
    the array's elements. Every other kind holds ``None``.
    """

    kind: AvroItemKind
    value: Union[AvroItem, str, tuple, AvroItemType, None] = None

    def __post_init__(self) -> None:
        if self.kind is AvroItemKind.ARRAY and isinstance(self.value, list):
            object.__setattr__(self, "value", tuple(self.value))
        expected = {
            AvroItemKind.RECORD: AvroItem,
            AvroItemKind.RECORD_NAME: str,
            AvroItemKind.ARRAY: tuple,
            AvroItemKind.ARRAY_ITEMS: AvroItemType,
        }.get(self.kind)
        if expected is None:
            if self.value is not None:
                raise ValueError(f"Avro type {self.kind.name} takes no value")
            return
        if not isinstance(self.value, expected):
            raise ValueError(
                f"Avro type {self.kind.name} requires a {expected.__name__} value"
            )
        if self.kind is AvroItemKind.ARRAY and not all(
            isinstance(member, AvroItemType) for member in self.value
        ):
            raise ValueError("Avro type ARRAY requires AvroItemType members")


@dataclass(frozen=True, kw_only=True)
class AvroItem:
    """An Avro schema, record field or nested type description."""

    item_type: AvroItemType
    name: str | None = None
    namespace: str | None = None
    doc: str | None = None
    symbols: tuple[str, ...] | None = None
    default: str | None = None
    fields: tuple[AvroItem, ...] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.symbols, list):
            object.__setattr__(self, "symbols", tuple(self.symbols))
        if isinstance(self.fields, list):
            object.__setattr__(self, "fields", tuple(self.fields))

    def is_just_type(self) -> bool:
        """Whether the item carries nothing but its type."""
        return (
            self.name is None
            and self.namespace is None
            and self.doc is None
            and self.symbols is None
            and self.default is None
            and self.fields is None
        )