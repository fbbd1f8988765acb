"""Data types of OpenAPI schemas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class IntegerFormat(Enum):
    """Width of an OpenAPI integer."""

    INT32 = "Int32"
    INT64 = "Int64"

    def __str__(self) -> str:
        return self.value


class NumberFormat(Enum):
    """Precision of an OpenAPI number."""

    FLOAT = "Float"
    DOUBLE = "Double"

    def __str__(self) -> str:
        return self.value


class OpenapiKind(Enum):
    """The kind of an OpenAPI data type."""

    INTEGER = auto()
    STRING = auto()
    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    BYTES = auto()
    OBJECT_SIMPLE = auto()
    OBJECT = auto()
    OBJECT_NAME = auto()
    ARRAY = auto()
    ARRAY_ITEMS = auto()

    @property
    def display_name(self) -> str:
        """The kind's name in CamelCase, e.g. ``ObjectName``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True)
class OpenapiDataType:
    """An OpenAPI data type; some kinds carry a value.

    ``INTEGER`` holds an :class:`IntegerFormat`, ``NUMBER`` a
    :class:`NumberFormat`, ``OBJECT`` an ``OpenapiSchema``, ``OBJECT_NAME`` a
    schema name, ``ARRAY`` a tuple of union member types and ``ARRAY_ITEMS``
    the element type. Every other kind holds ``None``.
    """

    kind: OpenapiKind
    value: Any = None

    def __post_init__(self) -> None:
        if self.kind is OpenapiKind.ARRAY and isinstance(self.value, list):
            object.__setattr__(self, "value", tuple(self.value))
        expected = {
            OpenapiKind.INTEGER: IntegerFormat,
            OpenapiKind.NUMBER: NumberFormat,
            OpenapiKind.OBJECT_NAME: str,
            OpenapiKind.ARRAY: tuple,
            OpenapiKind.ARRAY_ITEMS: OpenapiDataType,
        }.get(self.kind)
        if self.kind is OpenapiKind.OBJECT:
            if self.value is None:
                raise ValueError("OpenAPI type OBJECT requires a schema value")
            return
        if expected is None:
            if self.value is not None:
                raise ValueError(f"OpenAPI type {self.kind.name} takes no value")
            return
        if not isinstance(self.value, expected):
            raise ValueError(
                f"OpenAPI type {self.kind.name} requires a {expected.__name__} value"
            )
        if self.kind is OpenapiKind.ARRAY and not all(
            isinstance(member, OpenapiDataType) for member in self.value
        ):
            raise ValueError("OpenAPI type ARRAY requires OpenapiDataType members")

    @classmethod
    def new_int32_type(cls) -> OpenapiDataType:
        return cls(OpenapiKind.INTEGER, IntegerFormat.INT32)

    @classmethod
    def new_int64_type(cls) -> OpenapiDataType:
        return cls(OpenapiKind.INTEGER, IntegerFormat.INT64)

    @classmethod
    def new_float_type(cls) -> OpenapiDataType:
        return cls(OpenapiKind.NUMBER, NumberFormat.FLOAT)

    @classmethod
    def new_double_type(cls) -> OpenapiDataType:
        return cls(OpenapiKind.NUMBER, NumberFormat.DOUBLE)

    def __str__(self) -> str:
        return _debug_text(self).lower()


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _optional(value: Any) -> str:
    return "None" if value is None else f"Some({_debug_text(value)})"


def _schema_debug_text(schema: Any) -> str:
    fields = [
        f"name: {_quote(schema.name)}",
        f"schema_type: {_optional(schema.schema_type)}",
        f"description: {_optional(schema.description)}",
        f"enum_values: {_optional(schema.enum_values)}",
        f"example: {_optional(schema.example)}",
        f"properties: {_optional(schema.properties)}",
    ]
    return f"{type(schema).__name__} {{ {', '.join(fields)} }}"


def _debug_text(value: Any) -> str:
    """Structural description of a value, as used by the type's text form."""
    if value is None:
        return "None"
    if isinstance(value, OpenapiDataType):
        name = value.kind.display_name
        if value.value is None:
            return name
        return f"{name}({_debug_text(value.value)})"
    if isinstance(value, (IntegerFormat, NumberFormat)):
        return value.value
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (tuple, list)):
        return "[" + ", ".join(_debug_text(item) for item in value) + "]"
    return _schema_debug_text(value)