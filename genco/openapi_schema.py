"""OpenAPI component schemas and their YAML text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from genco.openapi_data_type import OpenapiDataType, OpenapiKind


@dataclass(frozen=True)
class OpenapiSchema:
    """A named OpenAPI schema, possibly with nested properties."""

    name: str
    schema_type: OpenapiDataType | None = None
    description: str | None = None
    enum_values: tuple[str, ...] | None = None
    example: str | None = None
    properties: tuple[OpenapiSchema, ...] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.enum_values, list):
            object.__setattr__(self, "enum_values", tuple(self.enum_values))
        if isinstance(self.properties, list):
            object.__setattr__(self, "properties", tuple(self.properties))

    @classmethod
    def new_enum(
        cls, name: str, description: str | None, enum_values: Iterable[str]
    ) -> OpenapiSchema:
        """A string schema restricted to ``enum_values``."""
        return cls(
            name=name,
            schema_type=OpenapiDataType(OpenapiKind.STRING),
            description=description,
            enum_values=tuple(enum_values),
        )

    @classmethod
    def new_record(
        cls, name: str, description: str | None, fields: Iterable[OpenapiSchema]
    ) -> OpenapiSchema:
        """An object schema with ``fields`` as its properties."""
        return cls(
            name=name,
            schema_type=OpenapiDataType(OpenapiKind.OBJECT_SIMPLE),
            description=description,
            properties=tuple(fields),
        )

    @classmethod
    def new_basic_type(
        cls, name: str, description: str | None, data_type: OpenapiDataType
    ) -> OpenapiSchema:
        """A schema of a single data type."""
        return cls(name=name, schema_type=data_type, description=description)

    def schema_format(self) -> str | None:
        """The ``format`` value of the schema's type, if it has one."""
        if self.schema_type is None:
            return None
        return _format_of(self.schema_type)

    def required_properties(self) -> list[str]:
        """Names of properties whose type does not admit null."""
        if self.properties is None:
            return []
        required = []
        for prop in self.properties:
            schema_type = prop.schema_type
            if schema_type is None:
                continue
            if schema_type.kind is OpenapiKind.ARRAY and _contains_null(
                schema_type.value
            ):
                continue
            required.append(prop.name)
        return required

    def __str__(self) -> str:
        lines: list[str] = []
        _write_schema(lines, 0, self)
        return "".join(lines)


def _indentation(depth: int) -> str:
    return "  " * depth


def _without_null(subtypes: Iterable[OpenapiDataType]) -> list[OpenapiDataType]:
    return [subtype for subtype in subtypes if subtype.kind is not OpenapiKind.NULL]


def _contains_null(subtypes: Iterable[OpenapiDataType]) -> bool:
    return any(subtype.kind is OpenapiKind.NULL for subtype in subtypes)


def _format_of(schema_type: OpenapiDataType) -> str | None:
    if schema_type.kind in (OpenapiKind.INTEGER, OpenapiKind.NUMBER):
        return str(schema_type.value).lower()
    if schema_type.kind is OpenapiKind.ARRAY:
        non_null = _without_null(schema_type.value)
        if len(schema_type.value) == 2 and len(non_null) == 1:
            return _format_of(non_null[0])
    return None


def _object_name_type(schema: OpenapiSchema) -> OpenapiDataType | None:
    schema_type = schema.schema_type
    if schema_type is None:
        return None
    if schema_type.kind is OpenapiKind.OBJECT_NAME:
        return schema_type
    if schema_type.kind is OpenapiKind.ARRAY:
        non_null = _without_null(schema_type.value)
        if len(non_null) == 1:
            return non_null[0]
    return None


def _type_str(data_type: OpenapiDataType) -> str:
    kind = data_type.kind
    if kind in (OpenapiKind.OBJECT_SIMPLE, OpenapiKind.OBJECT):
        return "object"
    if kind is OpenapiKind.INTEGER:
        return "integer"
    if kind is OpenapiKind.NUMBER:
        return "number"
    if kind is OpenapiKind.ARRAY_ITEMS:
        return "array"
    if kind is OpenapiKind.ARRAY:
        non_null = _without_null(data_type.value)
        if len(non_null) == 1:
            return _type_str(non_null[0])
    elif kind is OpenapiKind.OBJECT_NAME:
        return f"$ref: '#/components/schemas/{data_type.value}'"
    return str(data_type)


def _write_schema(lines: list[str], depth: int, schema: OpenapiSchema) -> None:
    inner = _indentation(depth + 1)
    lines.append(f"{_indentation(depth)}{schema.name}:\n")

    object_name = _object_name_type(schema)
    if object_name is not None and object_name.kind is OpenapiKind.OBJECT_NAME:
        lines.append(f"{inner}$ref: '#/components/schemas/{object_name.value}'\n")
        return

    if schema.description is not None:
        description = schema.description
        if ":" in description:
            description = f'"{description}"'
        lines.append(f"{inner}description: {description}\n")
    if schema.example is not None:
        lines.append(f"{inner}example: {schema.example}\n")
    if schema.schema_type is not None:
        lines.append(f"{inner}type: {_type_str(schema.schema_type)}\n")
        if schema.schema_type.kind is OpenapiKind.ARRAY_ITEMS:
            lines.append(f"{inner}items:")
            items_str = _type_str(schema.schema_type.value)
            deeper = _indentation(depth + 2)
            if items_str.startswith("$ref"):
                lines.append(f"\n{deeper}{items_str}\n")
            else:
                lines.append(f"\n{deeper}type: {items_str}\n")
    schema_format = schema.schema_format()
    if schema_format is not None:
        lines.append(f"{inner}format: {schema_format}\n")

    if schema.enum_values is not None:
        lines.append(f"{inner}enum:\n")
        lines.extend(
            f"{_indentation(depth + 2)}- {value}\n" for value in schema.enum_values
        )
    required = schema.required_properties()
    if required:
        lines.append(f"{inner}required:\n")
        lines.extend(f"{_indentation(depth + 2)}- {name}\n" for name in required)
    if schema.properties is not None:
        lines.append(f"{inner}properties:\n")
        for prop in schema.properties:
            _write_schema(lines, depth + 2, prop)