"""Translating Avro schemas into OpenAPI component schemas."""

from __future__ import annotations

from typing import Iterable

from genco.avro_item import AvroItem, AvroItemKind, AvroItemType
from genco.openapi_data_type import OpenapiDataType, OpenapiKind
from genco.openapi_schema import OpenapiSchema


class TranslationError(ValueError):
    """Raised when an Avro item has no OpenAPI counterpart."""


def avro_to_openapi_str(schemas: Iterable[AvroItem]) -> str:
    """Return the OpenAPI YAML of the component schemas for ``schemas``."""
    return "\n".join(str(to_component_schema(item)) for item in schemas)


def _required_name(avro_item: AvroItem) -> str:
    if avro_item.name is None:
        raise TranslationError("Avro name expected")
    return avro_item.name


def to_component_schema(avro_item: AvroItem) -> OpenapiSchema:
    """Translate one Avro item into an OpenAPI schema."""
    kind = avro_item.item_type.kind
    if kind is AvroItemKind.ENUM:
        if avro_item.symbols is not None:
            return OpenapiSchema.new_enum(
                _required_name(avro_item), avro_item.doc, avro_item.symbols
            )
    elif kind is AvroItemKind.RECORD_SIMPLE:
        properties = [to_component_schema(field) for field in avro_item.fields or ()]
        return OpenapiSchema.new_record(
            _required_name(avro_item), avro_item.doc, properties
        )
    elif kind is AvroItemKind.ARRAY:
        subtypes = tuple(to_data_type(subtype) for subtype in avro_item.item_type.value)
        return OpenapiSchema.new_basic_type(
            _required_name(avro_item),
            avro_item.doc,
            OpenapiDataType(OpenapiKind.ARRAY, subtypes),
        )
    elif kind is not AvroItemKind.RECORD:
        return OpenapiSchema.new_basic_type(
            _required_name(avro_item), avro_item.doc, to_data_type(avro_item.item_type)
        )
    raise TranslationError(
        f"Error translating avro item {avro_item.name} (doc: {avro_item.doc})"
    )


_SIMPLE_TYPES = {
    AvroItemKind.INT: OpenapiDataType.new_int32_type,
    AvroItemKind.LONG: OpenapiDataType.new_int64_type,
    AvroItemKind.FLOAT: OpenapiDataType.new_float_type,
    AvroItemKind.DOUBLE: OpenapiDataType.new_double_type,
    AvroItemKind.NULL: lambda: OpenapiDataType(OpenapiKind.NULL),
    AvroItemKind.STRING: lambda: OpenapiDataType(OpenapiKind.STRING),
    AvroItemKind.BOOLEAN: lambda: OpenapiDataType(OpenapiKind.BOOLEAN),
    AvroItemKind.BYTES: lambda: OpenapiDataType(OpenapiKind.BYTES),
}


def to_data_type(avro_item_type: AvroItemType) -> OpenapiDataType:
    """Translate an Avro type into an OpenAPI data type."""
    kind = avro_item_type.kind
    simple = _SIMPLE_TYPES.get(kind)
    if simple is not None:
        return simple()
    if kind is AvroItemKind.RECORD_NAME:
        return OpenapiDataType(OpenapiKind.OBJECT_NAME, avro_item_type.value)
    if kind is AvroItemKind.ARRAY:
        return OpenapiDataType(
            OpenapiKind.ARRAY,
            tuple(to_data_type(subtype) for subtype in avro_item_type.value),
        )
    if kind is AvroItemKind.ARRAY_ITEMS:
        return OpenapiDataType(
            OpenapiKind.ARRAY_ITEMS, to_data_type(avro_item_type.value)
        )
    if kind is AvroItemKind.RECORD:
        record = avro_item_type.value
        if record.is_just_type():
            return to_data_type(record.item_type)
        raise TranslationError("Translation of compound avro types is not supported")
    raise TranslationError("Error translating avro item type")