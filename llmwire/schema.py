"""A small JSON Schema model with generation from dataclasses and validation."""

from __future__ import annotations

import dataclasses
import json
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class DataType(str, Enum):
    """JSON Schema primitive types."""

    OBJECT = "object"
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    ARRAY = "array"
    NULL = "null"
    BOOLEAN = "boolean"


class SchemaValidationError(ValueError):
    """Raised when data does not match a schema."""


@dataclass
class Definition:
    """A JSON Schema description of a value."""

    type: DataType | str | None = None
    description: str = ""
    enum: list[str] | None = None
    properties: dict[str, Definition] | None = None
    required: list[str] | None = None
    items: Definition | None = None
    additional_properties: Any = None

    def to_dict(self) -> dict[str, Any]:
        """The schema as a JSON-ready dict; ``properties`` is always present."""
        result: dict[str, Any] = {}
        if self.type:
            result["type"] = getattr(self.type, "value", self.type)
        if self.description:
            result["description"] = self.description
        if self.enum:
            result["enum"] = list(self.enum)
        result["properties"] = {
            name: definition.to_dict() for name, definition in (self.properties or {}).items()
        }
        if self.required:
            result["required"] = list(self.required)
        if self.items is not None:
            result["items"] = self.items.to_dict()
        if self.additional_properties is not None:
            extra = self.additional_properties
            result["additionalProperties"] = extra.to_dict() if isinstance(extra, Definition) else extra
        return result

    def to_json(self) -> str:
        """The schema as compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def unmarshal(self, content: str | bytes) -> Any:
        """Parse ``content`` and return it if it matches this schema."""
        return verify_schema_and_unmarshal(self, content)


def verify_schema_and_unmarshal(schema: Definition, content: str | bytes) -> Any:
    """Parse JSON ``content``, check it against ``schema`` and return the data."""
    data = json.loads(content)
    if not validate(schema, data):
        raise SchemaValidationError("data validation failed against the provided schema")
    return data


def validate(schema: Definition, data: Any) -> bool:
    """Whether ``data`` matches ``schema``."""
    kind = schema.type
    if kind == DataType.OBJECT:
        return _validate_object(schema, data)
    if kind == DataType.ARRAY:
        return _validate_array(schema, data)
    if kind == DataType.STRING:
        return isinstance(data, str)
    if kind == DataType.NUMBER:
        return isinstance(data, (int, float)) and not isinstance(data, bool)
    if kind == DataType.BOOLEAN:
        return isinstance(data, bool)
    if kind == DataType.INTEGER:
        if isinstance(data, bool):
            return False
        if isinstance(data, float):
            return data.is_integer()
        return isinstance(data, int)
    if kind == DataType.NULL:
        return data is None
    return False


def _validate_object(schema: Definition, data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    required = schema.required or []
    if any(name not in data for name in required):
        return False
    for key, value_schema in (schema.properties or {}).items():
        if key in data:
            if not validate(value_schema, data[key]):
                return False
        elif key in required:
            return False
    return True


def _validate_array(schema: Definition, data: Any) -> bool:
    if not isinstance(data, (list, tuple)):
        return False
    if data and schema.items is None:
        raise ValueError("array schema has no items definition")
    return all(validate(schema.items, item) for item in data)


_PRIMITIVE_NAMES: dict[str, type] = {"str": str, "int": int, "float": float, "bool": bool}


def generate_schema_for_type(tp: Any) -> Definition:
    """Derive a schema from a Python type: primitives, sequences, Optional and dataclasses.

    Dataclass field metadata may carry ``json`` (the property name, optionally
    ending in ``,omitempty``), ``omitempty``, ``description`` and ``required``.
    """
    if isinstance(tp, str):
        if tp in _PRIMITIVE_NAMES:
            return generate_schema_for_type(_PRIMITIVE_NAMES[tp])
        raise TypeError(f"unsupported type: {tp!r}")
    origin = typing.get_origin(tp)
    if origin in (Union, types.UnionType):
        args = typing.get_args(tp)
        rest = [arg for arg in args if arg is not type(None)]
        if len(args) != 2 or len(rest) != 1:
            raise TypeError(f"unsupported type: {tp!r}")
        return generate_schema_for_type(rest[0])
    if origin in (list, set, frozenset):
        (element,) = typing.get_args(tp)
        return Definition(type=DataType.ARRAY, items=generate_schema_for_type(element))
    if origin is tuple:
        args = typing.get_args(tp)
        if len(args) == 2 and args[1] is Ellipsis:
            return Definition(type=DataType.ARRAY, items=generate_schema_for_type(args[0]))
        raise TypeError(f"unsupported type: {tp!r}")
    if tp is bool:
        return Definition(type=DataType.BOOLEAN)
    if tp is str:
        return Definition(type=DataType.STRING)
    if tp is int:
        return Definition(type=DataType.INTEGER)
    if tp is float:
        return Definition(type=DataType.NUMBER)
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return _schema_for_dataclass(tp)
    raise TypeError(f"unsupported type: {tp!r}")


_TRUE_STRINGS = {"1", "t", "T", "TRUE", "true", "True"}


def _parse_required(value: Any) -> bool:
    if isinstance(value, str):
        return value in _TRUE_STRINGS
    return bool(value)


def _schema_for_dataclass(cls: type) -> Definition:
    properties: dict[str, Definition] = {}
    required: list[str] = []
    for field in dataclasses.fields(cls):
        if field.name.startswith("_"):
            continue
        meta = field.metadata
        name = meta.get("json") or field.name
        is_required = not meta.get("omitempty", False)
        if name.endswith(",omitempty"):
            name = name[: -len(",omitempty")]
            is_required = False

        item = generate_schema_for_type(field.type)
        description = meta.get("description")
        if description:
            item.description = description
        properties[name] = item

        override = meta.get("required")
        if override is not None and override != "":
            is_required = _parse_required(override)
        if is_required:
            required.append(name)
    return Definition(
        type=DataType.OBJECT,
        properties=properties,
        required=required or None,
        additional_properties=False,
    )