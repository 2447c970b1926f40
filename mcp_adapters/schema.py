"""
JSON Schema → pydantic model conversion for tool input schemas.

MCP servers describe tool arguments with JSON Schema. The schema itself is
what LangChain shows the model; a pydantic model built from it checks the
arguments of each call before they are sent:

    Model = json_schema_to_model(tool.inputSchema, "AddInput")
    Model.model_validate({"a": 1, "b": 2})

Validation never rewrites the arguments: omitted optional properties stay
omitted and defaults are left for the server to apply.
"""

from __future__ import annotations

import keyword
from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, create_model

from mcp_adapters.exceptions import SchemaConversionError

EMPTY_OBJECT_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}

_SCALAR_TYPES: dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": Union[int, float],
    "boolean": bool,
    "null": type(None),
}


def json_schema_to_model(
    schema: Mapping[str, Any] | None,
    model_name: str = "ToolInput",
) -> type[BaseModel]:
    """
    Build a pydantic model from an object-typed JSON Schema.

    Args:
        schema: The tool's declared input schema. None means "no arguments".
        model_name: Class name for the generated model.

    Returns:
        A BaseModel subclass with one field per declared property.

    Raises:
        SchemaConversionError: if the schema is not a well-formed object schema.
    """
    if schema is None:
        schema = EMPTY_OBJECT_SCHEMA
    if not isinstance(schema, Mapping):
        raise SchemaConversionError(
            f"Input schema must be an object, got {type(schema).__name__}"
        )

    root_type = schema.get("type", "object")
    if root_type != "object":
        raise SchemaConversionError(
            f"Input schema must have type 'object', got {root_type!r}"
        )

    properties = schema.get("properties") or {}
    if not isinstance(properties, Mapping):
        raise SchemaConversionError(
            f"'properties' must be an object, got {type(properties).__name__}"
        )

    required = schema.get("required") or []
    if not isinstance(required, (list, tuple)) or not all(
        isinstance(r, str) for r in required
    ):
        raise SchemaConversionError("'required' must be a list of property names")

    additional = schema.get("additionalProperties", True)
    if not isinstance(additional, (bool, Mapping)):
        raise SchemaConversionError("'additionalProperties' must be a boolean or an object")

    fields: dict[str, Any] = {}
    for name, prop in properties.items():
        if not isinstance(prop, Mapping):
            raise SchemaConversionError(f"Schema for property '{name}' must be an object")

        field_name = name
        alias = None
        if not _usable_field_name(name):
            field_name = _placeholder_name(len(fields), properties)
            alias = name

        # Absent optional arguments are never sent, so None is only a marker
        default = ... if name in required else prop.get("default")
        fields[field_name] = (
            _annotation(prop, name),
            Field(default, alias=alias, description=prop.get("description")),
        )

    extra = "forbid" if additional is False else "allow"
    return create_model(model_name, __config__=ConfigDict(extra=extra), **fields)


def input_schema_dict(schema: Mapping[str, Any] | None) -> dict[str, Any]:
    """The declared schema as a plain dict, defaulting to an empty object schema."""
    merged = {**EMPTY_OBJECT_SCHEMA, **(schema or {})}
    merged["properties"] = merged.get("properties") or {}
    return merged


def _annotation(prop: Mapping[str, Any], name: str) -> Any:
    """Python type for a single property schema."""
    if "enum" in prop:
        values = prop["enum"]
        if not isinstance(values, list) or not values:
            raise SchemaConversionError(f"'enum' for property '{name}' must be a non-empty list")
        if all(_is_literal_value(v) for v in values):
            return Literal[tuple(values)]
        return Any

    if "const" in prop:
        return Literal[prop["const"]] if _is_literal_value(prop["const"]) else Any

    for key in ("anyOf", "oneOf"):
        if key in prop:
            options = prop[key]
            if not isinstance(options, list) or not options:
                raise SchemaConversionError(f"'{key}' for property '{name}' must be a non-empty list")
            members = []
            for option in options:
                if not isinstance(option, Mapping):
                    raise SchemaConversionError(f"'{key}' entries for property '{name}' must be objects")
                members.append(_annotation(option, name))
            return Union[tuple(members)]

    json_type = prop.get("type")
    if json_type is None:
        return Any
    if isinstance(json_type, list):
        if not json_type:
            raise SchemaConversionError(f"'type' for property '{name}' must not be empty")
        return Union[tuple(_type_annotation(t, prop, name) for t in json_type)]
    return _type_annotation(json_type, prop, name)


def _type_annotation(json_type: Any, prop: Mapping[str, Any], name: str) -> Any:
    if json_type == "array":
        items = prop.get("items")
        if items is None:
            return list[Any]
        if not isinstance(items, Mapping):
            raise SchemaConversionError(f"'items' for property '{name}' must be an object")
        return list[_annotation(items, name)]

    if json_type == "object":
        return dict[str, Any]

    if isinstance(json_type, str) and json_type in _SCALAR_TYPES:
        return _SCALAR_TYPES[json_type]

    raise SchemaConversionError(f"Property '{name}' has unknown type {json_type!r}")


def _is_literal_value(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def _usable_field_name(name: str) -> bool:
    return (
        name.isidentifier()
        and not keyword.iskeyword(name)
        and not name.startswith("_")
        and not hasattr(BaseModel, name)
    )


def _placeholder_name(index: int, properties: Mapping[str, Any]) -> str:
    name = f"field_{index}"
    while name in properties:
        name += "_"
    return name
