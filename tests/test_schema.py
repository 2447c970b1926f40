"""Tests for JSON Schema → pydantic model conversion."""

import pytest
from pydantic import ValidationError

from mcp_adapters.exceptions import SchemaConversionError
from mcp_adapters.schema import json_schema_to_model


class TestJsonSchemaToModel:
    """Well-formed object schemas become validating models."""

    def test_required_and_optional_fields(self):
        Model = json_schema_to_model(
            {
                "type": "object",
                "properties": {
                    "query": {"type": "string", "description": "Search terms"},
                    "limit": {"type": "integer", "default": 10},
                },
                "required": ["query"],
            },
            "SearchInput",
        )

        parsed = Model(query="mcp")
        assert parsed.query == "mcp"
        assert parsed.limit == 10
        assert Model.model_fields["query"].description == "Search terms"
        assert Model.__name__ == "SearchInput"

        with pytest.raises(ValidationError):
            Model(limit=5)

    def test_none_and_empty_schemas_have_no_fields(self):
        assert json_schema_to_model(None).model_fields == {}
        assert json_schema_to_model({}).model_fields == {}
        assert json_schema_to_model({"type": "object"}).model_fields == {}

    def test_scalar_types(self):
        Model = json_schema_to_model(
            {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "count": {"type": "integer"},
                    "ratio": {"type": "number"},
                    "enabled": {"type": "boolean"},
                },
                "required": ["name", "count", "ratio", "enabled"],
            }
        )

        parsed = Model(name="x", count=3, ratio=3, enabled=True)
        assert parsed.count == 3
        assert parsed.ratio == 3
        assert isinstance(parsed.ratio, int)

        with pytest.raises(ValidationError):
            Model(name="x", count="three", ratio=1.5, enabled=True)

    def test_enum_is_enforced(self):
        Model = json_schema_to_model(
            {
                "type": "object",
                "properties": {"unit": {"type": "string", "enum": ["km", "miles"]}},
                "required": ["unit"],
            }
        )

        assert Model(unit="km").unit == "km"
        with pytest.raises(ValidationError):
            Model(unit="furlongs")

    def test_arrays_and_nested_objects(self):
        Model = json_schema_to_model(
            {
                "type": "object",
                "properties": {
                    "tags": {"type": "array", "items": {"type": "string"}},
                    "options": {"type": "object", "properties": {"deep": {"type": "boolean"}}},
                },
                "required": ["tags", "options"],
            }
        )

        parsed = Model(tags=["a", "b"], options={"deep": True})
        assert parsed.tags == ["a", "b"]
        assert parsed.options == {"deep": True}

    def test_nullable_and_union_types(self):
        Model = json_schema_to_model(
            {
                "type": "object",
                "properties": {
                    "maybe": {"type": ["string", "null"]},
                    "either": {"anyOf": [{"type": "integer"}, {"type": "string"}]},
                },
                "required": ["maybe", "either"],
            }
        )

        parsed = Model(maybe=None, either="x")
        assert parsed.maybe is None
        assert Model(maybe="y", either=4).either == 4

    def test_untyped_property_accepts_anything(self):
        Model = json_schema_to_model(
            {"type": "object", "properties": {"payload": {}}, "required": ["payload"]}
        )
        assert Model(payload={"any": [1, 2]}).payload == {"any": [1, 2]}

    def test_awkward_property_names_are_validated_by_alias(self):
        Model = json_schema_to_model(
            {
                "type": "object",
                "properties": {
                    "file-path": {"type": "string"},
                    "class": {"type": "string"},
                    "schema": {"type": "string"},
                    "plain": {"type": "string"},
                },
                "required": ["file-path"],
            }
        )

        aliases = {field.alias or name for name, field in Model.model_fields.items()}
        assert aliases == {"file-path", "class", "schema", "plain"}

        parsed = Model.model_validate({"file-path": "/tmp/x", "class": "c"})
        assert parsed.model_dump(by_alias=True)["file-path"] == "/tmp/x"

        with pytest.raises(ValidationError):
            Model.model_validate({"class": "c"})

        with pytest.raises(ValidationError):
            Model.model_validate({"file-path": 3})

    def test_optional_fields_do_not_accept_null(self):
        Model = json_schema_to_model(
            {"type": "object", "properties": {"limit": {"type": "integer"}}}
        )

        assert Model().limit is None
        with pytest.raises(ValidationError):
            Model(limit=None)

    def test_additional_properties(self):
        FreeForm = json_schema_to_model({"type": "object", "additionalProperties": True})
        assert FreeForm.model_validate({"key": "x"}).model_dump() == {"key": "x"}

        Open = json_schema_to_model({"type": "object", "properties": {"a": {"type": "string"}}})
        assert Open.model_validate({"a": "1", "b": 2}).model_dump() == {"a": "1", "b": 2}

        Closed = json_schema_to_model(
            {
                "type": "object",
                "properties": {"a": {"type": "string"}},
                "additionalProperties": False,
            }
        )
        with pytest.raises(ValidationError):
            Closed.model_validate({"a": "1", "b": 2})


class TestMalformedSchemas:
    """Anything that isn't a usable object schema is rejected."""

    @pytest.mark.parametrize(
        "schema",
        [
            "not a schema",
            ["type", "object"],
            {"type": "string"},
            {"type": "object", "properties": "nope"},
            {"type": "object", "properties": {}, "required": "a"},
            {"type": "object", "properties": {"a": "string"}},
            {"type": "object", "properties": {"a": {"type": "decimal"}}},
            {"type": "object", "properties": {"a": {"type": "string", "enum": []}}},
            {"type": "object", "properties": {"a": {"type": "array", "items": "string"}}},
            {"type": "object", "properties": {"a": {"anyOf": "string"}}},
            {"type": "object", "additionalProperties": "yes"},
        ],
    )
    def test_rejected(self, schema):
        with pytest.raises(SchemaConversionError):
            json_schema_to_model(schema)
