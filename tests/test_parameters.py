from typing import Any

import pytest
from pydantic import BaseModel

from swagger_assembler.builder.parameters import build_parameter, parameter_name
from swagger_assembler.builder.state import create_state
from swagger_assembler.errors import ContractViolationError, MissingCorrespondenceError
from swagger_assembler.resolver import PydanticSchemaResolver


class Pet(BaseModel):
    name: str


def _state(template: str | None = None):
    state = create_state()
    state.current_path = "/pets"
    state.current_path_template = template
    return state


class TestPathParameters:
    def test_matching_placeholder(self):
        param = build_parameter(_state("{petId}"), PydanticSchemaResolver(), "path", "petId", str, "Pet id", True)
        assert param == {
            "in": "path",
            "name": "petId",
            "required": True,
            "description": "Pet id",
            "type": "string",
        }

    def test_missing_placeholder_fails(self):
        with pytest.raises(MissingCorrespondenceError, match="parameter id"):
            build_parameter(_state("{petId}"), PydanticSchemaResolver(), "path", "id", str)

    def test_empty_template_fails(self):
        with pytest.raises(MissingCorrespondenceError):
            build_parameter(_state(""), PydanticSchemaResolver(), "path", "id", str)


class TestScalarLocations:
    @pytest.mark.parametrize("location", ["query", "header"])
    def test_primitive_types(self, location):
        resolver = PydanticSchemaResolver()
        assert build_parameter(_state(), resolver, location, "flag", bool)["type"] == "boolean"
        assert build_parameter(_state(), resolver, location, "ratio", float)["type"] == "number"

    def test_integer_is_accepted(self):
        param = build_parameter(_state(), PydanticSchemaResolver(), "query", "limit", int)
        assert param["type"] == "integer"

    @pytest.mark.parametrize("type_", [list[str], Pet, dict[str, int]])
    def test_non_primitive_fails(self, type_):
        with pytest.raises(ContractViolationError, match="primitive type"):
            build_parameter(_state(), PydanticSchemaResolver(), "query", "value", type_)

    def test_any_schema_is_unconstrained(self):
        param = build_parameter(_state(), PydanticSchemaResolver(), "header", "x-trace", Any)
        assert param["type"] == {}

    def test_default_description(self):
        param = build_parameter(_state(), PydanticSchemaResolver(), "query", "q", str)
        assert param["description"] == "No description."


class TestBodyParameter:
    def test_schema_attached_verbatim(self):
        resolver = PydanticSchemaResolver()
        param = build_parameter(_state(), resolver, "body", "body", Pet, None, True)
        assert param["schema"] == {"$ref": "#/definitions/Pet"}
        assert "type" not in param
        assert "Pet" in resolver.definitions

    def test_array_body(self):
        param = build_parameter(_state(), PydanticSchemaResolver(), "body", "body", list[int])
        assert param["schema"] == {"type": "array", "items": {"type": "integer"}}


class TestParameterName:
    def test_body_is_always_body(self):
        assert parameter_name("body", "payload", "pet") == "body"

    def test_explicit_name_wins(self):
        assert parameter_name("query", "q", "search") == "q"

    def test_falls_back_to_declared_name(self):
        assert parameter_name("header", None, "token") == "token"
