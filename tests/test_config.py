import json

import pytest

from swagger_assembler.builder.state import create_state
from swagger_assembler.config import BuilderOptions, default_document, load_base_document


class TestDefaultDocument:
    def test_defaults(self):
        doc = default_document(BuilderOptions())
        assert doc == {
            "basePath": "/v1",
            "consumes": ["application/json"],
            "info": {
                "title": "Default API",
                "version": "0.0.1",
                "description": "Default API description.",
            },
            "swagger": "2.0",
            "host": "localhost:8080",
            "paths": {},
        }

    def test_overrides(self):
        doc = default_document(BuilderOptions(title="Pets", host="api.example.com", base_path="/v2"))
        assert doc["info"]["title"] == "Pets"
        assert doc["host"] == "api.example.com"
        assert doc["basePath"] == "/v2"


class TestLoadBaseDocument:
    def test_json(self, tmp_path):
        f = tmp_path / "base.json"
        f.write_text(json.dumps({"host": "api.example.com"}))
        assert load_base_document(f) == {"host": "api.example.com"}

    def test_yaml(self, tmp_path):
        f = tmp_path / "base.yaml"
        f.write_text("info:\n  title: Pets\n")
        assert load_base_document(f) == {"info": {"title": "Pets"}}

    def test_tab_indented_json(self, tmp_path):
        f = tmp_path / "base.json"
        f.write_text('{\n\t"host": "api.example.com",\n\t"info": {\n\t\t"title": "Pets"\n\t}\n}')
        assert load_base_document(f) == {"host": "api.example.com", "info": {"title": "Pets"}}

    def test_unparseable(self, tmp_path):
        f = tmp_path / "base.json"
        f.write_text('{\n\t"host": ')
        with pytest.raises(ValueError, match="neither valid YAML nor JSON"):
            load_base_document(f)

    def test_not_a_mapping(self, tmp_path):
        f = tmp_path / "base.json"
        f.write_text("[1, 2]")
        with pytest.raises(ValueError):
            load_base_document(f)


class TestCreateState:
    def test_base_document_is_shallow_merged(self, tmp_path):
        f = tmp_path / "base.json"
        f.write_text(json.dumps({
            "info": {"title": "Pets"},
            "schemes": ["https"],
            "paths": {"/stale": {}},
        }))
        state = create_state(BuilderOptions(base_document=f))
        assert state.document["info"] == {"title": "Pets"}
        assert state.document["schemes"] == ["https"]
        assert state.document["basePath"] == "/v1"
        assert state.document["paths"] == {}

    def test_fresh_state(self):
        state = create_state()
        assert state.current_path is None
        assert state.current_operation is None
        assert state.pending_operations == []
