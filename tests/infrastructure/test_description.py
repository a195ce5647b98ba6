"""Tests for service description loading."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from routedoc.domain.errors import DescriptionError
from routedoc.domain.types import ArrayType, StructType
from routedoc.infrastructure.description import load_description, parse_description
from tests.conftest import USER_API_YAML


class TestParseDescription:
    def test_yaml(self) -> None:
        desc = parse_description(USER_API_YAML)
        assert desc.name == "user-api"
        assert [t.name for t in desc.types] == ["User", "GetUserReq", "UserList"]
        assert [r.path for r in desc.routes] == ["/users/:id", "/users"]
        user_list = desc.types[2]
        assert isinstance(user_list, StructType)
        assert isinstance(user_list.fields[0].type, ArrayType)

    def test_json(self) -> None:
        text = (
            '{"types": [{"name": "User", "fields": [{"name": "ID", "type": "int"}]}],'
            ' "routes": [{"method": "get", "path": "/u", "response": "User"}]}'
        )
        desc = parse_description(text)
        assert desc.routes[0].response_type_name == "User"

    def test_empty_document(self) -> None:
        desc = parse_description("")
        assert desc.routes == ()

    def test_invalid_yaml(self) -> None:
        with pytest.raises(DescriptionError, match="invalid YAML"):
            parse_description("types: [unclosed", source="api.yaml")

    def test_top_level_not_mapping(self) -> None:
        with pytest.raises(DescriptionError, match="expected a mapping"):
            parse_description("- a\n- b\n")

    def test_bad_type_expression(self) -> None:
        text = "types:\n  - name: A\n    fields:\n      - {name: X, type: 'map[string'}\n"
        with pytest.raises(DescriptionError, match="invalid type expression"):
            parse_description(text)

    def test_route_missing_path(self) -> None:
        with pytest.raises(DescriptionError, match="path"):
            parse_description("routes:\n  - method: get\n")


class TestLoadDescription:
    def test_from_file(self, description_file: Path) -> None:
        assert load_description(description_file).name == "user-api"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DescriptionError, match="cannot read"):
            load_description(tmp_path / "nope.yaml")

    def test_from_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(USER_API_YAML))
        assert load_description("-").name == "user-api"
