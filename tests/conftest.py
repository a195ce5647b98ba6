"""Shared pytest fixtures and test helpers for routedoc tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from routedoc.domain.types import FieldDef, Route, ServiceDescription, StructType

USER_API_YAML = """\
name: user-api
types:
  - name: User
    fields:
      - {name: ID, type: int, tag: '`json:"id"`', comment: "// user id"}
      - {name: Name, type: string, tag: '`json:"name"`'}
  - name: GetUserReq
    fields:
      - {name: ID, type: int, tag: '`path:"id"`'}
  - name: UserList
    fields:
      - {name: Items, type: "[]User", tag: '`json:"items"`'}
      - {name: Total, type: int, tag: '`json:"total"`'}
routes:
  - method: get
    path: /users/:id
    handler: GetUser
    request: GetUserReq
    response: User
    doc:
      title: Get user
      summary: "  Fetch one user by id  "
  - method: get
    path: /users
    response: UserList
    doc:
      title: List users
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray routedoc.toml is found."""
    monkeypatch.delenv("ROUTEDOC_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def description_file(tmp_path: Path) -> Path:
    """The user-api service description written as YAML."""
    path = tmp_path / "api.yaml"
    path.write_text(USER_API_YAML, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def field(name: str, type_expr: Any, tag: str = "", comment: str = "") -> FieldDef:
    """Build a FieldDef, parsing *type_expr* when it is a string."""
    return FieldDef.model_validate({"name": name, "type": type_expr, "tag": tag, "comment": comment})


def struct(name: str, *fields: FieldDef) -> StructType:
    return StructType(name=name, fields=fields)


def service(*types: StructType, routes: list[dict[str, Any]] | None = None) -> ServiceDescription:
    return ServiceDescription(
        name="test",
        types=types,
        routes=tuple(Route.model_validate(r) for r in routes or []),
    )
