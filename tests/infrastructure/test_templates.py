"""Tests for Jinja2 template loading."""

from __future__ import annotations

from pathlib import Path

import jinja2
import pytest

from routedoc.domain.errors import TemplateError
from routedoc.infrastructure.templates import (
    OVERRIDE_DIR,
    build_template_environment,
    load_template,
)


class TestBuildEnvironment:
    def test_strict_and_unescaped(self) -> None:
        env = build_template_environment()
        assert env.undefined is jinja2.StrictUndefined
        assert env.from_string("{{ x }}").render(x='a "b"') == 'a "b"'


class TestLoadTemplate:
    def test_packaged_default(self) -> None:
        template = load_template()
        assert template.name == "markdown.md.j2"
        assert "### 1. Hello" in template.render(
            index="1",
            title="Hello",
            routeComment="",
            method="GET",
            uri="/",
            requestType="`-`",
            responseType="`-`",
            requestContent="",
            responseContent="",
        )

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "mine.md"
        path.write_text("{{ method }} {{ uri }}\n", encoding="utf-8")
        template = load_template(path=path)
        assert template.render(method="GET", uri="/x") == "GET /x\n"

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateError, match="template not found"):
            load_template(path=tmp_path / "missing.md")

    def test_project_override(self, tmp_path: Path) -> None:
        override = tmp_path / OVERRIDE_DIR
        override.mkdir(parents=True)
        (override / "markdown.md.j2").write_text("custom {{ title }}", encoding="utf-8")
        template = load_template(project_root=tmp_path)
        assert template.render(title="T") == "custom T"

    def test_unknown_name(self) -> None:
        with pytest.raises(TemplateError, match="template not found"):
            load_template(name="nope.j2")

    def test_syntax_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.md"
        path.write_text("{% if %}", encoding="utf-8")
        with pytest.raises(TemplateError):
            load_template(path=path)
