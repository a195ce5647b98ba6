"""Tests for the [render] and [template] config models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from routedoc.config.models import PROJECT_DIR, RenderConfig, TemplateConfig


class TestRenderConfig:
    def test_defaults(self) -> None:
        config = RenderConfig()
        assert config.code_language == "golang"
        assert config.indent == "\t"
        assert config.comment_marker == "//"

    def test_sparse_override(self) -> None:
        config = RenderConfig.model_validate({"comment_marker": "#"})
        assert config.comment_marker == "#"
        assert config.indent == "\t"

    def test_frozen(self) -> None:
        config = RenderConfig()
        with pytest.raises(ValidationError):
            config.indent = "  "  # type: ignore[misc]


class TestTemplateConfig:
    def test_defaults(self) -> None:
        config = TemplateConfig()
        assert config.path is None
        assert config.name == "markdown.md.j2"

    def test_frozen(self) -> None:
        config = TemplateConfig(path="docs/api.j2")
        with pytest.raises(ValidationError):
            config.path = None  # type: ignore[misc]
        assert config.path == "docs/api.j2"

    def test_equal_by_value(self) -> None:
        assert TemplateConfig(name="a.j2") == TemplateConfig(name="a.j2")


def test_project_dir() -> None:
    assert PROJECT_DIR == Path(".routedoc")
