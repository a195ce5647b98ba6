"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ROUTEDOC_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``--config``, ``$ROUTEDOC_CONFIG``, or walk-up discovery
  4. Code defaults — baked into the section models

A project is marked by either ``routedoc.toml`` or
``.routedoc/routedoc.toml``; the directory holding the marker is the
project root, so template overrides in ``.routedoc/templates/`` line up
with the config that enabled them.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from routedoc.config.models import PROJECT_DIR, RenderConfig, TemplateConfig

CONFIG_FILENAME = "routedoc.toml"
CONFIG_ENV_VAR = "ROUTEDOC_CONFIG"

# Checked in order inside each directory during the walk-up.
_CANDIDATES = (Path(CONFIG_FILENAME), PROJECT_DIR / CONFIG_FILENAME)


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for a run.

    ``$ROUTEDOC_CONFIG`` wins when set (None if it names a missing file).
    Otherwise walks up from *start* (default: cwd), checking
    ``routedoc.toml`` then ``.routedoc/routedoc.toml`` at each level.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        for candidate in _CANDIDATES:
            path = directory / candidate
            if path.is_file():
                return path
    return None


def project_root_for(config_path: Path) -> Path:
    """Directory that owns *config_path*, stepping out of ``.routedoc/``."""
    parent = config_path.parent
    if parent.name == PROJECT_DIR.name:
        return parent.parent
    return parent


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the ``[render]``/``[template]`` tables of a TOML file to pydantic."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources from a classmethod, so the chosen file
# is handed over per thread for the duration of one construction.
_tls = threading.local()


class RouteDocSettings(BaseSettings):
    """Unified settings for the routedoc CLI.

    Attributes:
        project_root: Directory owning the config file, or CWD without one.
            Template overrides are looked up under ``.routedoc/templates/``.
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROUTEDOC_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    render: RenderConfig = Field(default_factory=RenderConfig)
    template: TemplateConfig = Field(default_factory=TemplateConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> RouteDocSettings:
        """Construct settings for one CLI invocation.

        An explicit *config_path* is used only if it exists. Without one,
        :func:`find_config` runs from *project_root* (or CWD).
        """
        toml_path: Path | None = None
        if config_path:
            if Path(config_path).is_file():
                toml_path = Path(config_path)
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = project_root_for(toml_path) if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
