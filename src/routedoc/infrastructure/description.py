"""Service description loading from YAML or JSON.

JSON is a subset of YAML, so a single safe ruamel.yaml parser handles
both. Example document::

    name: user-api
    types:
      - name: User
        fields:
          - {name: id, type: int, tag: 'json:"id"', comment: user id}
          - {name: friends, type: "[]*User", tag: 'json:"friends"'}
    routes:
      - method: get
        path: /users/:id
        request: UserReq
        response: User
        doc: {title: Get user}
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from routedoc.domain.errors import DescriptionError
from routedoc.domain.types import ServiceDescription

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def _new_yaml() -> YAML:
    """Create a fresh safe YAML parser (the YAML object is stateful)."""
    return YAML(typ="safe", pure=True)


def parse_description(text: str, *, source: str = "<string>") -> ServiceDescription:
    """Parse and validate a service description document.

    Raises:
        DescriptionError: The text is not valid YAML/JSON or does not
            describe a service.
    """
    try:
        data: Any = _new_yaml().load(text)
    except YAMLError as exc:
        raise DescriptionError(f"{source}: invalid YAML/JSON: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DescriptionError(f"{source}: expected a mapping at the top level")

    try:
        description = ServiceDescription.model_validate(data)
    except ValidationError as exc:
        raise DescriptionError(f"{source}: invalid service description:\n{exc}") from exc

    logger.debug(
        "Loaded %s: %d types, %d routes",
        source,
        len(description.types),
        len(description.routes),
    )
    return description


def load_description(path: str | Path) -> ServiceDescription:
    """Read a service description from *path*, or stdin when *path* is ``-``."""
    if str(path) == STDIN_PATH:
        return parse_description(sys.stdin.read(), source="<stdin>")

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise DescriptionError(f"cannot read {p}: {exc.strerror or exc}") from exc
    return parse_description(text, source=str(p))
