"""Paths document serialization: plain dicts, JSON and YAML.

Key order is preserved everywhere so output is stable across runs.
"""

import json
from typing import Any

import yaml

from trill.openapi.models import PathsDocument

OPENAPI_VERSION = "3.0.3"


def paths_to_dict(paths: PathsDocument) -> dict[str, Any]:
    return paths.to_dict()


def openapi_document(
    paths: PathsDocument, title: str = "API", version: str = "1.0.0"
) -> dict[str, Any]:
    """Wrap *paths* in a minimal OpenAPI document."""
    return {
        "openapi": OPENAPI_VERSION,
        "info": {"title": title, "version": version},
        "paths": paths_to_dict(paths),
    }


def to_json(document: dict[str, Any], indent: int = 2) -> str:
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"


def to_yaml(document: dict[str, Any]) -> str:
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False, allow_unicode=True)
