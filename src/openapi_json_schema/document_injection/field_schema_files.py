"""Static per-field schema file store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class FieldSchemaFileError(Exception):
    """Base error for per-field schema file lookups."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class FieldSchemaFileMissing(FieldSchemaFileError):
    """Raised when no schema file exists for a marked field."""


class FieldSchemaParseError(FieldSchemaFileError):
    """Raised when a per-field schema file is not a JSON object."""


def field_schema_path(base_path: Path, target_cls: type, schema_name: str) -> Path:
    """Return ``{base_path}/{shortclassname}-{schema_name}.json``."""
    return base_path / f"{target_cls.__name__.lower()}-{schema_name}.json"


def load_field_schema_file(path: Path) -> dict[str, Any]:
    """Read and decode one per-field schema file."""
    if not path.is_file():
        raise FieldSchemaFileMissing(f"Schema file not found: {path}", path=path)
    try:
        body = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise FieldSchemaParseError(f"Failed to decode schema file {path}: {exc}", path=path) from exc
    if not isinstance(body, dict):
        raise FieldSchemaParseError(f"Schema file {path} must contain a JSON object.", path=path)
    return body
