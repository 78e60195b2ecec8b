"""Document injection entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class SchemaOrigin(str, Enum):
    """Where the schema body of a marked field came from."""

    DYNAMIC = "dynamic"
    FILE = "file"
    MISSING = "missing"
    INVALID = "invalid"


@dataclass(frozen=True)
class ResolvedFieldSchema:
    """Schema body resolved for one schema name during a build."""

    schema_name: str
    origin: SchemaOrigin
    body: Mapping[str, Any] | None
    schema_file: Path | None


@dataclass(frozen=True)
class FieldCoverage:
    """Injection coverage of one marked field."""

    field_name: str
    schema_name: str
    origin: SchemaOrigin
    schema_file: Path | None
