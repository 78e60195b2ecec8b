"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from openapi_json_schema.schema_sources.source_models import SchemaSource


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema_base_path: Path
    cache_ttl: int
    providers: tuple[SchemaSource, ...]
