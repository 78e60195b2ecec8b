"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from openapi_json_schema.schema_registry.unified_schema_registry import (
    DEFAULT_CACHE_TTL_SECONDS,
)
from openapi_json_schema.schema_sources.source_models import SchemaSource

from .runtime_settings import Configuration

DEFAULT_SCHEMA_BASE_PATH = "config/schemas"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    schema_base_path = _resolve_path(
        base_path,
        _require_non_empty_string(
            parsed.get("schema_base_path", DEFAULT_SCHEMA_BASE_PATH), "schema_base_path"
        ),
    )
    cache_ttl = _require_non_negative_int(
        parsed.get("cache_ttl", DEFAULT_CACHE_TTL_SECONDS), "cache_ttl"
    )
    providers = _parse_providers_section(parsed.get("providers"), base_path)

    return Configuration(
        path=path,
        schema_base_path=schema_base_path,
        cache_ttl=cache_ttl,
        providers=providers,
    )


def _parse_providers_section(value: Any, base_path: Path) -> tuple[SchemaSource, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("providers must be a list of provider entries.")

    providers: list[SchemaSource] = []
    for index, entry in enumerate(value):
        section = _require_mapping(entry, f"providers[{index}]")
        name = _require_non_empty_string(section.get("name"), f"providers[{index}].name")
        raw_path = _require_non_empty_string(section.get("path"), f"providers[{index}].path")
        providers.append(SchemaSource(name=name, location=_resolve_path(base_path, raw_path)))
    return tuple(providers)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
