"""Validates payloads against the unified provider schema."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator

from openapi_json_schema.schema_registry.unified_schema_registry import SchemaRegistry


class SchemaValidator:
    """Thin boolean facade over the jsonschema Draft-7 validator."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self._registry = registry

    def validate(self, data: Any) -> bool:
        """Return True when ``data`` matches one of the registered provider schemas."""
        return Draft7Validator(self._registry.get_unified_schema()).is_valid(data)

    def collect_errors(self, data: Any) -> tuple[str, ...]:
        """Return the validator's error messages, empty when ``data`` is valid."""
        validator = Draft7Validator(self._registry.get_unified_schema())
        return tuple(
            _format_error(error.message, list(error.path)) for error in validator.iter_errors(data)
        )


def _format_error(message: str, path: list[Any]) -> str:
    if not path:
        return message
    return f"{'.'.join(str(part) for part in path)}: {message}"
