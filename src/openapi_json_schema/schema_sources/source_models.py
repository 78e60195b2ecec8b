"""Schema source entities and provider capabilities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from openapi_json_schema.schema_registry.unified_schema_registry import SchemaRegistry


@runtime_checkable
class SchemaProvider(Protocol):
    """Anything that points at one schema document contributed to the unified schema.

    Extensions and plugins may implement this directly instead of building a
    ``SchemaSource``; the registry only reads ``name`` and ``location``.
    """

    @property
    def name(self) -> str:
        """Unique, stable identifier such as ``github`` or ``gitlab``."""
        ...

    @property
    def location(self) -> str | Path:
        """Filesystem path of the provider's JSON schema document."""
        ...


@dataclass(frozen=True)
class SchemaSource:
    """Named pointer to one provider schema document."""

    name: str
    location: str | Path


@runtime_checkable
class FieldSchemaProvider(Protocol):
    """Class-level capability for computing field schemas at document build time.

    Implementations return ``None`` to fall back to the static schema file.
    The registry is handed in explicitly so the provider can embed the
    unified schema (or parts of it) in its answer.
    """

    @classmethod
    def get_json_schema(
        cls, schema_name: str, registry: SchemaRegistry
    ) -> Mapping[str, Any] | None: ...
