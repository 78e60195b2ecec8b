"""Registry that combines provider schemas into one unified anyOf schema."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from openapi_json_schema.schema_sources.source_models import SchemaProvider

from .registry_errors import SourceNotFoundError, SourceParseError
from .schema_cache import InMemoryTTLCache, SchemaCache

logger = logging.getLogger(__name__)

UNIFIED_SCHEMA_CACHE_KEY = "openapi_json_schema_unified"
JSON_SCHEMA_DIALECT = "https://json-schema.org/draft-07/schema#"
DEFAULT_CACHE_TTL_SECONDS = 3600


class SchemaRegistry:
    """Collects schema providers and serves their unified anyOf schema.

    The unified schema is cached under a single key and rebuilt lazily after
    a cache miss or an explicit invalidation. Every registration invalidates
    the cache, so a changed provider set is never served from a stale entry.
    """

    def __init__(
        self,
        cache: SchemaCache | None = None,
        cache_ttl: int = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        if cache_ttl < 0:
            raise ValueError("cache_ttl must not be negative.")
        self._cache: SchemaCache = cache if cache is not None else InMemoryTTLCache()
        self._cache_ttl = cache_ttl
        self._providers: dict[str, SchemaProvider] = {}

    @property
    def cache_ttl(self) -> int:
        return self._cache_ttl

    @property
    def sources(self) -> Mapping[str, SchemaProvider]:
        """Read-only snapshot of registered providers in registration order."""
        return MappingProxyType(dict(self._providers))

    def register(self, source: SchemaProvider) -> None:
        """Register a provider; a later registration under the same name wins."""
        name = source.name
        if name in self._providers:
            logger.warning("Schema provider already registered, overwriting: %s", name)

        self._providers[name] = source
        logger.debug("Registered schema provider %s (%s)", name, source.location)
        self.invalidate_cache()

    def register_all(self, sources: Iterable[SchemaProvider]) -> None:
        """Register every provider of a discovered sequence."""
        for source in sources:
            self.register(source)

    def get_source(self, name: str) -> SchemaProvider | None:
        return self._providers.get(name)

    def get_unified_schema(self) -> dict[str, Any]:
        """Return the cached unified schema, rebuilding it on a miss.

        Raises:
          SourceNotFoundError: If a provider document is missing or unreadable.
          SourceParseError: If a provider document is not a well-formed schema.
        """
        cached = self._cache.get(UNIFIED_SCHEMA_CACHE_KEY)
        if cached is not None:
            return cached

        schema = self._build_unified_schema()
        self._cache.set(UNIFIED_SCHEMA_CACHE_KEY, schema, self._cache_ttl)
        return schema

    def invalidate_cache(self) -> None:
        """Evict the cached unified schema."""
        self._cache.delete(UNIFIED_SCHEMA_CACHE_KEY)

    def _build_unified_schema(self) -> dict[str, Any]:
        providers = tuple(self._providers.values())
        if not providers:
            logger.warning("No schema providers registered, returning empty anyOf schema")
            return {
                "$schema": JSON_SCHEMA_DIALECT,
                "description": "No schemas available",
                "anyOf": [],
            }

        alternatives = [_load_provider_document(provider) for provider in providers]
        logger.debug(
            "Generated unified schema from %d provider(s): %s",
            len(alternatives),
            ", ".join(provider.name for provider in providers),
        )
        return {
            "$schema": JSON_SCHEMA_DIALECT,
            "description": (
                f"Unified schema from {len(alternatives)} provider(s). "
                "Must match one of the available schemas."
            ),
            "anyOf": alternatives,
        }


def _load_provider_document(provider: SchemaProvider) -> dict[str, Any]:
    path = Path(provider.location)
    if not path.is_file():
        raise SourceNotFoundError(
            f'Schema file not found for provider "{provider.name}": {path}',
            source_name=provider.name,
        )

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceParseError(
            f'Schema file for provider "{provider.name}" is not UTF-8: {path}',
            source_name=provider.name,
        ) from exc
    except OSError as exc:
        raise SourceNotFoundError(
            f'Failed to read schema file for provider "{provider.name}": {path}',
            source_name=provider.name,
        ) from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SourceParseError(
            f'Invalid JSON in schema file for provider "{provider.name}": {exc}',
            source_name=provider.name,
        ) from exc

    if not isinstance(document, dict):
        raise SourceParseError(
            f'Schema file for provider "{provider.name}" must contain a JSON object.',
            source_name=provider.name,
        )

    try:
        validator_for(document, default=Draft7Validator).check_schema(document)
    except SchemaError as exc:
        raise SourceParseError(
            f'Invalid JSON schema for provider "{provider.name}": {exc.message}',
            source_name=provider.name,
        ) from exc

    logger.debug(
        "Loaded provider schema %s from %s (has properties: %s)",
        provider.name,
        path,
        "properties" in document,
    )
    return document
