"""Schema registry exports."""

from .registry_errors import SchemaSourceError, SourceNotFoundError, SourceParseError
from .schema_cache import InMemoryTTLCache, SchemaCache
from .unified_schema_registry import (
    DEFAULT_CACHE_TTL_SECONDS,
    JSON_SCHEMA_DIALECT,
    UNIFIED_SCHEMA_CACHE_KEY,
    SchemaRegistry,
)

__all__ = [
    "DEFAULT_CACHE_TTL_SECONDS",
    "JSON_SCHEMA_DIALECT",
    "UNIFIED_SCHEMA_CACHE_KEY",
    "InMemoryTTLCache",
    "SchemaCache",
    "SchemaRegistry",
    "SchemaSourceError",
    "SourceNotFoundError",
    "SourceParseError",
]
