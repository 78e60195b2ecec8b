"""Wires registry, injector, and validator from one configuration."""

from __future__ import annotations

from dataclasses import dataclass

from openapi_json_schema.configuration.runtime_settings import Configuration
from openapi_json_schema.document_injection.document_schema_injector import (
    DocumentSchemaInjector,
)
from openapi_json_schema.payload_validation.unified_schema_validator import SchemaValidator
from openapi_json_schema.schema_registry.schema_cache import SchemaCache
from openapi_json_schema.schema_registry.unified_schema_registry import SchemaRegistry


@dataclass(frozen=True)
class SchemaServices:
    """Services sharing one registry."""

    registry: SchemaRegistry
    injector: DocumentSchemaInjector
    validator: SchemaValidator


def assemble_schema_services(
    configuration: Configuration, *, cache: SchemaCache | None = None
) -> SchemaServices:
    """Build the service bundle and register every configured provider."""
    registry = SchemaRegistry(cache=cache, cache_ttl=configuration.cache_ttl)
    registry.register_all(configuration.providers)
    return SchemaServices(
        registry=registry,
        injector=DocumentSchemaInjector(registry, configuration.schema_base_path),
        validator=SchemaValidator(registry),
    )
