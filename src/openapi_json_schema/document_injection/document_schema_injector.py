"""Injects field-level JSON schemas into generated schema documents."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, cast

from openapi_json_schema.field_annotations.annotation_resolver import SchemaAnnotationResolver
from openapi_json_schema.field_annotations.json_schema_marker import (
    is_separator_json_field,
    to_camel_case,
)
from openapi_json_schema.schema_registry.unified_schema_registry import SchemaRegistry
from openapi_json_schema.schema_sources.source_models import FieldSchemaProvider

from .field_schema_files import (
    FieldSchemaFileMissing,
    FieldSchemaParseError,
    field_schema_path,
    load_field_schema_file,
)
from .field_schema_rewriter import rewrite_field_schema
from .injection_outcomes import FieldCoverage, ResolvedFieldSchema, SchemaOrigin

logger = logging.getLogger(__name__)

DEFINITION_KEYS = ("definitions", "$defs")


class DocumentSchemaInjector:
    """Replaces generated sub-schemas of ``JsonSchema``-marked fields.

    For each marked property the body comes from the class's
    ``FieldSchemaProvider.get_json_schema`` when it answers, otherwise from
    ``{schema_base_path}/{shortclassname}-{schema_name}.json``. Missing files
    leave the generated sub-schema in place; broken files are logged and
    skipped so one field never aborts a whole document build.
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        schema_base_path: Path | str,
        resolver: SchemaAnnotationResolver | None = None,
    ) -> None:
        self._registry = registry
        self._schema_base_path = Path(schema_base_path)
        self._resolver = resolver or SchemaAnnotationResolver()

    @property
    def schema_base_path(self) -> Path:
        return self._schema_base_path

    def inject(self, document: Mapping[str, Any], target_cls: type) -> dict[str, Any]:
        """Return a copy of ``document`` with field schemas of ``target_cls`` injected."""
        self._resolver.table_for(target_cls)
        tree = copy.deepcopy(dict(document))
        resolved: dict[str, ResolvedFieldSchema] = {}

        for definitions in _definition_maps(tree):
            for definition in definitions.values():
                properties = _properties_of(definition)
                if properties is not None:
                    self._inject_properties(properties, target_cls, resolved)
            for definition in definitions.values():
                properties = _properties_of(definition)
                if properties is not None:
                    remove_convention_duplicates(properties)

        root_properties = _properties_of(tree)
        if root_properties:
            self._inject_properties(root_properties, target_cls, resolved)

        return tree

    def describe_field_coverage(self, target_cls: type) -> tuple[FieldCoverage, ...]:
        """Resolve every marked field of ``target_cls`` without a document."""
        coverage = []
        for binding in self._resolver.table_for(target_cls).declared_bindings:
            resolution = self._resolve_body(target_cls, binding.schema_name)
            coverage.append(
                FieldCoverage(
                    field_name=binding.declared_name,
                    schema_name=binding.schema_name,
                    origin=resolution.origin,
                    schema_file=resolution.schema_file,
                )
            )
        return tuple(coverage)

    def _inject_properties(
        self,
        properties: MutableMapping[str, Any],
        target_cls: type,
        resolved: dict[str, ResolvedFieldSchema],
    ) -> None:
        for property_name in list(properties):
            schema_name = self._resolver.resolve(target_cls, property_name)
            if schema_name is None:
                logger.debug(
                    "Property %s is not a marked field of %s", property_name, target_cls.__name__
                )
                continue

            resolution = resolved.get(schema_name)
            if resolution is None:
                resolution = self._resolve_body(target_cls, schema_name)
                resolved[schema_name] = resolution
            if resolution.body is None:
                continue

            properties[property_name] = rewrite_field_schema(resolution.body)
            logger.debug(
                "Injected %s schema %s into %s.%s",
                resolution.origin.value,
                schema_name,
                target_cls.__name__,
                property_name,
            )

    def _resolve_body(self, target_cls: type, schema_name: str) -> ResolvedFieldSchema:
        if self._resolver.has_dynamic_provider(target_cls):
            provider = cast(type[FieldSchemaProvider], target_cls)
            body = provider.get_json_schema(schema_name, self._registry)
            if body is not None and not isinstance(body, Mapping):
                logger.warning(
                    "Ignoring dynamic schema %s of %s: expected a mapping, got %s",
                    schema_name,
                    target_cls.__name__,
                    type(body).__name__,
                )
                body = None
            if body is not None:
                return ResolvedFieldSchema(
                    schema_name=schema_name,
                    origin=SchemaOrigin.DYNAMIC,
                    body=body,
                    schema_file=None,
                )

        schema_file = field_schema_path(self._schema_base_path, target_cls, schema_name)
        try:
            body = load_field_schema_file(schema_file)
        except FieldSchemaFileMissing:
            logger.debug(
                "Schema file not found for %s schema %s: %s",
                target_cls.__name__,
                schema_name,
                schema_file,
            )
            return ResolvedFieldSchema(
                schema_name=schema_name,
                origin=SchemaOrigin.MISSING,
                body=None,
                schema_file=schema_file,
            )
        except FieldSchemaParseError as exc:
            logger.warning("Skipping schema %s of %s: %s", schema_name, target_cls.__name__, exc)
            return ResolvedFieldSchema(
                schema_name=schema_name,
                origin=SchemaOrigin.INVALID,
                body=None,
                schema_file=schema_file,
            )
        return ResolvedFieldSchema(
            schema_name=schema_name,
            origin=SchemaOrigin.FILE,
            body=body,
            schema_file=schema_file,
        )


def remove_convention_duplicates(properties: MutableMapping[str, Any]) -> None:
    """Drop ``*_json`` properties whose camelCase twin is also present."""
    duplicates = [
        name
        for name in properties
        if is_separator_json_field(name) and to_camel_case(name) in properties
    ]
    for name in duplicates:
        del properties[name]


def _definition_maps(tree: Mapping[str, Any]) -> list[MutableMapping[str, Any]]:
    return [
        tree[key]
        for key in DEFINITION_KEYS
        if isinstance(tree.get(key), MutableMapping)
    ]


def _properties_of(definition: Any) -> MutableMapping[str, Any] | None:
    if not isinstance(definition, MutableMapping):
        return None
    properties = definition.get("properties")
    if not isinstance(properties, MutableMapping):
        return None
    return properties
