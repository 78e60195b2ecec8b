"""Per-class lookup of fields marked for JSON schema injection."""

from __future__ import annotations

import inspect
import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Annotated, Any, get_origin

from openapi_json_schema.schema_sources.source_models import FieldSchemaProvider

from .json_schema_marker import JsonSchema, convention_variant

logger = logging.getLogger(__name__)


class ReflectionFailure(Exception):
    """Raised when a field annotation cannot be evaluated."""


@dataclass(frozen=True)
class FieldSchemaBinding:
    """A marked field and the schema name it resolves to."""

    declared_name: str
    schema_name: str


@dataclass(frozen=True)
class FieldSchemaTable:
    """Static injection table of one class, built once and reused per document build."""

    target_cls: type
    bindings: Mapping[str, FieldSchemaBinding]
    has_dynamic_provider: bool

    def lookup(self, field_name: str) -> FieldSchemaBinding | None:
        return self.bindings.get(field_name)

    @property
    def declared_bindings(self) -> tuple[FieldSchemaBinding, ...]:
        """Marked fields in declaration order, without convention aliases."""
        unique: dict[str, FieldSchemaBinding] = {}
        for binding in self.bindings.values():
            unique.setdefault(binding.declared_name, binding)
        return tuple(unique.values())


class SchemaAnnotationResolver:
    """Resolves the schema name of a class field from its ``JsonSchema`` marker."""

    def __init__(self) -> None:
        self._tables: dict[type, FieldSchemaTable] = {}

    def table_for(self, target_cls: type) -> FieldSchemaTable:
        if not isinstance(target_cls, type):
            raise TypeError(f"Expected a class, got {type(target_cls).__name__}.")
        table = self._tables.get(target_cls)
        if table is None:
            table = _build_table(target_cls)
            self._tables[target_cls] = table
        return table

    def resolve(self, target_cls: type, field_name: str) -> str | None:
        """Return the effective schema name, or None when the field is not marked."""
        binding = self.table_for(target_cls).lookup(field_name)
        return binding.schema_name if binding is not None else None

    def has_dynamic_provider(self, target_cls: type) -> bool:
        return self.table_for(target_cls).has_dynamic_provider


def _build_table(target_cls: type) -> FieldSchemaTable:
    declared: dict[str, FieldSchemaBinding] = {}
    for field_name, hint in _collect_annotations(target_cls).items():
        marker = _marker_of(hint)
        if marker is None:
            continue
        declared[field_name] = FieldSchemaBinding(
            declared_name=field_name,
            schema_name=marker.effective_name(field_name),
        )

    bindings = dict(declared)
    for field_name, binding in declared.items():
        bindings.setdefault(convention_variant(field_name), binding)

    return FieldSchemaTable(
        target_cls=target_cls,
        bindings=MappingProxyType(bindings),
        has_dynamic_provider=issubclass(target_cls, FieldSchemaProvider),
    )


def _collect_annotations(target_cls: type) -> dict[str, Any]:
    collected: dict[str, Any] = {}
    for klass in reversed(target_cls.__mro__):
        if klass is object:
            continue
        collected.update(_evaluated_annotations(klass))
    return collected


def _evaluated_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass, eval_str=True)
    except (AttributeError, NameError, SyntaxError, TypeError):
        return _evaluate_field_by_field(klass)


def _evaluate_field_by_field(klass: type) -> dict[str, Any]:
    """Evaluate each annotation alone; an unresolvable hint only unmarks its own field."""
    module = sys.modules.get(klass.__module__)
    global_ns = dict(vars(module)) if module is not None else {}
    local_ns = dict(vars(klass))
    evaluated: dict[str, Any] = {}
    for field_name, hint in inspect.get_annotations(klass).items():
        try:
            evaluated[field_name] = _evaluate_hint(hint, global_ns, local_ns)
        except ReflectionFailure as exc:
            logger.warning("Skipping field %s.%s: %s", klass.__qualname__, field_name, exc)
    return evaluated


def _evaluate_hint(hint: Any, global_ns: dict[str, Any], local_ns: dict[str, Any]) -> Any:
    if not isinstance(hint, str):
        return hint
    try:
        return eval(hint, global_ns, local_ns)
    except (AttributeError, NameError, SyntaxError, TypeError) as exc:
        raise ReflectionFailure(f"failed to evaluate annotation {hint!r}: {exc}") from exc


def _marker_of(hint: Any) -> JsonSchema | None:
    if get_origin(hint) is not Annotated:
        return None
    for metadata in hint.__metadata__:
        if isinstance(metadata, JsonSchema):
            return metadata
    return None
