"""Decorator around an external schema document builder."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .document_schema_injector import DocumentSchemaInjector

SchemaBuilder = Callable[..., Mapping[str, Any]]


class JsonFieldSchemaDecorator:
    """Wraps a document builder so every build gets field schemas injected.

    ``decorated`` is called as ``decorated(target_cls, **options)`` and must
    return the partially built document tree.
    """

    def __init__(self, decorated: SchemaBuilder, injector: DocumentSchemaInjector) -> None:
        self._decorated = decorated
        self._injector = injector

    def build_schema(self, target_cls: type, **options: Any) -> dict[str, Any]:
        document = self._decorated(target_cls, **options)
        return self._injector.inject(document, target_cls)

    __call__ = build_schema
