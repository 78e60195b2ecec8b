"""Schema source exports."""

from .source_models import FieldSchemaProvider, SchemaProvider, SchemaSource

__all__ = [
    "FieldSchemaProvider",
    "SchemaProvider",
    "SchemaSource",
]
