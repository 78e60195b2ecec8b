"""Field annotation exports."""

from .annotation_resolver import (
    FieldSchemaBinding,
    FieldSchemaTable,
    ReflectionFailure,
    SchemaAnnotationResolver,
)
from .json_schema_marker import JsonSchema, derive_schema_name, to_camel_case, to_snake_case

__all__ = [
    "FieldSchemaBinding",
    "FieldSchemaTable",
    "JsonSchema",
    "ReflectionFailure",
    "SchemaAnnotationResolver",
    "derive_schema_name",
    "to_camel_case",
    "to_snake_case",
]
