"""Document injection exports."""

from .document_schema_injector import (
    DEFINITION_KEYS,
    DocumentSchemaInjector,
    remove_convention_duplicates,
)
from .field_schema_files import (
    FieldSchemaFileError,
    FieldSchemaFileMissing,
    FieldSchemaParseError,
    field_schema_path,
    load_field_schema_file,
)
from .field_schema_rewriter import is_pure_choice, rewrite_field_schema
from .injection_outcomes import FieldCoverage, ResolvedFieldSchema, SchemaOrigin
from .schema_builder_decorator import JsonFieldSchemaDecorator, SchemaBuilder

__all__ = [
    "DEFINITION_KEYS",
    "DocumentSchemaInjector",
    "FieldCoverage",
    "FieldSchemaFileError",
    "FieldSchemaFileMissing",
    "FieldSchemaParseError",
    "JsonFieldSchemaDecorator",
    "ResolvedFieldSchema",
    "SchemaBuilder",
    "SchemaOrigin",
    "field_schema_path",
    "is_pure_choice",
    "load_field_schema_file",
    "remove_convention_duplicates",
    "rewrite_field_schema",
]
