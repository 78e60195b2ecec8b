"""Service assembly exports."""

from .schema_services import SchemaServices, assemble_schema_services

__all__ = [
    "SchemaServices",
    "assemble_schema_services",
]
