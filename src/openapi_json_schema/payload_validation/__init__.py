"""Payload validation exports."""

from .unified_schema_validator import SchemaValidator

__all__ = ["SchemaValidator"]
