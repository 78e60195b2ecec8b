"""Errors raised while building the unified schema."""

from __future__ import annotations


class SchemaSourceError(Exception):
    """Raised when a registered schema source cannot contribute to the unified schema."""

    def __init__(self, message: str, *, source_name: str) -> None:
        super().__init__(message)
        self.source_name = source_name


class SourceNotFoundError(SchemaSourceError):
    """Raised when a source location does not resolve to a readable document."""


class SourceParseError(SchemaSourceError):
    """Raised when a source document is not a well-formed JSON schema."""
