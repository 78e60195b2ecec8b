"""Field marker requesting JSON schema injection, plus naming-convention helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_JSON_FIELD_SUFFIXES = ("Json", "_json")
_SEPARATOR_JSON_SUFFIX = "_json"
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")


@dataclass(frozen=True)
class JsonSchema:
    """Marks a JSON field for schema injection into generated documents.

    Place it in the field's ``Annotated`` metadata::

        class Customer:
            metadata_json: Annotated[dict[str, Any], JsonSchema()]
            settings: Annotated[dict[str, Any], JsonSchema(schema_name="preferences")]

    Without ``schema_name`` the name is derived from the field name
    (``metadataJson`` and ``metadata_json`` both become ``metadata``).
    """

    schema_name: str | None = None

    def effective_name(self, field_name: str) -> str:
        if self.schema_name is not None:
            return self.schema_name
        return derive_schema_name(field_name)


def derive_schema_name(field_name: str) -> str:
    """Strip the JSON-field suffix and convert camelCase to snake_case.

    A field named only ``Json`` derives the empty name; give such fields an
    explicit ``schema_name``.
    """
    derived = field_name
    for suffix in _JSON_FIELD_SUFFIXES:
        if derived.endswith(suffix):
            derived = derived[: -len(suffix)]
            break
    return to_snake_case(derived)


def to_snake_case(name: str) -> str:
    return _CASE_BOUNDARY.sub(r"\1_\2", name).lower()


def to_camel_case(name: str) -> str:
    """Convert ``api_config_json`` to ``apiConfigJson``."""
    first, *rest = name.split("_")
    return first + "".join(part[:1].upper() + part[1:] for part in rest)


def is_separator_json_field(name: str) -> bool:
    return name.endswith(_SEPARATOR_JSON_SUFFIX)


def convention_variant(name: str) -> str:
    """Return the same field name in the other naming convention."""
    if "_" in name:
        return to_camel_case(name)
    return to_snake_case(name)
