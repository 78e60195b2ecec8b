"""Annotation resolver tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Annotated, Any

import pytest
from openapi_json_schema.field_annotations import SchemaAnnotationResolver
from openapi_json_schema.field_annotations.json_schema_marker import JsonSchema

if TYPE_CHECKING:
    from decimal import Decimal


@dataclass
class Customer:
    name: str
    metadataJson: Annotated[dict[str, Any], JsonSchema()] = field(default_factory=dict)
    api_config_json: Annotated[dict[str, Any], JsonSchema()] = field(default_factory=dict)
    settings: Annotated[dict[str, Any], JsonSchema(schema_name="preferences")] = field(
        default_factory=dict
    )
    notes: Annotated[str, "not a schema marker"] = ""


class PremiumCustomer(Customer):
    loyaltyJson: Annotated[dict[str, Any], JsonSchema()]


class DynamicIntegration:
    configJson: Annotated[dict[str, Any], JsonSchema()]

    @classmethod
    def get_json_schema(cls, schema_name: str, registry: Any) -> dict[str, Any] | None:
        return None


class BrokenAnnotations:
    payloadJson: Annotated[UndefinedPayload, JsonSchema()]  # noqa: F821


class Invoice:
    metadataJson: Annotated[dict[str, Any], JsonSchema()]
    total: Decimal
    linesJson: Annotated[list[dict[str, Any]], JsonSchema(schema_name="invoice_lines")]


def test_resolves_derived_and_explicit_names() -> None:
    resolver = SchemaAnnotationResolver()

    assert resolver.resolve(Customer, "metadataJson") == "metadata"
    assert resolver.resolve(Customer, "api_config_json") == "api_config"
    assert resolver.resolve(Customer, "settings") == "preferences"


def test_unmarked_and_unknown_fields_resolve_to_none() -> None:
    resolver = SchemaAnnotationResolver()

    assert resolver.resolve(Customer, "name") is None
    assert resolver.resolve(Customer, "notes") is None
    assert resolver.resolve(Customer, "doesNotExist") is None


def test_other_naming_convention_resolves_to_same_schema() -> None:
    resolver = SchemaAnnotationResolver()

    assert resolver.resolve(Customer, "metadata_json") == "metadata"
    assert resolver.resolve(Customer, "apiConfigJson") == "api_config"


def test_inherited_marked_fields_are_resolved() -> None:
    resolver = SchemaAnnotationResolver()

    assert resolver.resolve(PremiumCustomer, "metadataJson") == "metadata"
    assert resolver.resolve(PremiumCustomer, "loyaltyJson") == "loyalty"


def test_table_is_built_once_per_class() -> None:
    resolver = SchemaAnnotationResolver()

    first = resolver.table_for(Customer)
    second = resolver.table_for(Customer)

    assert first is second
    assert [binding.declared_name for binding in first.declared_bindings] == [
        "metadataJson",
        "api_config_json",
        "settings",
    ]


def test_detects_dynamic_provider_capability() -> None:
    resolver = SchemaAnnotationResolver()

    assert resolver.has_dynamic_provider(DynamicIntegration) is True
    assert resolver.has_dynamic_provider(Customer) is False


def test_unresolvable_annotations_are_warned_and_treated_as_unmarked(caplog) -> None:
    resolver = SchemaAnnotationResolver()

    with caplog.at_level(logging.WARNING):
        schema_name = resolver.resolve(BrokenAnnotations, "payloadJson")

    assert schema_name is None
    assert "BrokenAnnotations" in caplog.text


def test_non_class_target_raises_type_error() -> None:
    resolver = SchemaAnnotationResolver()

    with pytest.raises(TypeError):
        resolver.resolve(Customer(name="x"), "metadataJson")  # type: ignore[arg-type]


def test_type_checking_only_annotation_keeps_sibling_markers(caplog) -> None:
    resolver = SchemaAnnotationResolver()

    with caplog.at_level(logging.WARNING):
        table = resolver.table_for(Invoice)

    assert resolver.resolve(Invoice, "metadataJson") == "metadata"
    assert resolver.resolve(Invoice, "lines_json") == "invoice_lines"
    assert resolver.resolve(Invoice, "total") is None
    assert [binding.declared_name for binding in table.declared_bindings] == [
        "metadataJson",
        "linesJson",
    ]
    assert "Invoice.total" in caplog.text
