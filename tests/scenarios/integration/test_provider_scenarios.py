"""Scenario-style integration tests over the bundled sample providers."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Annotated, Any

from openapi_json_schema.configuration.loader import load_configuration
from openapi_json_schema.document_injection import JsonFieldSchemaDecorator
from openapi_json_schema.field_annotations import JsonSchema
from openapi_json_schema.schema_registry import SchemaRegistry
from openapi_json_schema.service_assembly import SchemaServices, assemble_schema_services


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _sample_services() -> SchemaServices:
    configuration = load_configuration(_project_root() / "samples" / "openapi-json-schema.yaml")
    return assemble_schema_services(configuration)


class Customer:
    name: str
    metadata_json: Annotated[dict[str, Any], JsonSchema()]
    integrationJson: Annotated[dict[str, Any], JsonSchema()]

    @classmethod
    def get_json_schema(
        cls, schema_name: str, registry: SchemaRegistry
    ) -> dict[str, Any] | None:
        if schema_name == "integration":
            return registry.get_unified_schema()
        return None


def _generated_customer_document(target_cls: type, **_: Any) -> dict[str, Any]:
    return {
        "type": "object",
        "definitions": {
            target_cls.__name__: {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "metadataJson": {"type": "object"},
                    "metadata_json": {"type": "object"},
                    "integrationJson": {"type": "object"},
                },
            }
        },
    }


def test_given_three_sample_providers_when_building_unified_schema_then_order_is_kept() -> None:
    services = _sample_services()

    unified = services.registry.get_unified_schema()

    assert unified["$schema"] == "https://json-schema.org/draft-07/schema#"
    assert unified["description"] == (
        "Unified schema from 3 provider(s). Must match one of the available schemas."
    )
    assert [entry["title"] for entry in unified["anyOf"]] == ["Basecamp", "GitHub", "GitLab"]


def test_given_github_payload_when_validating_then_it_matches_one_provider() -> None:
    services = _sample_services()

    assert services.validator.validate(
        {"type": "github", "token": "x", "repository": "r", "owner": "o"}
    )


def test_given_unknown_provider_type_when_validating_then_payload_is_rejected() -> None:
    services = _sample_services()

    assert not services.validator.validate({"type": "unknown"})
    assert services.validator.collect_errors({"type": "unknown"})


def test_given_decorated_builder_when_building_customer_schema_then_fields_are_injected() -> None:
    services = _sample_services()
    builder = JsonFieldSchemaDecorator(_generated_customer_document, services.injector)

    document = builder(Customer)

    properties = document["definitions"]["Customer"]["properties"]
    assert list(properties) == ["name", "metadataJson", "integrationJson"]
    assert properties["name"] == {"type": "string"}
    assert properties["metadataJson"]["description"] == "Free-form customer metadata."
    assert properties["metadataJson"]["required"] == ["segment"]
    assert properties["metadataJson"]["additionalProperties"] is False
    assert set(properties["integrationJson"]) == {"description", "anyOf"}
    assert len(properties["integrationJson"]["anyOf"]) == 3


def test_given_sample_customer_when_describing_coverage_then_origins_are_reported() -> None:
    services = _sample_services()

    coverage = services.injector.describe_field_coverage(Customer)

    assert [(item.field_name, item.origin.value) for item in coverage] == [
        ("metadata_json", "file"),
        ("integrationJson", "dynamic"),
    ]


def test_given_module_entry_point_when_requesting_help_then_commands_are_listed() -> None:
    project_root = _project_root()
    environment = dict(os.environ)
    environment["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(project_root / "src"), environment.get("PYTHONPATH")) if part
    )

    result = subprocess.run(
        [sys.executable, "-m", "openapi_json_schema", "--help"],
        cwd=project_root,
        env=environment,
        check=False,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert "unified-schema" in result.stdout
    assert "coverage-report" in result.stdout
