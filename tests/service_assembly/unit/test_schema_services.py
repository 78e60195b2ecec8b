"""Service assembly tests."""

from __future__ import annotations

import json
from pathlib import Path

from openapi_json_schema.configuration import Configuration
from openapi_json_schema.schema_registry import InMemoryTTLCache
from openapi_json_schema.schema_sources import SchemaSource
from openapi_json_schema.service_assembly import assemble_schema_services


def test_services_share_one_registry_with_configured_providers(tmp_path: Path) -> None:
    schema_path = tmp_path / "github.json"
    schema_path.write_text(json.dumps({"type": "object"}), encoding="utf-8")
    configuration = Configuration(
        path=tmp_path / "config.yaml",
        schema_base_path=tmp_path / "schemas",
        cache_ttl=90,
        providers=(SchemaSource(name="github", location=schema_path),),
    )
    cache = InMemoryTTLCache()

    services = assemble_schema_services(configuration, cache=cache)

    assert list(services.registry.sources) == ["github"]
    assert services.registry.cache_ttl == 90
    assert services.injector.schema_base_path == tmp_path / "schemas"
    assert services.validator.validate({"any": "object"}) is True
    assert len(cache) == 1
