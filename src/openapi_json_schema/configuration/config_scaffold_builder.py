"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "openapi-json-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Schema configuration template for openapi-json-schema.
# Relative paths are resolved against the directory of this file.
# Every key is optional; the values below are the defaults.

# Directory holding per-field schema files named {classname}-{schema_name}.json.
schema_base_path: "config/schemas"

# Seconds the unified provider schema stays cached; 0 disables caching.
cache_ttl: 3600

# Provider schemas combined into the unified anyOf schema, in this order.
# A provider listed twice under the same name replaces the earlier entry.
providers: []
#  - name: "github"
#    path: "providers/github.json"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML schema configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder schema configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
