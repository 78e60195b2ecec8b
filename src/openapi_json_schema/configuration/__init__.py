"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import DEFAULT_SCHEMA_BASE_PATH, ConfigurationError, load_configuration
from .runtime_settings import Configuration

__all__ = [
    "Configuration",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_SCHEMA_BASE_PATH",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
