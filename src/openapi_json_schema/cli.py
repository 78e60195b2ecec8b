"""Command line interface entry point."""

from __future__ import annotations

import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from openapi_json_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from openapi_json_schema.coverage_reporting import write_coverage_workbook
from openapi_json_schema.schema_registry import SchemaSourceError
from openapi_json_schema.service_assembly import SchemaServices, assemble_schema_services


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON schema configuration file",
)
_TARGET_OPTION = click.option(
    "--target",
    "target",
    required=True,
    help="Class whose marked fields are resolved, as 'package.module:ClassName'",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-json-schema")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Unified JSON schema registry and field schema injector."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML schema configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML schema configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="unified-schema")
@_CONFIG_OPTION
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file for the unified schema; printed to stdout when omitted",
)
def unified_schema(config_path: str, output_path: str | None) -> None:
    """Build the unified anyOf schema of all configured providers."""
    services = _load_services(config_path)
    try:
        schema = services.registry.get_unified_schema()
    except SchemaSourceError as exc:
        raise CliError(str(exc)) from exc
    _emit_json(schema, output_path)


@cli.command(name="validate")
@_CONFIG_OPTION
@click.option(
    "--data",
    "data_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON payload to validate",
)
def validate(config_path: str, data_path: str) -> None:
    """Validate a JSON payload against the unified schema."""
    services = _load_services(config_path)
    data = _read_json(data_path)
    try:
        errors = services.validator.collect_errors(data)
    except SchemaSourceError as exc:
        raise CliError(str(exc)) from exc
    if errors:
        raise CliError("invalid\n" + "\n".join(f"  - {message}" for message in errors))
    click.echo("valid")


@cli.command(name="inject")
@_CONFIG_OPTION
@_TARGET_OPTION
@click.option(
    "--document",
    "document_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the generated JSON schema document to decorate",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file for the decorated document; printed to stdout when omitted",
)
def inject(config_path: str, target: str, document_path: str, output_path: str | None) -> None:
    """Inject field schemas of a class into a generated schema document."""
    services = _load_services(config_path)
    target_cls = _import_target_class(target)
    document = _read_json(document_path)
    if not isinstance(document, dict):
        raise CliError(f"Document root must be a JSON object: {document_path}")
    try:
        decorated = services.injector.inject(document, target_cls)
    except SchemaSourceError as exc:
        raise CliError(str(exc)) from exc
    _emit_json(decorated, output_path)


@cli.command(name="coverage-report")
@_CONFIG_OPTION
@_TARGET_OPTION
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the coverage workbook to write",
)
def coverage_report(config_path: str, target: str, output_path: str) -> None:
    """Write a workbook listing where each marked field gets its schema from."""
    services = _load_services(config_path)
    target_cls = _import_target_class(target)
    try:
        coverage = services.injector.describe_field_coverage(target_cls)
        written = write_coverage_workbook(target_cls, coverage, output_path)
    except (SchemaSourceError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


def _load_services(config_path: str) -> SchemaServices:
    try:
        return assemble_schema_services(load_configuration(config_path))
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _import_target_class(target: str) -> type:
    module_name, separator, qualname = target.partition(":")
    if not separator or not module_name or not qualname:
        raise CliError(f"Target must look like 'package.module:ClassName', got: {target}")
    try:
        resolved: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise CliError(f"Cannot import module {module_name}: {exc}") from exc
    for attribute in qualname.split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise CliError(f"Module {module_name} has no class {qualname}") from exc
    if not isinstance(resolved, type):
        raise CliError(f"Target {target} is not a class.")
    return resolved


def _read_json(path_value: str) -> Any:
    path = Path(path_value)
    if not path.exists():
        raise CliError(f"File not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CliError(f"Invalid JSON in {path}: {exc}") from exc


def _emit_json(payload: Any, output_path: str | None) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output_path is None:
        click.echo(text)
        return
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
