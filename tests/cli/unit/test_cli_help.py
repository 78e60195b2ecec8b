"""CLI smoke tests."""

from click.testing import CliRunner
from openapi_json_schema.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("generate-config", "unified-schema", "validate", "inject", "coverage-report"):
        assert command in result.output
