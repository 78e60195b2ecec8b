"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from openapi_json_schema.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["validate", "--data", "/tmp/data.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["unified-schema", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_file_returns_cli_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["unified-schema", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_malformed_target_returns_cli_error(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("providers: []\n", encoding="utf-8")
    document_path = tmp_path / "document.json"
    document_path.write_text("{}", encoding="utf-8")

    exit_code = main(
        [
            "inject",
            "--config",
            str(config_path),
            "--target",
            "no_colon_here",
            "--document",
            str(document_path),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "package.module:ClassName" in captured.err


def test_unimportable_target_returns_cli_error(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("providers: []\n", encoding="utf-8")

    exit_code = main(
        [
            "coverage-report",
            "--config",
            str(config_path),
            "--target",
            "module_that_does_not_exist_anywhere:Customer",
            "--output",
            str(tmp_path / "coverage.xlsx"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot import module" in captured.err
