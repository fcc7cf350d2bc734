"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ngdocmap.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "map", "comments.json"])
    assert args.verbose is True
    assert args.command == "map"
    assert args.input == "comments.json"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["map", "--verbose"])
    assert args.verbose is True
    assert args.input is None


def test_cli_rejects_unknown_format() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["map", "comments.json", "--format", "yaml"])


def test_map_prints_json_to_stdout(
    doctrine_dump: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["--config", str(tmp_path), "map", str(doctrine_dump)])

    data = json.loads(capsys.readouterr().out)
    assert data[0]["entities"][0]["methods"][0]["returns"] == {
        "name": "The rendered node.",
        "type": "Element",
    }


def test_map_writes_output_file(
    doctrine_dump: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    target = tmp_path / "api.md"

    main(["--config", str(tmp_path), "map", str(doctrine_dump), "-o", str(target), "--format", "markdown"])

    assert "Output written to" in capsys.readouterr().out
    assert "## Module `app`" in target.read_text(encoding="utf-8")


def test_map_exits_on_malformed_comment(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    dump = tmp_path / "comments.json"
    dump.write_text(json.dumps([{"tags": [{"title": "ngdoc", "description": "module"}]}]), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "map", str(dump)])

    assert excinfo.value.code == 1
    assert "missing its @name tag" in capsys.readouterr().err


def test_map_exits_on_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "map", str(tmp_path / "missing.json")])

    assert excinfo.value.code == 1
    assert "Unable to read" in capsys.readouterr().err


def test_cli_accepts_config_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["map", "--config", "conf", "comments.json"])
    assert args.config == "conf"
    assert not hasattr(args, "verbose")


def test_map_to_stdout_keeps_info_logs_off_the_console(
    doctrine_dump: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["--config", str(tmp_path), "map", str(doctrine_dump)])

    assert "Mapped 1 modules" not in capsys.readouterr().err


def test_map_verbose_logs_stage_counts(
    doctrine_dump: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["map", "--config", str(tmp_path), str(doctrine_dump), "-v"])

    assert "ngdocmap: INFO: Mapped 1 modules, 1 entities, 1 methods" in capsys.readouterr().err
