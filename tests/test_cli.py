import sys

import pytest

from unl2csv import cli


def test_build_parser_run():
    args = cli.build_parser().parse_args(["run", "-i", "orveus.sql", "-o", "out"])
    assert args.command == "run"
    assert args.input == "orveus.sql"
    assert args.output == "out"


def test_run_requires_output():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["run", "-i", "orveus.sql"])


def test_validate_config(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["unl2csv", "--config", "config/config.yaml", "validate-config"])
    cli.main()
    assert "Config OK" in capsys.readouterr().out


def test_failed_run_exits_with_status_2(tmp_path, monkeypatch):
    config_path = tmp_path / "config.json"
    config_path.write_text('{"project": {"log_dir": "%s"}}' % (tmp_path / "logs").as_posix(), encoding="utf-8")
    manifest_path = tmp_path / "empty.sql"
    manifest_path.write_text("", encoding="utf-8")
    monkeypatch.setattr(
        sys,
        "argv",
        ["unl2csv", "--config", str(config_path), "run", "-i", str(manifest_path), "-o", str(tmp_path / "out")],
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert excinfo.value.code == 2
