"""Tests for the console entry point."""

import json
import os

from floydpar.cli import main


def test_run_from_flags(capsys):
    assert main(["--size", "6", "--seed", "1", "--workers", "3"]) == 0
    out = capsys.readouterr().out
    assert "Count of infinities" in out
    assert "Path from [0] to [1]:" in out
    assert "There are 0 difference between original and parallel algorithms' lengths." in out
    assert "There are 0 difference between original and parallel algorithms' paths." in out


def test_quiet_hides_matrices(capsys):
    assert main(["--size", "5", "--seed", "2", "--quiet", "--no-snapshot"]) == 0
    out = capsys.readouterr().out
    assert "Path from" not in out
    assert "Execution time:" in out


def test_asks_size_interactively(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "4")
    assert main(["--seed", "3", "--quiet"]) == 0
    assert "Calculating..." in capsys.readouterr().out


def test_config_file_and_report(tmp_path, capsys):
    conf = tmp_path / "run.json"
    conf.write_text(json.dumps({
        "size": 5, "seed": 8, "max_workers": 2,
        "report_dir": str(tmp_path / "reports"), "show_matrices": False,
    }), encoding="utf-8")
    assert main(["--config", str(conf)]) == 0
    assert len(os.listdir(tmp_path / "reports")) == 1
    assert "Report:" in capsys.readouterr().out


def test_bad_config(tmp_path, capsys):
    conf = tmp_path / "run.json"
    conf.write_text('{"size": "big"}', encoding="utf-8")
    assert main(["--config", str(conf)]) == 2
    assert "Error de configuración" in capsys.readouterr().err


def test_bad_worker_count(capsys):
    assert main(["--size", "3", "--workers", "0", "--quiet"]) == 2
