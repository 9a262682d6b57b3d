from __future__ import annotations

"""
Unit tests for the CLI application controller.

Runs main() in-process and checks exit codes, configuration layering and
output selection.
"""

import json

import pytest

from triemap.infra.logging import shutdown_logging
from triemap.interface.cli.app import _merge_config, main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    shutdown_logging()


def test_merge_config_ignores_unknown_and_unset_keys(demo_config) -> None:
    merged = _merge_config(demo_config, {"demo": "geo-org", "seed": None, "bogus": 1})

    assert merged["demo"] == "geo-org"
    assert merged["seed"] == demo_config["seed"]
    assert "bogus" not in merged


def test_dump_config_layers_file_and_cli(tmp_path, capsys) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"backend": "hashed", "seed": 5}), encoding="utf-8")

    code = main(["--config", str(path), "--seed", "8", "--dump-config"])

    assert code == 0
    dumped = json.loads(capsys.readouterr().out)
    assert dumped["backend"] == "hashed"
    assert dumped["seed"] == 8


def test_use_defaults_ignores_config_file(tmp_path, capsys) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"backend": "hashed"}), encoding="utf-8")

    assert main(["--config", str(path), "--use-defaults", "--dump-config"]) == 0
    assert json.loads(capsys.readouterr().out)["backend"] == "ordered"


def test_invalid_config_file_exits_with_2(tmp_path, capsys) -> None:
    path = tmp_path / "cfg.json"
    path.write_text("{", encoding="utf-8")

    assert main(["--config", str(path)]) == 2
    assert "ERROR" in capsys.readouterr().err


def test_human_summary(capsys) -> None:
    assert main(["--demo", "traversal"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("== traversal (ordered) ==")
    assert "0ACDBEF" in out


def test_json_output(capsys) -> None:
    assert main(["--demo", "feature-flags", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert payload["demo"] == "feature-flags"
    assert payload["backend"] == "ordered"


def test_unexpected_failure_exits_with_1(monkeypatch, capsys) -> None:
    def explode(cfg):
        raise RuntimeError("boom")

    monkeypatch.setattr("triemap.interface.cli.app.run_demo", explode)

    assert main(["--demo", "traversal"]) == 1
    assert "boom" in capsys.readouterr().err


def test_interrupt_exits_with_130(monkeypatch) -> None:
    def interrupt(cfg):
        raise KeyboardInterrupt

    monkeypatch.setattr("triemap.interface.cli.app.run_demo", interrupt)

    assert main(["--demo", "traversal"]) == 130
