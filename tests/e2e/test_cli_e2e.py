from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes
and stream output (stdout/stderr).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "triemap" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH to ensure the package
    is resolvable without being installed in site-packages.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


@pytest.mark.parametrize("demo", ["traversal", "feature-flags", "aggregation", "reduction", "geo-org"])
def test_cli_runs_every_demo(demo: str) -> None:
    """TC-01: Every demo exits with 0 and prints its report."""
    result = run_cli(["--demo", demo])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert result.stdout.startswith(f"== {demo} (ordered) ==")


def test_cli_feature_flags_report() -> None:
    """TC-02: The feature flag demo reports the effective flag per person."""
    result = run_cli(["--demo", "feature-flags", "--backend", "hashed"])

    assert result.returncode == 0
    assert "Jane Poe (004) can't use Text-Notification" in result.stdout
    assert "Mary Moe (001) can use Text-Notification" in result.stdout


def test_cli_json_output_and_proper_rendering() -> None:
    """TC-03: --json prints a parseable result whose rendering is valid JSON."""
    result = run_cli(["--demo", "reduction", "--seed", "3", "--format", "proper", "-v", "--json"])

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["summary"]["seed"] == 3
    assert "Before reduction:" in payload["rendering"]


def test_cli_dump_config(tmp_path: Path) -> None:
    """TC-04: --dump-config prints the merged configuration."""
    config_file = tmp_path / "cfg.json"
    config_file.write_text(json.dumps({"demo": "geo-org", "data_tag": "Data"}), encoding="utf-8")

    result = run_cli(["--config", str(config_file), "--dump-config"])

    assert result.returncode == 0
    dumped = json.loads(result.stdout)
    assert dumped["demo"] == "geo-org"
    assert dumped["data_tag"] == "Data"


def test_cli_invalid_config_file(tmp_path: Path) -> None:
    """TC-05: A corrupted config file is invalid input (Exit Code 2)."""
    config_file = tmp_path / "cfg.json"
    config_file.write_text("not json", encoding="utf-8")

    result = run_cli(["--config", str(config_file)])

    assert result.returncode == 2
    assert "ERROR" in result.stderr


def test_cli_rejects_unknown_choice() -> None:
    """TC-06: argparse rejects unknown demos (Exit Code 2)."""
    result = run_cli(["--demo", "sorting"])

    assert result.returncode == 2
    assert "invalid choice" in result.stderr


def test_cli_log_file(tmp_path: Path) -> None:
    """TC-07: --log-file persists the run in a log file."""
    log_file = tmp_path / "logs" / "demo.log"

    result = run_cli(["--demo", "traversal", "--debug", "--log-file", str(log_file)])

    assert result.returncode == 0
    assert log_file.exists()
    assert "Running demo 'traversal'" in log_file.read_text(encoding="utf-8")
