from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI options to configuration keys.
2. Unset options leave the configuration untouched.
3. Choice validation performed by argparse.
"""

import pytest

from triemap.infra.logging.config import DEFAULT_LOG_FILE
from triemap.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_options_mapping() -> None:
    args = parse_args([
        "--demo", "reduction",
        "--backend", "hashed",
        "--format", "d3",
        "--data-tag", "Data",
        "--seed", "99",
        "--size", "large",
        "-v",
    ])

    overrides = args_to_overrides(args)

    assert overrides == {
        "demo": "reduction",
        "backend": "hashed",
        "render_format": "d3",
        "data_tag": "Data",
        "seed": 99,
        "scale": "large",
        "verbose": True,
    }


def test_cli_unset_options_are_none() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert "verbose" not in overrides
    assert all(value is None for value in overrides.values())


def test_cli_tool_flags() -> None:
    args = parse_args(["--json", "--dump-config", "--use-defaults", "--debug", "--log-file", "x.log"])

    assert args.json_output is True
    assert args.dump_config is True
    assert args.use_defaults is True
    assert args.debug is True
    assert args.log_file == "x.log"


def test_cli_log_file_flag_without_name_uses_default() -> None:
    assert parse_args(["--log-file"]).log_file == DEFAULT_LOG_FILE
    assert parse_args([]).log_file is None


def test_cli_rejects_unknown_demo() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--demo", "sorting"])
