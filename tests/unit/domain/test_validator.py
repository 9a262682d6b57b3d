from __future__ import annotations

"""
Unit tests for configuration validation.
"""

import pytest

from triemap.domain.validator import validate_config

# -----------------------------------------------------------------------------
# 1. Base Structure & Defaults
# -----------------------------------------------------------------------------

def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["demo"] == "traversal"
    assert len(warnings) == 1


def test_validate_complete_config_is_unchanged(demo_config) -> None:
    cfg, warnings = validate_config(demo_config)

    assert cfg == demo_config
    assert warnings == []


def test_validate_empty_dict_fills_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["backend"] == "ordered"
    assert cfg["scale"] == "small"
    assert warnings == []

# -----------------------------------------------------------------------------
# 2. Type Correction (Non-Strict Mode)
# -----------------------------------------------------------------------------

def test_choices_are_case_insensitive() -> None:
    cfg, warnings = validate_config({"demo": " Geo-Org ", "render_format": "D3"})

    assert cfg["demo"] == "geo-org"
    assert cfg["render_format"] == "d3"
    assert warnings == []


def test_unknown_choice_falls_back() -> None:
    cfg, warnings = validate_config({"backend": "btree"})

    assert cfg["backend"] == "ordered"
    assert len(warnings) == 1
    assert "backend" in warnings[0]


def test_string_conversions() -> None:
    cfg, warnings = validate_config({"verbose": "yes", "seed": " 12 "})

    assert cfg["verbose"] is True
    assert cfg["seed"] == 12
    assert len(warnings) == 2


def test_invalid_types_fall_back() -> None:
    cfg, warnings = validate_config({"seed": "twelve", "data_tag": 5, "verbose": [1]})

    assert cfg["seed"] == 2022
    assert cfg["data_tag"] == "data"
    assert cfg["verbose"] is False
    assert len(warnings) == 3


def test_bool_is_not_an_int_seed() -> None:
    cfg, warnings = validate_config({"seed": True})

    assert cfg["seed"] == 2022
    assert warnings

# -----------------------------------------------------------------------------
# 3. Strict Mode
# -----------------------------------------------------------------------------

def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(ValueError):
        validate_config({"demo": "unknown"}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"verbose": "yes"}, strict=True)
