from __future__ import annotations

"""
Demo Harness Configuration.

Dict-based settings driving the command-line demonstrations: which demo to
run, the backend of the trees it builds, how trees are rendered, and the
parameters of the randomized reduction demo. Values can be layered from the
defaults, an optional JSON file and command-line overrides.
"""

import json
import logging
import os
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEMO_NAMES: List[str] = [
    "traversal",
    "feature-flags",
    "aggregation",
    "reduction",
    "geo-org",
]
BACKEND_NAMES: List[str] = ["ordered", "hashed"]
FORMAT_NAMES: List[str] = ["like", "proper", "d3"]
SCALE_NAMES: List[str] = ["small", "large"]

DEFAULT_SEED = 2022


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default demo configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "demo": "traversal",
        "backend": "ordered",

        # Rendering
        "render_format": "like",
        "data_tag": "data",
        "verbose": False,

        # Reduction demo
        "seed": DEFAULT_SEED,
        "scale": "small",
    }

# -----------------------------------------------------------------------------
# Loading
# -----------------------------------------------------------------------------

def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file on top of the defaults.

    A missing file is not an error: the defaults are returned and a warning
    is logged.

    Args:
        path: Path of a JSON document holding an object.

    Returns:
        Dict[str, Any]: Defaults updated with the file's known keys.

    Raises:
        ValueError: If the file is not valid JSON or not a JSON object.
    """
    config = get_default_config()
    if not path or not os.path.exists(path):
        logger.warning(f"Config file not found: {path!r}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Config file '{path}' is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(
            f"Config file '{path}' must hold a JSON object, found {type(data).__name__}."
        )

    unknown = sorted(set(data) - set(config))
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    config.update({k: v for k, v in data.items() if k in config})
    logger.debug(f"Config loaded from {path}")
    return config
