from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for trie-maps and configuration dictionaries.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from triemap.core.node import TrieNode, build_triemap  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def make_reference_tree(backend: str = "ordered") -> TrieNode[str]:
    """
    Build the two-level reference tree.

                0
              a/ \\b
              A   B
            c/ \\d e/ \\f
            C  D E   F
    """
    tree = build_triemap(str, str, backend=backend)
    tree.insert("0")
    tree.insert("A", "a")
    tree.insert("B", "b")
    tree.insert("C", "a", "c")
    tree.insert("D", "a", "d")
    tree.insert("E", "b", "e")
    tree.insert("F", "b", "f")
    return tree


@pytest.fixture(params=["ordered", "hashed"])
def backend(request: pytest.FixtureRequest) -> str:
    """Run the test once per key mapping backend."""
    return request.param


@pytest.fixture
def reference_tree() -> TrieNode[str]:
    return make_reference_tree("ordered")


@pytest.fixture
def demo_config() -> Dict[str, Any]:
    """
    Return a valid, complete demo configuration.

    Mirrors the keys defined in 'triemap.domain.config'.
    """
    return {
        "demo": "traversal",
        "backend": "ordered",
        "render_format": "like",
        "data_tag": "data",
        "verbose": False,
        "seed": 7,
        "scale": "small",
    }
