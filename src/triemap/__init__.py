from __future__ import annotations

"""
Trie-Map.

Generic associative container addressed by an ordered list of prefix keys,
one per level, with inherited lookups (match), hierarchical visiting
(climb, traverse) and JSON-style rendering.
"""

from triemap.algo.reduce import reduce_tree
from triemap.core import (
    Backend,
    EmptySlotError,
    KeyTypeMismatchError,
    Lease,
    PathDepthError,
    StaleLeaseError,
    TrieBranch,
    TrieLeaf,
    TrieMapError,
    TrieNode,
    TrieSchema,
    UnorderedBackendError,
    Visit,
    build_triemap,
    otriemap,
    utriemap,
)
from triemap.io import RenderFormat, d3, dump, like, proper, render

__version__ = "1.0.0"

__all__ = [
    "Backend",
    "TrieSchema",
    "TrieNode",
    "TrieLeaf",
    "TrieBranch",
    "Lease",
    "Visit",
    "build_triemap",
    "otriemap",
    "utriemap",
    "reduce_tree",
    "RenderFormat",
    "render",
    "dump",
    "like",
    "proper",
    "d3",
    "TrieMapError",
    "EmptySlotError",
    "StaleLeaseError",
    "PathDepthError",
    "KeyTypeMismatchError",
    "UnorderedBackendError",
]
