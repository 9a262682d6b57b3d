from __future__ import annotations

from .backends import Backend, HashedKeyMapping, KeyMapping, OrderedKeyMapping
from .errors import (
    EmptySlotError,
    KeyTypeMismatchError,
    PathDepthError,
    StaleLeaseError,
    TrieMapError,
    UnorderedBackendError,
)
from .lease import Lease
from .node import TrieBranch, TrieLeaf, TrieNode, build_triemap, otriemap, utriemap
from .schema import TrieSchema
from .visitors import Visit

__all__ = [
    "Backend",
    "KeyMapping",
    "OrderedKeyMapping",
    "HashedKeyMapping",
    "TrieSchema",
    "TrieNode",
    "TrieLeaf",
    "TrieBranch",
    "Lease",
    "Visit",
    "build_triemap",
    "otriemap",
    "utriemap",
    "TrieMapError",
    "EmptySlotError",
    "StaleLeaseError",
    "PathDepthError",
    "KeyTypeMismatchError",
    "UnorderedBackendError",
]
