from __future__ import annotations

"""
Trie-Map Error Taxonomy.

Absent values, erase misses and duplicate inserts are reported through return
values and flags, never through exceptions. The classes below cover the
programming errors only: misuse that a statically typed host would reject at
compile time, and dereferencing a slot that holds nothing.
"""


class TrieMapError(Exception):
    """Base class for every error raised by the trie-map core."""


class EmptySlotError(TrieMapError, LookupError):
    """Raised when reading or replacing the value of a node that holds none."""


class StaleLeaseError(TrieMapError, RuntimeError):
    """Raised when a lease is used after a structural mutation of its tree."""


class PathDepthError(TrieMapError, TypeError):
    """Raised when a path carries more keys than the node has levels below it."""


class KeyTypeMismatchError(TrieMapError, TypeError):
    """Raised when a key does not match the key type configured for its level."""


class UnorderedBackendError(TrieMapError, TypeError):
    """Raised when ordering is requested between hashed-backend trees."""
