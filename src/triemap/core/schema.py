from __future__ import annotations

"""
Trie-Map Schema.

Runtime stand-in for the type-level list of prefix key types. A schema fixes
the depth of a tree (one level per key type) and the backend used for every
key mapping. Nodes refer to the schema together with their own level index,
so a path can be checked against the levels remaining below any node before
anything is mutated.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from triemap.core.backends import Backend
from triemap.core.errors import KeyTypeMismatchError, PathDepthError

# -----------------------------------------------------------------------------
# SCHEMA MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TrieSchema:
    """
    Immutable description of a trie-map's levels.

    Attributes:
        key_types: Key type per level, outermost first. None or object
            disables checking at that level.
        backend: Key mapping strategy used by every branch node.
    """
    key_types: Tuple[Optional[Any], ...] = ()
    backend: Backend = Backend.ORDERED

    @property
    def depth(self) -> int:
        """Number of nesting levels below the root."""
        return len(self.key_types)

    def remaining(self, level: int) -> int:
        """Number of levels below a node sitting at the given level."""
        return self.depth - level

    def check_path(self, level: int, path: Sequence[Any]) -> None:
        """
        Validate a path addressed from a node at the given level.

        Args:
            level: Number of keys consumed to reach the node.
            path: Keys to follow from that node.

        Raises:
            PathDepthError: If the path is longer than the levels below.
            KeyTypeMismatchError: If a key has the wrong type for its level.
        """
        if len(path) > self.remaining(level):
            raise PathDepthError(
                f"Path of {len(path)} key(s) exceeds the {self.remaining(level)} "
                f"level(s) below level {level} (tree depth {self.depth})."
            )
        for offset, key in enumerate(path):
            expected = self.key_types[level + offset]
            if expected is None or expected is object:
                continue
            if not isinstance(key, expected):
                raise KeyTypeMismatchError(
                    f"Key {key!r} at level {level + offset} is {type(key).__name__}, "
                    f"expected {_type_name(expected)}."
                )


def _type_name(expected: Any) -> str:
    if isinstance(expected, tuple):
        return " | ".join(_type_name(t) for t in expected)
    return getattr(expected, "__name__", repr(expected))
