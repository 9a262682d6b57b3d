from __future__ import annotations

"""
Value Leases.

insert, find and match hand out a Lease instead of the bare value. A lease
stays valid until the next structural mutation of the tree it came from: an
insert that creates a node, an erase that removes a value, or a clear. Every
node of a tree shares one TreeState whose generation counter records those
mutations; a lease remembers the generation it was issued at.
"""

from typing import TYPE_CHECKING, Generic, TypeVar

from triemap.core.errors import StaleLeaseError

if TYPE_CHECKING:
    from triemap.core.node import TrieNode

D = TypeVar("D")


class TreeState:
    """Mutation bookkeeping shared by all nodes of one tree."""

    __slots__ = ("generation",)

    def __init__(self) -> None:
        self.generation: int = 0

    def bump(self) -> None:
        """Record a structural mutation, invalidating outstanding leases."""
        self.generation += 1


class Lease(Generic[D]):
    """
    Handle on a stored value.

    Attributes:
        valid: False once the owning tree has been structurally mutated.
        value: The stored value; assignable to replace it in place.
    """

    __slots__ = ("_node", "_generation")

    def __init__(self, node: "TrieNode[D]") -> None:
        self._node = node
        self._generation = node._state.generation

    @property
    def valid(self) -> bool:
        return self._generation == self._node._state.generation

    @property
    def value(self) -> D:
        self._check()
        return self._node.value

    @value.setter
    def value(self, value: D) -> None:
        self._check()
        self._node.value = value

    def _check(self) -> None:
        if not self.valid:
            raise StaleLeaseError(
                "Lease used after a structural mutation of its tree; look the value up again."
            )

    def __repr__(self) -> str:
        if not self.valid:
            return "Lease(<stale>)"
        return f"Lease({self._node.value!r})"
