from __future__ import annotations

"""
Trie-Map Nodes.

A trie-map is a tree of nodes addressed by an ordered list of prefix keys,
one key per configured level. Every node carries an optional data slot; a
node above the deepest level also owns a key mapping to the nodes of the
next level.

The algorithm family is implemented twice, mirroring the two recursion cases:

* TrieLeaf is the base case (no levels left). Paths are always empty.
* TrieBranch is the general case. Each operation consumes the first key of
  the path and delegates the rest to the child's instance of the same
  operation.

Public methods validate the whole path against the schema up front and then
run a private recursive twin that works on a tuple path.
"""

from functools import total_ordering
from typing import Any, Generic, Optional, Tuple, TypeVar

from triemap.core.backends import Backend, KeyMapping
from triemap.core.errors import EmptySlotError, UnorderedBackendError
from triemap.core.lease import Lease, TreeState
from triemap.core.schema import TrieSchema
from triemap.core.visitors import (
    LevelVisitor,
    NodeVisitor,
    PostVisitor,
    PreVisitor,
    Visit,
    always_continue,
    ignore,
    proceed,
)

D = TypeVar("D")

Path = Tuple[Any, ...]

# Marks an empty data slot; None is a legitimate stored value.
_EMPTY: Any = object()

# -----------------------------------------------------------------------------
# SHARED NODE BEHAVIOUR
# -----------------------------------------------------------------------------

@total_ordering
class TrieNode(Generic[D]):
    """
    Behaviour common to both recursion cases: the data slot, leases,
    convenience lookups, equality and ordering of the slot.
    """

    __slots__ = ("_schema", "_level", "_state", "_slot")

    def __init__(self, schema: TrieSchema, level: int, state: TreeState) -> None:
        self._schema = schema
        self._level = level
        self._state = state
        self._slot: Any = _EMPTY

    # --- Introspection ---

    @property
    def schema(self) -> TrieSchema:
        return self._schema

    @property
    def backend(self) -> Backend:
        return self._schema.backend

    @property
    def level(self) -> int:
        """Number of keys consumed to reach this node from the root."""
        return self._level

    @property
    def depth(self) -> int:
        """Number of levels below this node."""
        return self._schema.remaining(self._level)

    # --- Data slot ---

    @property
    def has_value(self) -> bool:
        return self._slot is not _EMPTY

    @property
    def value(self) -> D:
        """
        Stored value of this node.

        Raises:
            EmptySlotError: If the node holds no value. Check has_value first.
        """
        if self._slot is _EMPTY:
            raise EmptySlotError(f"Node at level {self._level} holds no value.")
        return self._slot

    @value.setter
    def value(self, value: D) -> None:
        if self._slot is _EMPTY:
            raise EmptySlotError(
                f"Node at level {self._level} holds no value; use insert() to store one."
            )
        self._slot = value

    def _lease(self) -> Optional[Lease[D]]:
        return Lease(self) if self._slot is not _EMPTY else None

    def _store(self, data: D) -> Tuple[Lease[D], bool]:
        created = self._slot is _EMPTY
        if created:
            self._slot = data
        return Lease(self), created

    def _discard(self) -> int:
        if self._slot is _EMPTY:
            return 0
        self._slot = _EMPTY
        self._state.bump()
        return 1

    # --- Public algorithm suite (validation + delegation) ---

    def insert(self, data: D, *path: Any) -> Tuple[Lease[D], bool]:
        """
        Store data at path unless a value is already there.

        Missing nodes along the path are created. An existing value is never
        overwritten.

        Args:
            data: Value to store.
            *path: One key per level, outermost first.

        Returns:
            Tuple[Lease, bool]: Lease on the value now at path and True if
            this call stored it.
        """
        self._schema.check_path(self._level, path)
        return self._insert(data, path)

    def erase(self, *path: Any) -> int:
        """
        Remove the value at path and prune subtrees left empty.

        Returns:
            int: 1 if a value was removed, 0 otherwise.
        """
        self._schema.check_path(self._level, path)
        return self._erase(path)

    def find(self, *path: Any) -> Optional[Lease[D]]:
        """Exact lookup. Returns None if any key or the value is missing."""
        self._schema.check_path(self._level, path)
        return self._find(path)

    def match(self, *path: Any) -> Optional[Lease[D]]:
        """
        Deepest value along path.

        Follows path as far as keys exist and returns the value of the
        deepest node on the way that holds one, falling back level by level
        toward this node. Returns None if no node on the way holds a value.
        """
        self._schema.check_path(self._level, path)
        return self._match(path)

    def jump(self, visitor: NodeVisitor, *path: Any) -> None:
        """Call visitor(node) on the node at path, if the full path exists."""
        self._schema.check_path(self._level, path)
        self._jump(visitor, path)

    def climb(self, pre: NodeVisitor, post: NodeVisitor, *path: Any) -> None:
        """
        Visit the chain of nodes from here down along path.

        pre(node) fires on the way down; descent stops where a key is missing
        or pre answers STOP. post(node) fires on the way back up for every
        node that was pre-visited.
        """
        self._schema.check_path(self._level, path)
        self._climb(pre, post, path)

    def climb_pre(self, pre: NodeVisitor, *path: Any) -> None:
        self.climb(pre, ignore, *path)

    def climb_post(self, post: NodeVisitor, *path: Any) -> None:
        self.climb(always_continue, post, *path)

    def traverse_dfs(self, pre: PreVisitor, post: PostVisitor) -> None:
        """
        Depth-first walk of the whole subtree.

        pre(node, *edge) fires first; edge is empty for this node and holds
        the one-level key for every descendant. Children are walked in
        backend order when pre answers CONTINUE. post(node, *edge) always
        fires afterwards.
        """
        self._traverse_dfs(pre, post, ())

    def traverse_pre(self, pre: PreVisitor) -> None:
        self._traverse_dfs(pre, ignore, ())

    def traverse_post(self, post: PostVisitor) -> None:
        self._traverse_dfs(always_continue, post, ())

    def get(self, *path: Any, default: Any = None) -> Any:
        """Exact lookup returning the bare value, or default when absent."""
        lease = self.find(*path)
        return lease.value if lease is not None else default

    def contains(self, *path: Any) -> bool:
        return self.find(*path) is not None

    # --- Sizing ---

    def __len__(self) -> int:
        return self.size()

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        if self.depth != other.depth:
            return False
        return self._slot_equal(other) and self._subtree_equal(other)

    def __lt__(self, other: object) -> bool:
        """
        Order by slot (absent first), then child count, then children
        pairwise in key order. Ordered backend only.
        """
        if not isinstance(other, TrieNode) or self.depth != other.depth:
            return NotImplemented
        self._require_ordered(other)
        if not self._slot_equal(other):
            return self._slot_less(other)
        return self._subtree_less(other)

    def _require_ordered(self, other: "TrieNode[Any]") -> None:
        if self.backend is not Backend.ORDERED or other.backend is not Backend.ORDERED:
            raise UnorderedBackendError(
                "Ordering is only defined between ordered-backend trie-maps; "
                "hashed iteration order is unspecified."
            )

    def _slot_equal(self, other: "TrieNode[Any]") -> bool:
        if self._slot is _EMPTY or other._slot is _EMPTY:
            return self._slot is other._slot
        return bool(self._slot == other._slot)

    def _slot_less(self, other: "TrieNode[Any]") -> bool:
        # Absent sorts before present.
        if self._slot is _EMPTY:
            return other._slot is not _EMPTY
        if other._slot is _EMPTY:
            return False
        return bool(self._slot < other._slot)

    # Mutable container: equality is structural, hashing is unsupported.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(backend={self.backend.value}, depth={self.depth}, "
            f"size={self.size()}, count={self.count()})"
        )

    def __str__(self) -> str:
        from triemap.io.renderer import like
        return like(self)

    # --- Recursion hooks implemented by each case ---

    def _insert(self, data: D, path: Path) -> Tuple[Lease[D], bool]:
        raise NotImplementedError

    def _erase(self, path: Path) -> int:
        raise NotImplementedError

    def _find(self, path: Path) -> Optional[Lease[D]]:
        raise NotImplementedError

    def _match(self, path: Path) -> Optional[Lease[D]]:
        raise NotImplementedError

    def _jump(self, visitor: NodeVisitor, path: Path) -> None:
        raise NotImplementedError

    def _climb(self, pre: NodeVisitor, post: NodeVisitor, path: Path) -> None:
        raise NotImplementedError

    def _traverse_dfs(self, pre: PreVisitor, post: PostVisitor, edge: Path) -> None:
        raise NotImplementedError

    def _subtree_equal(self, other: "TrieNode[Any]") -> bool:
        raise NotImplementedError

    def _subtree_less(self, other: "TrieNode[Any]") -> bool:
        raise NotImplementedError

    def traverse_level(self, visitor: LevelVisitor) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def leaf(self) -> bool:
        raise NotImplementedError

    def empty(self) -> bool:
        raise NotImplementedError

    def size(self) -> int:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def height(self) -> int:
        raise NotImplementedError

# -----------------------------------------------------------------------------
# BASE CASE
# -----------------------------------------------------------------------------

class TrieLeaf(TrieNode[D]):
    """Node at the deepest level: an optional data slot and nothing else."""

    __slots__ = ()

    def _insert(self, data: D, path: Path) -> Tuple[Lease[D], bool]:
        return self._store(data)

    def _erase(self, path: Path) -> int:
        return self._discard()

    def clear(self) -> None:
        self._slot = _EMPTY
        self._state.bump()

    def leaf(self) -> bool:
        return True

    def empty(self) -> bool:
        return self._slot is _EMPTY

    def size(self) -> int:
        return 0 if self._slot is _EMPTY else 1

    def count(self) -> int:
        return 1

    def height(self) -> int:
        return 0

    def _find(self, path: Path) -> Optional[Lease[D]]:
        return self._lease()

    def _match(self, path: Path) -> Optional[Lease[D]]:
        return self._lease()

    def _jump(self, visitor: NodeVisitor, path: Path) -> None:
        visitor(self)

    def _climb(self, pre: NodeVisitor, post: NodeVisitor, path: Path) -> None:
        Visit.of(pre(self))
        post(self)

    def traverse_level(self, visitor: LevelVisitor) -> None:
        return None

    def _traverse_dfs(self, pre: PreVisitor, post: PostVisitor, edge: Path) -> None:
        pre(self, *edge)
        post(self, *edge)

    def _subtree_equal(self, other: TrieNode[Any]) -> bool:
        return True

    def _subtree_less(self, other: TrieNode[Any]) -> bool:
        return False

# -----------------------------------------------------------------------------
# GENERAL CASE
# -----------------------------------------------------------------------------

class TrieBranch(TrieNode[D]):
    """Node above the deepest level: a data slot plus a key mapping to children."""

    __slots__ = ("_children",)

    def __init__(self, schema: TrieSchema, level: int, state: TreeState) -> None:
        super().__init__(schema, level, state)
        self._children: KeyMapping = schema.backend.new_mapping()

    def _spawn(self) -> TrieNode[D]:
        self._state.bump()
        return _new_node(self._schema, self._level + 1, self._state)

    # --- Mutation ---

    def _insert(self, data: D, path: Path) -> Tuple[Lease[D], bool]:
        if not path:
            return self._store(data)
        child, _ = self._children.get_or_create(path[0], self._spawn)
        return child._insert(data, path[1:])

    def _erase(self, path: Path) -> int:
        if not path:
            return self._discard()
        key = path[0]
        child = self._children.get(key)
        if child is None:
            return 0
        removed = child._erase(path[1:])
        if child.empty():
            del self._children[key]
            self._state.bump()
        return removed

    def clear(self) -> None:
        self._slot = _EMPTY
        self._children.clear()
        self._state.bump()

    # --- Structure ---

    def leaf(self) -> bool:
        return not self._children

    def empty(self) -> bool:
        if self._slot is not _EMPTY:
            return False
        return all(child.empty() for child in self._children.values())

    def size(self) -> int:
        own = 0 if self._slot is _EMPTY else 1
        return own + sum(child.size() for child in self._children.values())

    def count(self) -> int:
        return 1 + sum(child.count() for child in self._children.values())

    def height(self) -> int:
        if not self._children:
            return 0
        return 1 + max(child.height() for child in self._children.values())

    # --- Lookup ---

    def _find(self, path: Path) -> Optional[Lease[D]]:
        if not path:
            return self._lease()
        child = self._children.get(path[0])
        return child._find(path[1:]) if child is not None else None

    def _match(self, path: Path) -> Optional[Lease[D]]:
        if not path:
            return self._lease()
        child = self._children.get(path[0])
        found = child._match(path[1:]) if child is not None else None
        return found if found is not None else self._lease()

    # --- Visitation ---

    def _jump(self, visitor: NodeVisitor, path: Path) -> None:
        if not path:
            visitor(self)
            return
        child = self._children.get(path[0])
        if child is not None:
            child._jump(visitor, path[1:])

    def _climb(self, pre: NodeVisitor, post: NodeVisitor, path: Path) -> None:
        if not path:
            Visit.of(pre(self))
            post(self)
            return
        if proceed(pre(self)):
            child = self._children.get(path[0])
            if child is not None:
                child._climb(pre, post, path[1:])
        post(self)

    def traverse_level(self, visitor: LevelVisitor) -> None:
        """
        Visit immediate children in backend order as visitor(child, key).

        Stops as soon as visitor answers STOP. The visitor may erase the
        child it is visiting.
        """
        for key, child in self._children.snapshot():
            if not proceed(visitor(child, key)):
                break

    def _traverse_dfs(self, pre: PreVisitor, post: PostVisitor, edge: Path) -> None:
        if proceed(pre(self, *edge)):
            for key, child in self._children.snapshot():
                child._traverse_dfs(pre, post, (key,))
        post(self, *edge)

    # --- Comparison ---

    def _subtree_equal(self, other: TrieNode[Any]) -> bool:
        assert isinstance(other, TrieBranch)
        return self._children == other._children

    def _subtree_less(self, other: TrieNode[Any]) -> bool:
        assert isinstance(other, TrieBranch)
        if len(self._children) != len(other._children):
            return len(self._children) < len(other._children)
        for (lkey, lchild), (rkey, rchild) in zip(self._children.items(), other._children.items()):
            if lkey != rkey:
                return bool(lkey < rkey)
            if lchild != rchild:
                return lchild < rchild
        return False

# -----------------------------------------------------------------------------
# CONSTRUCTION
# -----------------------------------------------------------------------------

def _new_node(schema: TrieSchema, level: int, state: TreeState) -> TrieNode[Any]:
    if schema.remaining(level) == 0:
        return TrieLeaf(schema, level, state)
    return TrieBranch(schema, level, state)


def build_triemap(*key_types: Any, backend: Any = Backend.ORDERED) -> TrieNode[Any]:
    """
    Create the root of an empty trie-map.

    Args:
        *key_types: Key type per level, outermost first. Pass None (or
            object) to accept any key at a level. No key types gives a
            depth-zero trie-map holding a single slot.
        backend: Backend member or its name ("ordered" / "hashed").

    Returns:
        TrieNode: The root node.
    """
    schema = TrieSchema(key_types=tuple(key_types), backend=Backend.parse(backend))
    return _new_node(schema, 0, TreeState())


def otriemap(*key_types: Any) -> TrieNode[Any]:
    """Ordered trie-map: children iterate in key order."""
    return build_triemap(*key_types, backend=Backend.ORDERED)


def utriemap(*key_types: Any) -> TrieNode[Any]:
    """Unordered trie-map: hashed children, unspecified iteration order."""
    return build_triemap(*key_types, backend=Backend.HASHED)
