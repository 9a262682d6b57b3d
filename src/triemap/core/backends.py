from __future__ import annotations

"""
Key Mapping Backends.

Each branch node owns one key mapping from the key of its level to the child
node one level down. Two interchangeable implementations are provided:

* OrderedKeyMapping keeps keys sorted (parallel key/value lists maintained
  with bisect) so iteration is deterministic and follows key order.
* HashedKeyMapping sits on a dict; lookups are O(1) on average and the
  iteration order is unspecified.
"""

from abc import abstractmethod
from bisect import bisect_left
from collections.abc import MutableMapping
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Tuple


# -----------------------------------------------------------------------------
# ABSTRACT CONTRACT
# -----------------------------------------------------------------------------

class KeyMapping(MutableMapping):
    """
    Associative container from one key value to one child node.

    Adds find-or-create and snapshot iteration to the MutableMapping
    protocol. Equality is entrywise (same key set, equal value per key),
    never positional, so an ordered and a hashed mapping holding the same
    entries compare equal.
    """

    ordered: bool = False

    @abstractmethod
    def get_or_create(self, key: Any, factory: Callable[[], Any]) -> Tuple[Any, bool]:
        """
        Return the value under key, creating it with factory if missing.

        Returns:
            Tuple[Any, bool]: The value and True if it was just created.
        """

    def snapshot(self) -> List[Tuple[Any, Any]]:
        """Materialize the entries in iteration order so callers may mutate."""
        return list(self.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyMapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, value in self.items():
            if key not in other or other[key] != value:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.snapshot()!r})"

# -----------------------------------------------------------------------------
# ORDERED BACKEND
# -----------------------------------------------------------------------------

class OrderedKeyMapping(KeyMapping):
    """Sorted key mapping. Keys must be mutually orderable."""

    __slots__ = ("_keys", "_values")
    ordered = True

    def __init__(self) -> None:
        self._keys: List[Any] = []
        self._values: List[Any] = []

    def _locate(self, key: Any) -> Tuple[int, bool]:
        i = bisect_left(self._keys, key)
        return i, i < len(self._keys) and self._keys[i] == key

    def get_or_create(self, key: Any, factory: Callable[[], Any]) -> Tuple[Any, bool]:
        i, found = self._locate(key)
        if found:
            return self._values[i], False
        value = factory()
        self._keys.insert(i, key)
        self._values.insert(i, value)
        return value, True

    def __getitem__(self, key: Any) -> Any:
        i, found = self._locate(key)
        if not found:
            raise KeyError(key)
        return self._values[i]

    def __setitem__(self, key: Any, value: Any) -> None:
        i, found = self._locate(key)
        if found:
            self._values[i] = value
            return
        self._keys.insert(i, key)
        self._values.insert(i, value)

    def __delitem__(self, key: Any) -> None:
        i, found = self._locate(key)
        if not found:
            raise KeyError(key)
        del self._keys[i]
        del self._values[i]

    def __contains__(self, key: object) -> bool:
        return self._locate(key)[1]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def snapshot(self) -> List[Tuple[Any, Any]]:
        return list(zip(self._keys, self._values))

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()

# -----------------------------------------------------------------------------
# HASHED BACKEND
# -----------------------------------------------------------------------------

class HashedKeyMapping(KeyMapping):
    """Hash-based key mapping. Keys must be hashable."""

    __slots__ = ("_entries",)
    ordered = False

    def __init__(self) -> None:
        self._entries: Dict[Any, Any] = {}

    def get_or_create(self, key: Any, factory: Callable[[], Any]) -> Tuple[Any, bool]:
        value = self._entries.get(key, _MISSING)
        if value is not _MISSING:
            return value, False
        value = self._entries[key] = factory()
        return value, True

    def __getitem__(self, key: Any) -> Any:
        return self._entries[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._entries[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


_MISSING = object()

# -----------------------------------------------------------------------------
# BACKEND SELECTION
# -----------------------------------------------------------------------------

class Backend(str, Enum):
    """Child key mapping strategy chosen when a tree is built."""
    ORDERED = "ordered"
    HASHED = "hashed"

    def new_mapping(self) -> KeyMapping:
        """Instantiate an empty key mapping of this kind."""
        return _MAPPING_TYPES[self]()

    @classmethod
    def parse(cls, value: Any) -> "Backend":
        """
        Resolve a backend from an enum member or its name.

        Raises:
            ValueError: If the name is unknown.
        """
        if isinstance(value, Backend):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(b.value for b in cls)
            raise ValueError(f"Unknown backend '{value}'. Expected one of: {choices}.") from None


_MAPPING_TYPES: Dict[Backend, Callable[[], KeyMapping]] = {
    Backend.ORDERED: OrderedKeyMapping,
    Backend.HASHED: HashedKeyMapping,
}
