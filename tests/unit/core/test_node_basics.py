from __future__ import annotations

"""
Unit tests for the basic trie-map operations.

Verifies insertion (no overwrite), removal with pruning, exact and inherited
lookups and the structural metrics on both backends.
"""

import pytest

from triemap.core.node import TrieBranch, TrieLeaf, build_triemap, otriemap, utriemap


def shape(tree):
    return tree.empty(), tree.size(), tree.count(), tree.height()


# -----------------------------------------------------------------------------
# 1. Insertion
# -----------------------------------------------------------------------------

def test_fresh_tree_has_only_root(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    assert shape(tree) == (True, 0, 1, 0)
    assert tree.leaf()
    assert len(tree) == 0


def test_insert_never_overwrites(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)

    lease, created = tree.insert("0")
    assert created is True
    assert lease.value == "0"
    assert shape(tree) == (False, 1, 1, 0)

    lease, created = tree.insert("X")
    assert created is False
    assert lease.value == "0"
    assert tree.find().value == "0"

    _, created = tree.insert("A", "a")
    assert created is True
    assert shape(tree) == (False, 2, 2, 1)

    _, created = tree.insert("B", "b")
    assert created is True
    assert shape(tree) == (False, 3, 3, 1)

    _, created = tree.insert("X", "b")
    assert created is False
    assert tree.get("b") == "B"
    assert shape(tree) == (False, 3, 3, 1)


def test_insert_deep_creates_intermediate_nodes(backend: str) -> None:
    tree = build_triemap(str, str, str, backend=backend)
    tree.insert(1, "x", "y", "z")

    assert shape(tree) == (False, 1, 4, 3)
    assert tree.find("x") is None
    assert tree.find("x", "y") is None
    assert tree.get("x", "y", "z") == 1


def test_none_is_a_storable_value(backend: str) -> None:
    tree = build_triemap(str, backend=backend)
    _, created = tree.insert(None, "k")

    assert created is True
    assert tree.contains("k")
    assert tree.find("k").value is None
    assert tree.get("k", default="missing") is None

# -----------------------------------------------------------------------------
# 2. Removal
# -----------------------------------------------------------------------------

def test_erase_and_prune(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    assert tree.erase() == 0

    tree.insert("0")
    assert tree.erase() == 1
    assert shape(tree) == (True, 0, 1, 0)

    tree.insert("A", "a")
    assert shape(tree) == (False, 1, 2, 1)

    assert tree.erase("x") == 0
    assert shape(tree) == (False, 1, 2, 1)

    assert tree.erase("a") == 1
    assert shape(tree) == (True, 0, 1, 0)

    tree.insert("B", "b")
    assert tree.erase("b") == 1
    assert tree.erase("b") == 0
    assert shape(tree) == (True, 0, 1, 0)


def test_erase_deep_restores_count(backend: str) -> None:
    tree = build_triemap(str, str, str, backend=backend)
    tree.insert("root")
    before = tree.count()

    tree.insert("deep", "a", "b", "c")
    assert tree.count() == before + 3

    assert tree.erase("a", "b", "c") == 1
    assert tree.count() == before


def test_erase_keeps_ancestors_holding_data(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    tree.insert("A", "a")
    tree.insert("C", "a", "c")

    assert tree.erase("a", "c") == 1
    assert tree.get("a") == "A"
    assert shape(tree) == (False, 1, 2, 1)


def test_erase_inner_value_keeps_descendants(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    tree.insert("A", "a")
    tree.insert("C", "a", "c")

    assert tree.erase("a") == 1
    assert tree.find("a") is None
    assert tree.get("a", "c") == "C"
    assert tree.count() == 3


def test_erase_prunes_child_emptied_by_visitor(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    tree.insert("B", "a", "b")
    tree.jump(lambda node: node.erase("b"), "a")
    assert tree.empty()
    assert tree.count() == 2

    assert tree.erase("a") == 0
    assert shape(tree) == (True, 0, 1, 0)


def test_erase_prunes_child_cleared_during_level_walk(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    tree.insert("A", "a")
    tree.insert("B", "b")
    tree.traverse_level(lambda child, key: child.clear())
    assert tree.count() == 3

    assert tree.erase("a") == 0
    assert tree.erase("b") == 0
    assert shape(tree) == (True, 0, 1, 0)


def test_erase_miss_keeps_lease_valid(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    lease = tree.insert("A", "a")[0]

    assert tree.erase("x") == 0
    assert lease.value == "A"


def test_clear(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    tree.insert("0")
    tree.insert("A", "a")
    tree.insert("B", "b")
    assert shape(tree) == (False, 3, 3, 1)

    tree.clear()
    assert shape(tree) == (True, 0, 1, 0)

# -----------------------------------------------------------------------------
# 3. Lookup
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "path, found, matched",
    [
        ((), "0", "0"),
        (("a",), "A", "A"),
        (("b",), "B", "B"),
        (("a", "c"), "C", "C"),
        (("a", "d"), "D", "D"),
        (("b", "e"), "E", "E"),
        (("b", "f"), "F", "F"),
        (("x",), None, "0"),
        (("a", "x"), None, "A"),
        (("b", "x"), None, "B"),
        (("x", "c"), None, "0"),
    ],
)
def test_find_and_match(backend: str, path, found, matched) -> None:
    from conftest import make_reference_tree

    tree = make_reference_tree(backend)
    assert shape(tree) == (False, 7, 7, 2)

    assert tree.get(*path) == found
    assert tree.contains(*path) is (found is not None)
    assert tree.match(*path).value == matched


def test_match_is_absent_without_any_value(backend: str) -> None:
    tree = build_triemap(str, str, backend=backend)
    tree.insert("C", "a", "c")

    assert tree.match("a", "d") is None
    assert tree.match("b") is None
    assert tree.match("a", "c").value == "C"


def test_match_skips_valueless_intermediate_nodes(backend: str) -> None:
    tree = build_triemap(str, str, str, backend=backend)
    tree.insert("top")
    tree.insert("leaf", "a", "b", "c")

    assert tree.match("a", "b", "x").value == "top"
    assert tree.match("a", "b", "c").value == "leaf"


def test_jump_visits_only_existing_nodes() -> None:
    from conftest import make_reference_tree

    tree = make_reference_tree()
    seen = []

    tree.jump(lambda node: seen.append(node.value), "a", "d")
    tree.jump(lambda node: seen.append(node.value), "a", "x")
    tree.jump(lambda node: seen.append(node.value))

    assert seen == ["D", "0"]

# -----------------------------------------------------------------------------
# 4. Construction
# -----------------------------------------------------------------------------

def test_depth_zero_tree_is_a_single_slot() -> None:
    tree = build_triemap()

    assert isinstance(tree, TrieLeaf)
    assert tree.depth == 0
    assert tree.leaf()
    assert tree.find() is None

    _, created = tree.insert(42)
    assert created is True
    assert tree.match().value == 42
    assert shape(tree) == (False, 1, 1, 0)

    assert tree.erase() == 1
    assert tree.empty()


def test_levels_and_depth() -> None:
    tree = otriemap(str, int)
    tree.insert("v", "k", 1)

    assert isinstance(tree, TrieBranch)
    assert tree.level == 0 and tree.depth == 2

    levels = []
    tree.traverse_pre(lambda node, *edge: levels.append((node.level, node.depth)))
    assert levels == [(0, 2), (1, 1), (2, 0)]


def test_shorthand_constructors_select_backend() -> None:
    assert otriemap(str).backend.value == "ordered"
    assert utriemap(str).backend.value == "hashed"
    assert build_triemap(str, backend="HASHED").backend.value == "hashed"

    with pytest.raises(ValueError):
        build_triemap(str, backend="sorted")


def test_repr_and_str() -> None:
    tree = otriemap(str)
    tree.insert("A", "a")

    assert repr(tree) == "TrieBranch(backend=ordered, depth=1, size=1, count=2)"
    assert str(tree) == '{\n  a:{\n    data:"A"\n  }\n}'
