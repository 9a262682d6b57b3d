from __future__ import annotations

"""
Unit tests for value leases and the empty-slot contract.
"""

import pytest

from conftest import make_reference_tree
from triemap.core.errors import EmptySlotError, StaleLeaseError
from triemap.core.node import otriemap


def test_lease_reads_and_writes_in_place() -> None:
    tree = make_reference_tree()
    lease = tree.find("a", "c")

    assert lease.valid
    lease.value = "c2"
    assert tree.get("a", "c") == "c2"
    assert repr(lease) == "Lease('c2')"


def test_lease_survives_non_structural_operations() -> None:
    tree = make_reference_tree()
    lease = tree.find("a")

    tree.insert("ignored", "a")
    tree.find("b")
    tree.match("b", "x")
    tree.erase("zz")
    tree.traverse_pre(lambda node, *edge: None)

    assert lease.valid
    assert lease.value == "A"


@pytest.mark.parametrize(
    "mutate",
    [
        lambda tree: tree.insert("G", "b", "g"),
        lambda tree: tree.erase("a", "c"),
        lambda tree: tree.erase(),
        lambda tree: tree.clear(),
    ],
    ids=["insert-new-node", "erase-leaf", "erase-root", "clear"],
)
def test_structural_mutation_invalidates_leases(mutate) -> None:
    tree = make_reference_tree()
    lease = tree.find("b")

    mutate(tree)

    assert not lease.valid
    assert repr(lease) == "Lease(<stale>)"
    with pytest.raises(StaleLeaseError):
        _ = lease.value
    with pytest.raises(StaleLeaseError):
        lease.value = "Z"


def test_insert_lease_is_valid_after_creation() -> None:
    tree = otriemap(str, str)
    lease, created = tree.insert("deep", "x", "y")

    assert created
    assert lease.valid
    assert lease.value == "deep"


def test_empty_slot_access_raises() -> None:
    tree = otriemap(str)

    assert not tree.has_value
    with pytest.raises(EmptySlotError):
        _ = tree.value
    with pytest.raises(EmptySlotError):
        tree.value = "x"
    with pytest.raises(LookupError):
        _ = tree.value
