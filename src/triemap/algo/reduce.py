from __future__ import annotations

"""
Trie-Map Reduction.

Collapses redundant values bottom-up: wherever a node holds no value, the
value shared by most of its immediate children is hoisted into the node and
the children holding that same value are erased. Because match() falls back
to the nearest ancestor, every path that existed before the reduction still
matches the same value afterwards.
"""

import logging
from collections import Counter
from typing import Any

from triemap.core.node import TrieNode
from triemap.core.visitors import Visit

logger = logging.getLogger(__name__)


def reduce_tree(tree: TrieNode[Any]) -> int:
    """
    Hoist the most common child value into every value-less node.

    Ties between equally common values go to the smallest one. Stored values
    must be hashable and mutually orderable.

    Args:
        tree: Trie-map (or subtree) to reduce in place.

    Returns:
        int: Net number of values removed from the tree.
    """
    before = tree.size()

    def collapse(node: TrieNode[Any], *edge: Any) -> None:
        if node.has_value:
            return

        # 1. Tally the values held by the immediate children
        counts: Counter = Counter()

        def tally(child: TrieNode[Any], key: Any) -> Visit:
            if child.has_value:
                counts[child.value] += 1
            return Visit.CONTINUE

        node.traverse_level(tally)
        if not counts:
            return

        # 2. Hoist the most common value into the node
        top_count = max(counts.values())
        top = min(value for value, seen in counts.items() if seen == top_count)
        node.insert(top)

        # 3. Erase the children that now inherit it
        def prune(child: TrieNode[Any], key: Any) -> Visit:
            if child.has_value and child.value == top:
                node.erase(key)
            return Visit.CONTINUE

        node.traverse_level(prune)

    tree.traverse_post(collapse)

    removed = before - tree.size()
    logger.debug(f"Reduced trie-map from {before} to {before - removed} values")
    return removed
