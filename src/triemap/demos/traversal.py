from __future__ import annotations

"""
Traversal Demo.

Builds the reference tree

            0
          a/ \\b
          A   B
        c/ \\d e/ \\f
        C  D E   F

and records the order in which each visiting algorithm reaches its values.
On the ordered backend the orders are exact; on the hashed backend only the
visited values are compared.
"""

import logging
from typing import Any, Callable, Dict, List, Tuple

from triemap.core.node import TrieNode, build_triemap
from triemap.core.visitors import Visit
from triemap.demos.common import render_for, titled
from triemap.domain.demo_models import DemoResult, create_error_result, create_success_result

logger = logging.getLogger(__name__)

DEMO_NAME = "traversal"

# (label, expected visiting order on the ordered backend)
EXPECTED: List[Tuple[str, str]] = [
    ("pre-order", "0ACDBEF"),
    ("post-order", "CDAEFB0"),
    ("climb_pre a", "0A"),
    ("climb_post a", "A0"),
    ("climb_pre a/d", "0AD"),
    ("climb_post a/d", "DA0"),
    ("climb_pre b/x", "0B"),
    ("level (root)", "AB"),
]


def build_reference_tree(backend: Any = "ordered") -> TrieNode[str]:
    """Two-level tree of single-letter values keyed by single-letter strings."""
    tree = build_triemap(str, str, backend=backend)
    tree.insert("0")
    tree.insert("A", "a")
    tree.insert("B", "b")
    tree.insert("C", "a", "c")
    tree.insert("D", "a", "d")
    tree.insert("E", "b", "e")
    tree.insert("F", "b", "f")
    return tree


def visiting_orders(tree: TrieNode[str]) -> Dict[str, str]:
    """Run every visiting algorithm and collect the values in visiting order."""
    orders: Dict[str, str] = {}

    def collector() -> Tuple[List[str], Callable[..., Visit]]:
        seen: List[str] = []

        def visit(node: TrieNode[str], *_: Any) -> Visit:
            if node.has_value:
                seen.append(node.value)
            return Visit.CONTINUE

        return seen, visit

    seen, visit = collector()
    tree.traverse_pre(visit)
    orders["pre-order"] = "".join(seen)

    seen, visit = collector()
    tree.traverse_post(visit)
    orders["post-order"] = "".join(seen)

    for label, path in (("a", ("a",)), ("a/d", ("a", "d")), ("b/x", ("b", "x"))):
        seen, visit = collector()
        tree.climb_pre(visit, *path)
        orders[f"climb_pre {label}"] = "".join(seen)

        seen, visit = collector()
        tree.climb_post(visit, *path)
        orders[f"climb_post {label}"] = "".join(seen)

    seen, visit = collector()
    tree.traverse_level(visit)
    orders["level (root)"] = "".join(seen)

    return orders


def run(cfg: Dict[str, Any]) -> DemoResult:
    tree = build_reference_tree(cfg["backend"])
    orders = visiting_orders(tree)
    exact = cfg["backend"] == "ordered"

    lines: List[str] = []
    failures: List[str] = []
    for label, expected in EXPECTED:
        got = orders[label]
        ok = got == expected if exact else sorted(got) == sorted(expected)
        lines.append(f"{label:<16} {got}{'' if ok else f'  (expected {expected})'}")
        if not ok:
            failures.append(f"{label}: got {got!r}, expected {expected!r}")

    rendering = titled("Reference tree:", render_for(tree, cfg)) if cfg["verbose"] else ""
    summary = {"size": tree.size(), "count": tree.count(), "height": tree.height(), "orders": orders}

    if failures:
        logger.error(f"Traversal order mismatch: {failures[0]}")
        return create_error_result(DEMO_NAME, failures[0], cfg, lines, rendering, summary)
    return create_success_result(DEMO_NAME, cfg, lines, rendering, summary)
