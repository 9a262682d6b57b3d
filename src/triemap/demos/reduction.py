from __future__ import annotations

"""
Reduction Demo.

Users carry a numbered configuration; many users share the same one. The
configurations are stored twice: in a flat dict keyed by (division,
department, user) and in a trie-map. After reduce_tree() hoists the most
common values upward, match() on the trie-map must still agree with the flat
dict for every user while storing fewer values.
"""

import logging
import random
import string
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from triemap.algo.reduce import reduce_tree
from triemap.core.node import TrieNode, build_triemap
from triemap.demos.common import render_for, titled
from triemap.domain.demo_models import DemoResult, create_error_result, create_success_result
from triemap.io.writer import JsonWriter

logger = logging.getLogger(__name__)

DEMO_NAME = "reduction"

Key = Tuple[str, str, str]
FlatMap = Dict[Key, "Configuration"]

# scale -> (divisions, departments, users, number of distinct configurations)
SCALES: Dict[str, Tuple[str, str, str, int]] = {
    "small": ("AB", "AB", "abcde", 2),
    "large": (string.ascii_uppercase, string.ascii_uppercase, string.ascii_lowercase, 4),
}


@dataclass(frozen=True, order=True)
class Configuration:
    config: int

    def __str__(self) -> str:
        return f"config={self.config}"


def print_configuration(writer: JsonWriter, value: Configuration) -> None:
    writer.write(str(value.config))


def fill(scale: str, seed: int, backend: Any = "ordered") -> Tuple[FlatMap, TrieNode[Configuration]]:
    """Assign a random configuration to every user, in both collections."""
    divisions, departments, users, limit = SCALES[scale]
    rng = random.Random(seed)

    flat: FlatMap = {}
    tree = build_triemap(str, str, str, backend=backend)
    for div in divisions:
        for dep in departments:
            for usr in users:
                config = Configuration(rng.randint(1, limit))
                flat[(div, dep, usr)] = config
                tree.insert(config, div, dep, usr)
    return flat, tree


def verify(flat: FlatMap, tree: TrieNode[Configuration]) -> Optional[str]:
    """Return a description of the first user whose match disagrees, or None."""
    for key, config in flat.items():
        lease = tree.match(*key)
        got = lease.value if lease is not None else None
        if got != config:
            return f"match{key} is {got}, expected {config}"
    return None


def run(cfg: Dict[str, Any]) -> DemoResult:
    flat, tree = fill(cfg["scale"], cfg["seed"], cfg["backend"])
    printers = {Configuration: print_configuration}
    verbose = cfg["verbose"]

    lines = [f"Flat map size={len(flat)} Trie map size={tree.size()}"]
    renderings: List[str] = []
    if verbose:
        renderings.append(titled("Before reduction:", render_for(tree, cfg, printers)))

    error = verify(flat, tree)
    before = tree.size()
    removed = 0
    if not error:
        removed = reduce_tree(tree)
        lines.append(f"Reduced trie map size={tree.size()}")
        if verbose:
            renderings.append(titled("After reduction:", render_for(tree, cfg, printers)))
        error = verify(flat, tree)

    summary = {
        "seed": cfg["seed"],
        "scale": cfg["scale"],
        "flat_size": len(flat),
        "size_before": before,
        "size_after": tree.size(),
        "removed": removed,
    }
    rendering = "\n".join(renderings)

    if error:
        logger.error(f"Reduction check failed: {error}")
        return create_error_result(DEMO_NAME, error, cfg, lines, rendering, summary)

    lines.append("All good.")
    return create_success_result(DEMO_NAME, cfg, lines, rendering, summary)
