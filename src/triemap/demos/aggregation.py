from __future__ import annotations

"""
Limit Aggregation Demo.

Limits are kept globally and per division, department and person. When a
person acquires or releases a resource, climb_pre() walks from the root down
to the person and adjusts the utilization of every limit on the way, so each
level always reports the total of everything beneath it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from triemap.core.node import TrieNode, build_triemap
from triemap.core.visitors import Visit
from triemap.demos.common import PEOPLE, Person, render_for, titled
from triemap.domain.demo_models import DemoResult, create_error_result, create_success_result
from triemap.io.writer import JsonWriter

logger = logging.getLogger(__name__)

DEMO_NAME = "aggregation"

PERSON_LIMIT = 1000
DEPARTMENT_LIMIT = 100 * 1000
DIVISION_LIMIT = 100 * 100 * 1000
GLOBAL_LIMIT = 10 * 100 * 100 * 1000

# -----------------------------------------------------------------------------
# DOMAIN MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Resource:
    value: int


@dataclass
class Limit:
    """Threshold and current utilization at one level of the organization."""
    threshold: int = 0
    utilization: int = 0

    def __iadd__(self, delta: Resource) -> "Limit":
        self.utilization += delta.value
        return self

    def __isub__(self, delta: Resource) -> "Limit":
        self.utilization -= delta.value
        return self

    def __str__(self) -> str:
        return f"threshold={self.threshold} utilization={self.utilization}"


def print_limit(writer: JsonWriter, limit: Limit) -> None:
    writer.write(writer.quoted(limit))

# -----------------------------------------------------------------------------
# OPERATIONS
# -----------------------------------------------------------------------------

def build_limits(backend: Any = "hashed", people: Optional[List[Person]] = None) -> TrieNode[Limit]:
    """Limits for every person, department and division plus a global one."""
    limits = build_triemap(str, str, str, backend=backend)
    for person in people if people is not None else PEOPLE:
        limits.insert(Limit(PERSON_LIMIT), person.division, person.department, person.id)
        limits.insert(Limit(DEPARTMENT_LIMIT), person.division, person.department)
        limits.insert(Limit(DIVISION_LIMIT), person.division)
    limits.insert(Limit(GLOBAL_LIMIT))
    return limits


def acquire(limits: TrieNode[Limit], person: Person, resource: Resource) -> None:
    def charge(node: TrieNode[Limit]) -> Visit:
        if node.has_value:
            node.value += resource
        return Visit.CONTINUE

    limits.climb_pre(charge, *person.path)


def release(limits: TrieNode[Limit], person: Person, resource: Resource) -> None:
    def refund(node: TrieNode[Limit]) -> Visit:
        if node.has_value:
            node.value -= resource
        return Visit.CONTINUE

    limits.climb_pre(refund, *person.path)


def expected_utilization(per_person: int) -> List[Tuple[Tuple[str, ...], int]]:
    """Utilization every level should report when each person holds per_person."""
    expected: Dict[Tuple[str, ...], int] = {(): 0}
    for person in PEOPLE:
        path = person.path
        for depth in range(len(path) + 1):
            expected[path[:depth]] = expected.get(path[:depth], 0) + per_person
    return sorted(expected.items())


def check_utilization(limits: TrieNode[Limit], per_person: int) -> Optional[str]:
    """Return a description of the first mismatch, or None."""
    for path, want in expected_utilization(per_person):
        lease = limits.find(*path)
        got = lease.value.utilization if lease is not None else None
        if got != want:
            return f"utilization at {'/'.join(path) or '<root>'} is {got}, expected {want}"
    return None

# -----------------------------------------------------------------------------
# DEMO ENTRY
# -----------------------------------------------------------------------------

def run(cfg: Dict[str, Any]) -> DemoResult:
    limits = build_limits(cfg["backend"])
    printers = {Limit: print_limit}
    verbose = cfg["verbose"]

    lines: List[str] = []
    renderings: List[str] = []
    if verbose:
        renderings.append(titled("Initial:", render_for(limits, cfg, printers)))

    expected_size = len(PEOPLE) + 3 + 2 + 1
    error = None
    if limits.size() != expected_size:
        error = f"limit count is {limits.size()}, expected {expected_size}"
    lines.append(f"Limits stored: {limits.size()}")

    # (label, action, amount, utilization per person afterwards)
    phases = [
        ("After acquire", acquire, 100, 100),
        ("After first release", release, 50, 50),
        ("After second release", release, 50, 0),
    ]

    for label, action, amount, per_person in phases:
        if error:
            break
        for person in PEOPLE:
            action(limits, person, Resource(amount))
        error = check_utilization(limits, per_person)
        root = limits.find()
        lines.append(f"{label}: global utilization={root.value.utilization if root else None}")
        if verbose:
            renderings.append(titled(f"{label}:", render_for(limits, cfg, printers)))

    rendering = "\n".join(renderings)
    summary = {"limits": limits.size(), "people": len(PEOPLE)}

    if error:
        logger.error(f"Aggregation check failed: {error}")
        return create_error_result(DEMO_NAME, error, cfg, lines, rendering, summary)

    lines.append("All good.")
    return create_success_result(DEMO_NAME, cfg, lines, rendering, summary)
