from __future__ import annotations

"""
Feature Flags Demo.

Boolean flags stored under <Feature, Division, Department, Id>. A flag set at
a coarse level applies to everyone below it until a finer level overrides it;
match() resolves the effective flag for a person.
"""

import logging
from typing import Any, Dict, List, Tuple

from triemap.core.node import TrieNode, build_triemap
from triemap.demos.common import PEOPLE, Person, render_for, titled
from triemap.domain.demo_models import DemoResult, create_error_result, create_success_result

logger = logging.getLogger(__name__)

DEMO_NAME = "feature-flags"
FEATURE = "Text-Notification"

# (description, path below the feature, flag, ids expected to have the feature afterwards)
STEPS: List[Tuple[str, Tuple[str, ...], bool, List[str]]] = [
    ("Enable for one member of Support", ("Services", "Support", "003"), True, ["003"]),
    ("Enable for the Services division", ("Services",), True, ["002", "003", "004"]),
    ("Enable for everyone", (), True, ["001", "002", "003", "004"]),
    ("Disable for Consulting", ("Services", "Consulting"), False, ["001", "002", "003"]),
]


def new_flags(backend: Any = "hashed") -> TrieNode[bool]:
    return build_triemap(str, str, str, str, backend=backend)


def enabled(flags: TrieNode[bool], feature: str, person: Person) -> bool:
    """Effective flag of a feature for a person; unset means disabled."""
    lease = flags.match(feature, *person.path)
    return lease is not None and lease.value


def run(cfg: Dict[str, Any]) -> DemoResult:
    flags = new_flags(cfg["backend"])
    lines: List[str] = []
    error = ""

    for description, path, flag, expected in STEPS:
        flags.insert(flag, FEATURE, *path)
        lines.append(f"{description}:")

        allowed = []
        for person in PEOPLE:
            can = enabled(flags, FEATURE, person)
            if can:
                allowed.append(person.id)
            verb = "can" if can else "can't"
            lines.append(f"  {person} {verb} use {FEATURE}")

        if allowed != expected and not error:
            error = f"{description}: enabled for {allowed}, expected {expected}"
            logger.error(error)

    rendering = titled("Feature flags:", render_for(flags, cfg)) if cfg["verbose"] else ""
    summary = {"feature": FEATURE, "flags": flags.size()}

    if error:
        return create_error_result(DEMO_NAME, error, cfg, lines, rendering, summary)
    return create_success_result(DEMO_NAME, cfg, lines, rendering, summary)
