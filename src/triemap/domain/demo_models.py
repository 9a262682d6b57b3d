from __future__ import annotations

"""
Demo Result Models.

Result object and factories used to hand demo outcomes from the demo
modules to the command-line interface.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DemoResult:
    """
    Outcome of one demo run.

    Attributes:
        ok: Whether every check performed by the demo passed.
        demo: Name of the demo.
        error: Description of the first failed check, if any.
        backend: Backend of the trees the demo built.
        lines: Human readable report.
        rendering: Rendered tree(s), when verbose output was requested.
        summary: Machine readable metrics.
    """
    ok: bool
    demo: str
    error: str = ""
    backend: str = "ordered"
    lines: List[str] = field(default_factory=list)
    rendering: str = ""
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        demo: str,
        cfg: Dict[str, Any],
        lines: Optional[List[str]] = None,
        rendering: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> DemoResult:
    """Create a successful demo result."""
    return DemoResult(
        ok=True,
        demo=demo,
        backend=cfg.get("backend", "ordered"),
        lines=lines or [],
        rendering=rendering,
        summary=summary_extra or {},
    )


def create_error_result(
        demo: str,
        error: str,
        cfg: Dict[str, Any],
        lines: Optional[List[str]] = None,
        rendering: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> DemoResult:
    """Create a failed demo result carrying the first failed check."""
    return DemoResult(
        ok=False,
        demo=demo,
        error=error,
        backend=cfg.get("backend", "ordered"),
        lines=lines or [],
        rendering=rendering,
        summary=summary_extra or {},
    )
