from __future__ import annotations

"""
Shared Demo Fixtures.

The small organization used by several demos and the helper that renders a
trie-map according to the demo configuration.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from triemap.core.node import TrieNode
from triemap.io.printers import Printer
from triemap.io.renderer import render


@dataclass(frozen=True)
class Person:
    """Member of the sample organization, addressed by division, department and id."""
    id: str
    first: str
    last: str
    division: str
    department: str

    @property
    def path(self) -> tuple:
        return (self.division, self.department, self.id)

    def __str__(self) -> str:
        return f"{self.first} {self.last} ({self.id})"


PEOPLE: List[Person] = [
    Person("001", "Mary", "Moe", "Sales", "Retail"),
    Person("002", "John", "Doe", "Services", "Support"),
    Person("003", "Jill", "Noe", "Services", "Support"),
    Person("004", "Jane", "Poe", "Services", "Consulting"),
]


def render_for(
        tree: TrieNode[Any],
        cfg: Dict[str, Any],
        printers: Optional[Mapping[type, Printer]] = None,
) -> str:
    """Render a tree with the format and data tag selected in the config."""
    return render(tree, cfg["render_format"], data_tag=cfg["data_tag"], printers=printers)


def titled(title: str, text: str) -> str:
    return f"{title}\n{text}\n"
