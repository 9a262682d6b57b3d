from __future__ import annotations

"""
Geo-Org Demo.

A two-dimensional trie-map: the outer map is addressed by geography
(continent, country) and stores, per country, an inner trie-map addressed by
organization (division, department). Rendering the outer map renders every
inner map in place, in the same format and at the same indentation.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from triemap.core.node import TrieNode, build_triemap
from triemap.domain.demo_models import DemoResult, create_error_result, create_success_result
from triemap.io.renderer import render
from triemap.io.writer import JsonWriter, RenderFormat

logger = logging.getLogger(__name__)

DEMO_NAME = "geo-org"

# -----------------------------------------------------------------------------
# DOMAIN KEYS & DATA
# -----------------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class Continent:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Country:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Division:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Department:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Data:
    value: str

    def __str__(self) -> str:
        return self.value


def print_data(writer: JsonWriter, data: Data) -> None:
    writer.write(writer.quoted(data))

# -----------------------------------------------------------------------------
# OPERATIONS
# -----------------------------------------------------------------------------

def new_org_map(backend: Any = "ordered") -> TrieNode[Data]:
    return build_triemap(Division, Department, backend=backend)


def build_geo_org(backend: Any = "ordered") -> TrieNode[TrieNode[Data]]:
    """
    Outer map <Continent, Country> of inner maps <Division, Department>.

    The second Germany insert finds the existing inner map and adds to it.
    """
    geo = build_triemap(Continent, Country, backend=backend)

    placements = [
        ("Europe", "Ukraine", "Sales", "Retail", "A"),
        ("Europe", "Germany", "Services", "Support", "B"),
        ("Europe", "Germany", "Services", "Consulting", "C"),
    ]
    for continent, country, division, department, value in placements:
        org, _ = geo.insert(new_org_map(backend), Continent(continent), Country(country))
        org.value.insert(Data(value), Division(division), Department(department))
    return geo


def run(cfg: Dict[str, Any]) -> DemoResult:
    geo = build_geo_org(cfg["backend"])
    printers = {Data: print_data}

    renderings: Dict[str, str] = {
        fmt.value: render(geo, fmt, data_tag=cfg["data_tag"], printers=printers)
        for fmt in RenderFormat
    }

    inner_sizes: List[int] = []

    def measure(node: TrieNode[Any], *_: Any) -> None:
        if node.has_value:
            inner_sizes.append(node.value.size())

    geo.traverse_pre(measure)

    lines = [
        f"Countries: {geo.size()}",
        f"Org entries: {sum(inner_sizes)}",
    ]

    error = ""
    if geo.size() != 2 or sum(inner_sizes) != 3:
        error = f"expected 2 countries holding 3 org entries, found {geo.size()} and {sum(inner_sizes)}"
    else:
        for fmt in (RenderFormat.PROPER, RenderFormat.D3):
            try:
                json.loads(renderings[fmt.value])
            except json.JSONDecodeError as e:
                error = f"{fmt.value} rendering is not valid JSON: {e}"
                break

    selected = cfg["render_format"]
    if cfg["verbose"]:
        rendering = "\n".join(
            f"2D trie-map as {name}:\n{text}\n" for name, text in renderings.items()
        )
    else:
        rendering = f"2D trie-map as {selected}:\n{renderings[selected]}\n"

    summary = {"countries": geo.size(), "org_entries": sum(inner_sizes)}
    if error:
        logger.error(f"Geo-org check failed: {error}")
        return create_error_result(DEMO_NAME, error, cfg, lines, rendering, summary)
    return create_success_result(DEMO_NAME, cfg, lines, rendering, summary)
