from __future__ import annotations

"""
Value Printers.

Per-type print routines used for data slots. Lookup walks the value type's
MRO, so registering a base class covers its subclasses and bool wins over
int. Defaults: strings quoted, booleans as true/false, None as null, nested
trie-maps rendered recursively in the writer's format, anything else via
str(). Floats, lists, tuples and dicts are written as JSON in the PROPER and
D3 formats, with non-finite floats as null.
"""

import json
import math
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

from triemap.core.node import TrieNode

if TYPE_CHECKING:
    from triemap.io.writer import JsonWriter

Printer = Callable[["JsonWriter", Any], None]

# -----------------------------------------------------------------------------
# DEFAULT PRINTERS
# -----------------------------------------------------------------------------

def print_raw(writer: "JsonWriter", value: Any) -> None:
    writer.write(str(value))


def print_quoted(writer: "JsonWriter", value: Any) -> None:
    writer.write(writer.quoted(value))


def print_bool(writer: "JsonWriter", value: bool) -> None:
    writer.write("true" if value else "false")


def print_null(writer: "JsonWriter", value: None) -> None:
    writer.write("null")


def print_float(writer: "JsonWriter", value: float) -> None:
    if writer.strict_json and not math.isfinite(value):
        writer.write("null")
    else:
        writer.write(repr(value))


def print_container(writer: "JsonWriter", value: Any) -> None:
    """Lists, tuples and dicts; nested values without a JSON form fall back to str()."""
    if writer.strict_json:
        writer.write(json.dumps(value, ensure_ascii=False, default=str))
    else:
        writer.write(str(value))


def print_nested(writer: "JsonWriter", value: TrieNode[Any]) -> None:
    """Render a trie-map stored as data, continuing the enclosing render."""
    from triemap.io.renderer import write_tree
    write_tree(writer, value)

# -----------------------------------------------------------------------------
# REGISTRY
# -----------------------------------------------------------------------------

class PrinterRegistry:
    """Maps value types to printers, falling back along the MRO."""

    def __init__(self, overrides: Optional[Mapping[type, Printer]] = None) -> None:
        self._printers: Dict[type, Printer] = {
            object: print_raw,
            str: print_quoted,
            bool: print_bool,
            type(None): print_null,
            float: print_float,
            list: print_container,
            tuple: print_container,
            dict: print_container,
            TrieNode: print_nested,
        }
        if overrides:
            self._printers.update(overrides)

    def register(self, value_type: type, printer: Printer) -> None:
        self._printers[value_type] = printer

    def lookup(self, value_type: type) -> Printer:
        for klass in value_type.__mro__:
            printer = self._printers.get(klass)
            if printer is not None:
                return printer
        return print_raw
