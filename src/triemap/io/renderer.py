from __future__ import annotations

"""
Trie-Map Renderer.

Converts a trie-map into text by driving its depth-first traversal. Three
shapes are produced from the same walk:

* LIKE   - nested objects with bare member names (JSON-like, for humans).
* PROPER - strictly valid JSON, member names and strings quoted.
* D3     - valid JSON shaped for hierarchical visualization, one
           {type, name, data?, children:[...]} object per node.

All state (format, indentation) travels in the JsonWriter passed to every
call.
"""

import logging
from io import StringIO
from typing import Any, List, Mapping, Optional, TextIO

from triemap.core.node import TrieNode
from triemap.core.visitors import Visit
from triemap.io.printers import Printer, PrinterRegistry
from triemap.io.writer import JsonWriter, RenderFormat, RenderSettings

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render(
        tree: TrieNode[Any],
        fmt: Any = RenderFormat.LIKE,
        *,
        data_tag: str = "data",
        printers: Optional[Mapping[type, Printer]] = None,
        indent_step: int = 2,
) -> str:
    """
    Render a trie-map into a string.

    Args:
        tree: Root (or any node) of the trie-map to render.
        fmt: RenderFormat member or its name.
        data_tag: Label used for the data member of every node.
        printers: Extra per-type printers overriding the defaults.
        indent_step: Spaces per nesting level.

    Returns:
        str: The rendered text.
    """
    buffer = StringIO()
    dump(tree, buffer, fmt, data_tag=data_tag, printers=printers, indent_step=indent_step)
    return buffer.getvalue()


def dump(
        tree: TrieNode[Any],
        stream: TextIO,
        fmt: Any = RenderFormat.LIKE,
        *,
        data_tag: str = "data",
        printers: Optional[Mapping[type, Printer]] = None,
        indent_step: int = 2,
) -> None:
    """Render a trie-map into an open text stream."""
    settings = RenderSettings(
        fmt=RenderFormat.parse(fmt),
        data_tag=data_tag,
        indent_step=indent_step,
        printers=PrinterRegistry(printers),
    )
    logger.debug(f"Rendering trie-map (format={settings.fmt.value}, size={tree.size()})")
    write_tree(JsonWriter(stream, settings), tree)


def like(tree: TrieNode[Any], **options: Any) -> str:
    return render(tree, RenderFormat.LIKE, **options)


def proper(tree: TrieNode[Any], **options: Any) -> str:
    return render(tree, RenderFormat.PROPER, **options)


def d3(tree: TrieNode[Any], **options: Any) -> str:
    return render(tree, RenderFormat.D3, **options)


def write_tree(writer: JsonWriter, tree: TrieNode[Any]) -> None:
    """
    Render a trie-map through an existing writer.

    Entry point for nested renders: a trie-map stored as data is written in
    the writer's format at the writer's current indentation.
    """
    if writer.fmt is RenderFormat.D3:
        _write_d3(writer, tree)
    else:
        _write_objects(writer, tree)

# -----------------------------------------------------------------------------
# OBJECT SHAPES (LIKE / PROPER)
# -----------------------------------------------------------------------------

def _write_objects(writer: JsonWriter, tree: TrieNode[Any]) -> None:
    """
    Emit one object per node: the data member (if any) followed by one
    member per child, named by the child's key.
    """
    comma = False

    def enter(node: TrieNode[Any], *edge: Any) -> Visit:
        nonlocal comma
        if comma:
            writer.separator()
        if edge:
            writer.member(edge[0])
        writer.write("{")
        writer.indent_in()

        comma = node.has_value
        if node.has_value:
            writer.member(writer.settings.data_tag)
            writer.value(node.value)
        return Visit.CONTINUE

    def leave(node: TrieNode[Any], *edge: Any) -> None:
        nonlocal comma
        writer.indent_out()
        writer.write("}")
        comma = True

    tree.traverse_dfs(enter, leave)

# -----------------------------------------------------------------------------
# HIERARCHY SHAPE (D3)
# -----------------------------------------------------------------------------

def _write_d3(writer: JsonWriter, tree: TrieNode[Any]) -> None:
    """
    Emit {type, name, data?, children} objects. The root carries neither
    type nor name; leaves carry no children member.
    """
    # One flag per open children array: True until its first element is written.
    first_child: List[bool] = []

    def enter(node: TrieNode[Any], *edge: Any) -> Visit:
        comma = False
        if edge:
            if not first_child[-1]:
                writer.separator()
            first_child[-1] = False

        writer.write("{")
        writer.indent_in()

        if edge:
            key = edge[0]
            writer.member("type")
            writer.write(writer.quoted(type(key).__name__))
            writer.separator()
            writer.member("name")
            writer.write(writer.quoted(key))
            comma = True

        if node.has_value:
            if comma:
                writer.separator()
            writer.member(writer.settings.data_tag)
            writer.value(node.value)
            comma = True

        if not node.leaf():
            if comma:
                writer.separator()
            writer.member("children")
            writer.write("[")
            writer.newline()
            first_child.append(True)
        return Visit.CONTINUE

    def leave(node: TrieNode[Any], *edge: Any) -> None:
        if not node.leaf():
            writer.newline()
            writer.write("]")
            first_child.pop()
        writer.indent_out()
        writer.write("}")

    tree.traverse_dfs(enter, leave)
