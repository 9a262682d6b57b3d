from __future__ import annotations

from .printers import Printer, PrinterRegistry
from .renderer import d3, dump, like, proper, render, write_tree
from .writer import JsonWriter, RenderFormat, RenderSettings

__all__ = [
    "RenderFormat",
    "RenderSettings",
    "JsonWriter",
    "Printer",
    "PrinterRegistry",
    "render",
    "dump",
    "like",
    "proper",
    "d3",
    "write_tree",
]
