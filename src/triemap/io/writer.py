from __future__ import annotations

"""
Render Writer.

Carries everything a rendering pass needs from one recursive call to the
next: the destination stream, the selected format, the data tag, the value
printers and the current indentation. Nested renders of trie-map values reuse
the same writer, so they observe the same format and continue the same
indentation.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from triemap.io.printers import PrinterRegistry

# -----------------------------------------------------------------------------
# SETTINGS
# -----------------------------------------------------------------------------

class RenderFormat(str, Enum):
    """Text shapes produced from the same traversal."""
    LIKE = "like"
    PROPER = "proper"
    D3 = "d3"

    @classmethod
    def parse(cls, value: Any) -> "RenderFormat":
        """
        Resolve a format from an enum member or its name.

        Raises:
            ValueError: If the name is unknown.
        """
        if isinstance(value, RenderFormat):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown render format '{value}'. Expected one of: {choices}.") from None


def _default_printers() -> "PrinterRegistry":
    from triemap.io.printers import PrinterRegistry
    return PrinterRegistry()


@dataclass(frozen=True)
class RenderSettings:
    """
    Immutable rendering options.

    Attributes:
        fmt: Output shape.
        data_tag: Label of the data field in every rendered node.
        indent_step: Spaces added per nesting level.
        printers: Per-type value printers.
    """
    fmt: RenderFormat = RenderFormat.LIKE
    data_tag: str = "data"
    indent_step: int = 2
    printers: "PrinterRegistry" = field(default_factory=_default_printers)

# -----------------------------------------------------------------------------
# WRITER
# -----------------------------------------------------------------------------

class JsonWriter:
    """Indentation-aware text sink bound to one set of render settings."""

    def __init__(self, stream: TextIO, settings: RenderSettings) -> None:
        self._stream = stream
        self.settings = settings
        self.indent = 0

    @property
    def fmt(self) -> RenderFormat:
        return self.settings.fmt

    @property
    def strict_json(self) -> bool:
        """True when the output must parse as JSON."""
        return self.fmt is not RenderFormat.LIKE

    def write(self, text: str) -> None:
        self._stream.write(text)

    def newline(self) -> None:
        """New line followed by the current indentation."""
        self._stream.write("\n" + " " * self.indent)

    def indent_in(self) -> None:
        self.indent += self.settings.indent_step
        self.newline()

    def indent_out(self) -> None:
        self.indent -= self.settings.indent_step
        self.newline()

    def separator(self) -> None:
        """Comma between sibling members."""
        self._stream.write(",")
        self.newline()

    @staticmethod
    def quoted(text: Any) -> str:
        return json.dumps(str(text), ensure_ascii=False)

    def member(self, name: Any) -> None:
        """Emit a member name and colon; bare in LIKE format, quoted otherwise."""
        label = str(name) if self.fmt is RenderFormat.LIKE else self.quoted(name)
        self._stream.write(f"{label}:")

    def value(self, value: Any) -> None:
        """Emit a data value through the printer registered for its type."""
        self.settings.printers.lookup(type(value))(self, value)
