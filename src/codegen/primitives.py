"""Low-level helpers for writing generated lines to a text sink."""

from __future__ import annotations

from typing import TextIO

TAB = "\t"


def tabs(indent: int) -> str:
    return TAB * indent


def writeln(w: TextIO, line: str = "") -> None:
    """Append one line to the sink. Write errors propagate to the caller."""
    w.write(line)
    w.write("\n")


__all__ = ["TAB", "tabs", "writeln"]
