"""Utilities for turning generated units into source text or files."""

from .writer import EmitResult, emit_unit, write_unit

__all__ = ["EmitResult", "emit_unit", "write_unit"]
