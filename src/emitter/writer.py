"""
Render generated units to text or straight to disk.

`emit_unit` buffers the whole file in memory, which is what tests and
previews want. `write_unit` streams into the destination file instead; if a
write fails part way, the partial file is removed before the error is
re-raised so no truncated output is left behind.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from codegen import UnitDescription, generate_unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmitResult:
    source: str

    @property
    def line_count(self) -> int:
        return self.source.count("\n")


def emit_unit(unit: UnitDescription) -> EmitResult:
    """
    Render the given unit to Rust source text.
    """
    buffer = io.StringIO()
    generate_unit(buffer, unit)
    return EmitResult(source=buffer.getvalue())


def write_unit(unit: UnitDescription, path: Union[str, Path]) -> Path:
    """
    Generate the unit directly into `path`, creating parent directories.

    Raises:
        OSError: If the file cannot be opened or a write fails. The partially
            written file has been removed by the time this propagates.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with output_path.open("w", encoding="utf-8", newline="\n") as handle:
            generate_unit(handle, unit)
    except OSError:
        logger.debug("discarding partial output %s", output_path)
        output_path.unlink(missing_ok=True)
        raise
    return output_path


__all__ = ["EmitResult", "emit_unit", "write_unit"]
