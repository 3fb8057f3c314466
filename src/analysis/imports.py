"""Ordered import requirements for one generated file."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from .version import Version


class Imports:
    """
    Crate imports keyed by name, kept in insertion order.

    Each entry carries the minimum library version that needs it. Adding a
    name twice keeps the lowest requirement; an unversioned requirement means
    the import is always needed and wins over any version.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Optional[Version]] = {}

    def add(self, name: str, version: Optional[Version] = None) -> None:
        if name not in self._entries:
            self._entries[name] = version
            return
        current = self._entries[name]
        if current is None:
            return
        if version is None or version < current:
            self._entries[name] = version

    def iter(self) -> Iterator[Tuple[str, Optional[Version]]]:
        return iter(self._entries.items())

    def __iter__(self) -> Iterator[Tuple[str, Optional[Version]]]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries


__all__ = ["Imports"]
