"""
Namespace registry for a single generation run.

Index `MAIN` is always the namespace currently being generated; every other
entry is a dependency whose types are reached through its own crate and its
own native-binding crate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

MAIN = 0
GLIB_NAMESPACE = "GLib"


@dataclass(frozen=True)
class Namespace:
    name: str
    crate_name: str
    ffi_crate_name: str = ""

    def __post_init__(self) -> None:
        if not self.ffi_crate_name:
            object.__setattr__(self, "ffi_crate_name", f"{self.crate_name}_ffi")


@dataclass
class Namespaces:
    """Ordered namespaces; position in the list is the namespace id."""

    entries: List[Namespace] = field(default_factory=list)

    def __getitem__(self, ns_id: int) -> Namespace:
        return self.entries[ns_id]

    def __iter__(self) -> Iterator[Namespace]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def glib_ns_id(self) -> Optional[int]:
        for ns_id, namespace in enumerate(self.entries):
            if namespace.name == GLIB_NAMESPACE:
                return ns_id
        return None

    def find(self, name: str) -> Optional[int]:
        for ns_id, namespace in enumerate(self.entries):
            if namespace.name == name:
                return ns_id
        return None


__all__ = ["GLIB_NAMESPACE", "MAIN", "Namespace", "Namespaces"]
