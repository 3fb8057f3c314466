"""
Resolved per-type metadata handed to the code generator.

Everything here is produced upstream by the analysis stage and treated as
read-only, already-validated input: the generator decides structure and
gating from it but never repairs it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .namespaces import MAIN
from .version import Version


class Visibility(str, Enum):
    PUBLIC = "public"
    CRATE = "crate"
    PRIVATE = "private"
    HIDDEN = "hidden"

    @property
    def hidden(self) -> bool:
        return self is Visibility.HIDDEN


@dataclass(frozen=True)
class SuperType:
    """One supertype of an object type, as seen from the main namespace."""

    name: str
    ns_id: int
    glib_name: Optional[str] = None
    ignored: bool = False

    @property
    def is_local(self) -> bool:
        return self.ns_id == MAIN


@dataclass(frozen=True)
class FunctionInfo:
    name: str
    parameter_count: int = 0
    visibility: Visibility = Visibility.PUBLIC
    version: Optional[Version] = None

    @property
    def hidden(self) -> bool:
        return self.visibility.hidden


@dataclass(frozen=True)
class ObjectWrapper:
    """Reference-counted object with class metadata."""

    type_name: str
    glib_name: str
    get_type_fn: str
    glib_class_name: Optional[str] = None
    supertypes: Tuple[SuperType, ...] = ()


@dataclass(frozen=True)
class BoxedWrapper:
    """Value type duplicated through an explicit copy function."""

    type_name: str
    glib_name: str
    copy_fn: str
    free_fn: str
    get_type_fn: Optional[str] = None


@dataclass(frozen=True)
class SharedWrapper:
    """Value type reference-counted through explicit ref/unref functions."""

    type_name: str
    glib_name: str
    ref_fn: str
    unref_fn: str
    get_type_fn: Optional[str] = None


WrapperKind = Union[ObjectWrapper, BoxedWrapper, SharedWrapper]


@dataclass(frozen=True)
class TypeDescription:
    wrapper: WrapperKind
    functions: Tuple[FunctionInfo, ...] = ()

    @property
    def name(self) -> str:
        return self.wrapper.type_name


__all__ = [
    "BoxedWrapper",
    "FunctionInfo",
    "ObjectWrapper",
    "SharedWrapper",
    "SuperType",
    "TypeDescription",
    "Visibility",
    "WrapperKind",
]
