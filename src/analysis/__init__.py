"""Resolved library metadata consumed by the code generator."""

from .imports import Imports
from .namespaces import GLIB_NAMESPACE, MAIN, Namespace, Namespaces
from .types import (
    BoxedWrapper,
    FunctionInfo,
    ObjectWrapper,
    SharedWrapper,
    SuperType,
    TypeDescription,
    Visibility,
    WrapperKind,
)
from .version import Version

__all__ = [
    "BoxedWrapper",
    "FunctionInfo",
    "GLIB_NAMESPACE",
    "Imports",
    "MAIN",
    "Namespace",
    "Namespaces",
    "ObjectWrapper",
    "SharedWrapper",
    "SuperType",
    "TypeDescription",
    "Version",
    "Visibility",
    "WrapperKind",
]
