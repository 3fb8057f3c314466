"""Emit `glib_wrapper!` declarations and their gates as Rust source lines."""

from .general import (
    cfg_condition,
    cfg_condition_string,
    declare_default_from_new,
    define_boxed_type,
    define_object_type,
    define_shared_type,
    define_wrapper,
    doc_hidden,
    find_default_constructor,
    not_version_condition,
    start_comments,
    uses,
    version_condition,
    version_condition_string,
    write_vec,
)
from .primitives import tabs, writeln
from .unit import UnitDescription, generate_unit
from .version import GENERATOR_NAME, VERSION

__all__ = [
    "GENERATOR_NAME",
    "UnitDescription",
    "VERSION",
    "cfg_condition",
    "cfg_condition_string",
    "declare_default_from_new",
    "define_boxed_type",
    "define_object_type",
    "define_shared_type",
    "define_wrapper",
    "doc_hidden",
    "find_default_constructor",
    "generate_unit",
    "not_version_condition",
    "start_comments",
    "tabs",
    "uses",
    "version_condition",
    "version_condition_string",
    "write_vec",
    "writeln",
]
