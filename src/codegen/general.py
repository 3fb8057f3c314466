"""
Declaration emitters shared by every generated file.

Each function here appends complete lines to a caller-owned text sink. They
decide which declarations appear, in what shape and under which `cfg` gates;
they do not validate the metadata they are given. A failing write raises
`OSError` out of the emitter immediately, leaving whatever was already written
in the sink for the caller to discard.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, TextIO, assert_never

from analysis import (
    MAIN,
    BoxedWrapper,
    FunctionInfo,
    Imports,
    ObjectWrapper,
    SharedWrapper,
    SuperType,
    Version,
    WrapperKind,
)
from env import Config, Env

from .primitives import tabs, writeln
from .version import GENERATOR_NAME, VERSION

logger = logging.getLogger(__name__)

DOX_FEATURE = 'feature = "dox"'
DEFAULT_CONSTRUCTOR = "new"
GLIB_FFI_CRATE = "glib_ffi"


def start_comments(w: TextIO, conf: Config) -> None:
    writeln(
        w,
        f"// This file was generated by {GENERATOR_NAME} ({VERSION}) "
        f"from gir-files ({conf.girs_version})",
    )
    writeln(w, "// DO NOT EDIT")


def uses(w: TextIO, env: Env, imports: Imports) -> None:
    """
    Write one `use` line per import, each preceded by its version gate.

    When the crate being generated is GLib itself, `glib_ffi` refers to the
    crate's own `ffi` module rather than to an external dependency.
    """
    writeln(w)
    for name, version in imports.iter():
        version_condition(w, env, version, False, 0)
        if env.namespaces.glib_ns_id == MAIN and name == GLIB_FFI_CRATE:
            writeln(w, f"use ffi as {name};")
        else:
            writeln(w, f"use {name};")


def _render_supertypes(env: Env, supertypes: Sequence[SuperType]) -> List[str]:
    parents: List[str] = []
    for parent in supertypes:
        if parent.is_local:
            parents.append(parent.name)
            continue
        namespace = env.namespaces[parent.ns_id]
        parents.append(
            f"{namespace.crate_name}::{parent.name} => "
            f"{namespace.ffi_crate_name}::{parent.glib_name}"
        )
    return parents


def define_object_type(
    w: TextIO,
    env: Env,
    type_name: str,
    glib_name: str,
    glib_class_name: Optional[str],
    glib_func_name: str,
    parents: Sequence[SuperType],
) -> None:
    parents = [p for p in parents if not p.ignored]
    # One foreign parent switches every parent to the bracketed list, since
    # the `=>` form cannot share a line with the plain comma-separated form.
    external_parents = any(not p.is_local for p in parents)
    rendered = _render_supertypes(env, parents)

    if glib_class_name is not None:
        handle = f"ffi::{glib_name}, ffi::{glib_class_name}"
    else:
        handle = f"ffi::{glib_name}"

    writeln(w)
    writeln(w, "glib_wrapper! {")
    if not rendered:
        logger.debug("%s: object wrapper without supertypes", type_name)
        writeln(w, f"\tpub struct {type_name}(Object<{handle}>);")
    elif external_parents:
        logger.debug("%s: bracketed supertype list (%d entries)", type_name, len(rendered))
        writeln(w, f"\tpub struct {type_name}(Object<{handle}>): [")
        for parent in rendered:
            writeln(w, f"\t\t{parent},")
        writeln(w, "\t];")
    else:
        writeln(w, f"\tpub struct {type_name}(Object<{handle}>): {', '.join(rendered)};")
    writeln(w)
    writeln(w, "\tmatch fn {")
    writeln(w, f"\t\tget_type => || ffi::{glib_func_name}(),")
    writeln(w, "\t}")
    writeln(w, "}")


def define_boxed_type(
    w: TextIO,
    type_name: str,
    glib_name: str,
    copy_fn: str,
    free_fn: str,
    get_type_fn: Optional[str],
) -> None:
    writeln(w)
    writeln(w, "glib_wrapper! {")
    writeln(w, f"\tpub struct {type_name}(Boxed<ffi::{glib_name}>);")
    writeln(w)
    writeln(w, "\tmatch fn {")
    writeln(w, f"\t\tcopy => |ptr| ffi::{copy_fn}(mut_override(ptr)),")
    writeln(w, f"\t\tfree => |ptr| ffi::{free_fn}(ptr),")
    if get_type_fn is not None:
        writeln(w, f"\t\tget_type => || ffi::{get_type_fn}(),")
    writeln(w, "\t}")
    writeln(w, "}")


def define_shared_type(
    w: TextIO,
    type_name: str,
    glib_name: str,
    ref_fn: str,
    unref_fn: str,
    get_type_fn: Optional[str],
) -> None:
    writeln(w)
    writeln(w, "glib_wrapper! {")
    writeln(w, f"\tpub struct {type_name}(Shared<ffi::{glib_name}>);")
    writeln(w)
    writeln(w, "\tmatch fn {")
    writeln(w, f"\t\tref => |ptr| ffi::{ref_fn}(ptr),")
    writeln(w, f"\t\tunref => |ptr| ffi::{unref_fn}(ptr),")
    if get_type_fn is not None:
        writeln(w, f"\t\tget_type => || ffi::{get_type_fn}(),")
    writeln(w, "\t}")
    writeln(w, "}")


def define_wrapper(w: TextIO, env: Env, wrapper: WrapperKind) -> None:
    """Write the `glib_wrapper!` block matching the wrapper's memory strategy."""
    if isinstance(wrapper, ObjectWrapper):
        define_object_type(
            w,
            env,
            wrapper.type_name,
            wrapper.glib_name,
            wrapper.glib_class_name,
            wrapper.get_type_fn,
            wrapper.supertypes,
        )
    elif isinstance(wrapper, BoxedWrapper):
        define_boxed_type(
            w,
            wrapper.type_name,
            wrapper.glib_name,
            wrapper.copy_fn,
            wrapper.free_fn,
            wrapper.get_type_fn,
        )
    elif isinstance(wrapper, SharedWrapper):
        define_shared_type(
            w,
            wrapper.type_name,
            wrapper.glib_name,
            wrapper.ref_fn,
            wrapper.unref_fn,
            wrapper.get_type_fn,
        )
    else:
        assert_never(wrapper)


def version_condition(
    w: TextIO,
    env: Env,
    version: Optional[Version],
    commented: bool,
    indent: int,
) -> None:
    line = version_condition_string(env, version, commented, indent)
    if line is not None:
        writeln(w, line)


def version_condition_string(
    env: Env,
    version: Optional[Version],
    commented: bool,
    indent: int,
) -> Optional[str]:
    """
    Render the gate for code available since `version`.

    Returns None when no version is given or when the configured baseline
    already guarantees it.
    """
    if version is None or version <= env.config.min_cfg_version:
        return None
    comment = "//" if commented else ""
    return f"{tabs(indent)}{comment}#[cfg(any({version.to_cfg()}, {DOX_FEATURE}))]"


def not_version_condition(
    w: TextIO,
    version: Optional[Version],
    commented: bool,
    indent: int,
) -> None:
    # Intentionally not compared against the baseline: this gate disables
    # code that only exists before `version`, so it is written whenever a
    # version is given. Do not merge with version_condition_string.
    if version is None:
        return
    comment = "//" if commented else ""
    writeln(
        w,
        f"{tabs(indent)}{comment}#[cfg(any(not({version.to_cfg()}), {DOX_FEATURE}))]",
    )


def cfg_condition(
    w: TextIO,
    cfg_condition: Optional[str],
    commented: bool,
    indent: int,
) -> None:
    line = cfg_condition_string(cfg_condition, commented, indent)
    if line is not None:
        writeln(w, line)


def cfg_condition_string(
    cfg_condition: Optional[str],
    commented: bool,
    indent: int,
) -> Optional[str]:
    if cfg_condition is None:
        return None
    comment = "//" if commented else ""
    return f"{tabs(indent)}{comment}#[cfg(any({cfg_condition}, {DOX_FEATURE}))]"


def doc_hidden(w: TextIO, doc_hidden: bool, comment_prefix: str, indent: int) -> None:
    if doc_hidden:
        writeln(w, f"{tabs(indent)}{comment_prefix}#[doc(hidden)]")


def write_vec(w: TextIO, lines: Iterable[object]) -> None:
    for line in lines:
        writeln(w, str(line))


def find_default_constructor(functions: Iterable[FunctionInfo]) -> Optional[FunctionInfo]:
    """Return the first visible zero-argument `new`, in declaration order."""
    for func in functions:
        if (
            not func.hidden
            and func.name == DEFAULT_CONSTRUCTOR
            and func.parameter_count == 0
        ):
            return func
    return None


def declare_default_from_new(
    w: TextIO,
    env: Env,
    name: str,
    functions: Sequence[FunctionInfo],
) -> None:
    func = find_default_constructor(functions)
    if func is None:
        logger.debug("%s: no visible zero-argument constructor, skipping Default", name)
        return

    writeln(w)
    version_condition(w, env, func.version, False, 0)
    writeln(w, f"impl Default for {name} {{")
    writeln(w, "    fn default() -> Self {")
    writeln(w, "        Self::new()")
    writeln(w, "    }")
    writeln(w, "}")


__all__ = [
    "DEFAULT_CONSTRUCTOR",
    "cfg_condition",
    "cfg_condition_string",
    "declare_default_from_new",
    "define_boxed_type",
    "define_object_type",
    "define_shared_type",
    "define_wrapper",
    "doc_hidden",
    "find_default_constructor",
    "not_version_condition",
    "start_comments",
    "uses",
    "version_condition",
    "version_condition_string",
    "write_vec",
]
