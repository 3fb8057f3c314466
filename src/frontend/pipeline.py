"""
Load a resolved-metadata description into the generator's data model.

The input is the JSON hand-off written by the analysis stage: generation
config, the namespace table (main namespace first), the ordered import list
and the per-type wrapper metadata. No semantic validation happens here; only
structurally unusable input is rejected, with the JSON path of the offending
entry in the error message.

Example::

    {
      "config": {"library": "Gtk", "girs_version": "d1a2b3c", "min_cfg_version": "3.4"},
      "namespaces": [
        {"name": "Gtk", "crate_name": "gtk"},
        {"name": "GObject", "crate_name": "glib", "ffi_crate_name": "gobject_ffi"}
      ],
      "imports": [{"name": "glib"}, {"name": "gdk", "version": "3.10"}],
      "types": [
        {"kind": "object", "name": "Button", "glib_name": "GtkButton",
         "get_type": "gtk_button_get_type",
         "supertypes": [{"name": "Object", "namespace": "GObject", "glib_name": "GObject"}],
         "functions": [{"name": "new", "parameters": 0}]}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from analysis import (
    MAIN,
    BoxedWrapper,
    FunctionInfo,
    Imports,
    Namespace,
    Namespaces,
    ObjectWrapper,
    SharedWrapper,
    SuperType,
    TypeDescription,
    Version,
    Visibility,
    WrapperKind,
)
from codegen import UnitDescription
from env import Config, Env

logger = logging.getLogger(__name__)


class LoadError(ValueError):
    """Raised when a metadata description cannot be turned into a unit."""

    def __init__(self, message: str, path: str = "", source_name: str = "<input>"):
        where = f"{source_name}: {path}: " if path else f"{source_name}: "
        super().__init__(f"{where}{message}")
        self.path = path
        self.source_name = source_name


class _UnitLoader:
    def __init__(self, source_name: str) -> None:
        self._source_name = source_name

    def _error(self, message: str, path: str) -> LoadError:
        return LoadError(message, path=path, source_name=self._source_name)

    # ------------------------------------------------------------------ helpers

    def _require(self, node: Dict[str, Any], key: str, path: str) -> Any:
        if not isinstance(node, dict):
            raise self._error("expected an object", path)
        if key not in node or node[key] is None:
            raise self._error(f"missing required field {key!r}", path)
        return node[key]

    def _require_str(self, node: Dict[str, Any], key: str, path: str) -> str:
        value = self._require(node, key, path)
        if not isinstance(value, str):
            raise self._error(f"field {key!r} must be a string", path)
        return value

    def _optional_str(self, node: Dict[str, Any], key: str, path: str) -> Optional[str]:
        value = node.get(key)
        if value is not None and not isinstance(value, str):
            raise self._error(f"field {key!r} must be a string", path)
        return value

    def _list(self, node: Dict[str, Any], key: str, path: str) -> List[Any]:
        value = node.get(key, [])
        if not isinstance(value, list):
            raise self._error(f"field {key!r} must be a list", path)
        return value

    def _version(self, raw: Any, path: str) -> Optional[Version]:
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise self._error("version must be a string such as \"3.10\"", path)
        try:
            return Version.parse(raw)
        except ValueError as exc:
            raise self._error(str(exc), path) from exc

    # ------------------------------------------------------------------ sections

    def load(self, document: Any) -> UnitDescription:
        if not isinstance(document, dict):
            raise self._error("top-level value must be an object", "$")

        config = self._config(self._require(document, "config", "$"), "$.config")
        namespaces = self._namespaces(document, "$.namespaces")
        env = Env(config=config, namespaces=namespaces)
        imports = self._imports(document, "$.imports")
        types = tuple(
            self._type(node, namespaces, f"$.types[{index}]")
            for index, node in enumerate(self._list(document, "types", "$"))
        )
        logger.debug(
            "%s: loaded %d namespaces, %d imports, %d types",
            self._source_name,
            len(namespaces),
            len(imports),
            len(types),
        )
        return UnitDescription(env=env, imports=imports, types=types)

    def _config(self, node: Dict[str, Any], path: str) -> Config:
        library = self._require_str(node, "library", path)
        girs_version = self._optional_str(node, "girs_version", path) or ""
        min_cfg_version = self._version(node.get("min_cfg_version"), f"{path}.min_cfg_version")
        config = Config(library_name=library, girs_version=girs_version)
        return config.with_min_cfg_version(min_cfg_version)

    def _namespaces(self, document: Dict[str, Any], path: str) -> Namespaces:
        entries: List[Namespace] = []
        for index, node in enumerate(self._list(document, "namespaces", "$")):
            item_path = f"{path}[{index}]"
            entries.append(
                Namespace(
                    name=self._require_str(node, "name", item_path),
                    crate_name=self._require_str(node, "crate_name", item_path),
                    ffi_crate_name=self._optional_str(node, "ffi_crate_name", item_path) or "",
                )
            )
        if not entries:
            raise self._error("at least the main namespace is required", path)
        return Namespaces(entries)

    def _imports(self, document: Dict[str, Any], path: str) -> Imports:
        imports = Imports()
        for index, node in enumerate(self._list(document, "imports", "$")):
            item_path = f"{path}[{index}]"
            name = self._require_str(node, "name", item_path)
            imports.add(name, self._version(node.get("version"), f"{item_path}.version"))
        return imports

    def _type(self, node: Dict[str, Any], namespaces: Namespaces, path: str) -> TypeDescription:
        kind = self._require_str(node, "kind", path)
        wrapper: WrapperKind
        if kind == "object":
            wrapper = ObjectWrapper(
                type_name=self._require_str(node, "name", path),
                glib_name=self._require_str(node, "glib_name", path),
                get_type_fn=self._require_str(node, "get_type", path),
                glib_class_name=self._optional_str(node, "glib_class_name", path),
                supertypes=tuple(
                    self._supertype(parent, namespaces, f"{path}.supertypes[{index}]")
                    for index, parent in enumerate(self._list(node, "supertypes", path))
                ),
            )
        elif kind == "boxed":
            wrapper = BoxedWrapper(
                type_name=self._require_str(node, "name", path),
                glib_name=self._require_str(node, "glib_name", path),
                copy_fn=self._require_str(node, "copy", path),
                free_fn=self._require_str(node, "free", path),
                get_type_fn=self._optional_str(node, "get_type", path),
            )
        elif kind == "shared":
            wrapper = SharedWrapper(
                type_name=self._require_str(node, "name", path),
                glib_name=self._require_str(node, "glib_name", path),
                ref_fn=self._require_str(node, "ref", path),
                unref_fn=self._require_str(node, "unref", path),
                get_type_fn=self._optional_str(node, "get_type", path),
            )
        else:
            raise self._error(
                f"unknown wrapper kind {kind!r} (expected object, boxed or shared)", path
            )

        functions = tuple(
            self._function(func, f"{path}.functions[{index}]")
            for index, func in enumerate(self._list(node, "functions", path))
        )
        return TypeDescription(wrapper=wrapper, functions=functions)

    def _supertype(self, node: Dict[str, Any], namespaces: Namespaces, path: str) -> SuperType:
        namespace_name = self._require_str(node, "namespace", path)
        ns_id = namespaces.find(namespace_name)
        if ns_id is None:
            raise self._error(f"unknown namespace {namespace_name!r}", path)
        name = self._require_str(node, "name", path)
        glib_name = self._optional_str(node, "glib_name", path)
        if ns_id != MAIN and glib_name is None:
            raise self._error(
                f"supertype {name!r} from namespace {namespace_name!r} needs a 'glib_name'", path
            )
        ignored = node.get("ignored", False)
        if not isinstance(ignored, bool):
            raise self._error("field 'ignored' must be true or false", path)
        return SuperType(name=name, ns_id=ns_id, glib_name=glib_name, ignored=ignored)

    def _function(self, node: Dict[str, Any], path: str) -> FunctionInfo:
        name = self._require_str(node, "name", path)
        parameters = node.get("parameters", 0)
        if isinstance(parameters, bool) or not isinstance(parameters, int) or parameters < 0:
            raise self._error("field 'parameters' must be a non-negative integer", path)
        raw_visibility = node.get("visibility", Visibility.PUBLIC.value)
        try:
            visibility = Visibility(raw_visibility)
        except ValueError as exc:
            raise self._error(f"unknown visibility {raw_visibility!r}", path) from exc
        return FunctionInfo(
            name=name,
            parameter_count=parameters,
            visibility=visibility,
            version=self._version(node.get("version"), f"{path}.version"),
        )


def load_unit(source: str, *, source_name: str = "<input>") -> UnitDescription:
    """
    Build a UnitDescription from JSON text.

    Args:
        source: Raw JSON text produced by the analysis stage.
        source_name: Label used in error messages, e.g. the file path.

    Raises:
        LoadError: If the text is not JSON or lacks required structure.
    """
    try:
        document = json.loads(source)
    except json.JSONDecodeError as exc:
        raise LoadError(
            f"invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            source_name=source_name,
        ) from exc
    return _UnitLoader(source_name).load(document)


def load_unit_file(path: Union[str, Path]) -> UnitDescription:
    source_path = Path(path)
    return load_unit(source_path.read_text(encoding="utf-8"), source_name=str(source_path))


__all__ = ["LoadError", "load_unit", "load_unit_file"]
