from pathlib import Path

import pytest

from analysis import (
    MAIN,
    BoxedWrapper,
    ObjectWrapper,
    SharedWrapper,
    Version,
    Visibility,
)
from frontend import LoadError, load_unit, load_unit_file


def test_load_gtk_unit():
    unit = load_unit_file(Path("tests/cases/gtk_unit.json"))

    assert unit.env.config.library_name == "Gtk"
    assert unit.env.config.girs_version == "0c3a9b1"
    assert unit.env.config.min_cfg_version == Version(3, 4)

    assert [ns.crate_name for ns in unit.env.namespaces] == ["gtk", "glib", "gio"]
    assert unit.env.namespaces[1].ffi_crate_name == "gobject_ffi"
    assert unit.env.namespaces[2].ffi_crate_name == "gio_ffi"
    assert unit.env.namespaces.glib_ns_id is None

    assert list(unit.imports.iter()) == [
        ("glib", None),
        ("gio", None),
        ("glib_ffi", None),
        ("gdk", Version(3, 10)),
        ("ffi", None),
    ]

    kinds = [type(t.wrapper) for t in unit.types]
    assert kinds == [ObjectWrapper, ObjectWrapper, ObjectWrapper, BoxedWrapper, SharedWrapper]

    button = unit.types[0].wrapper
    assert button.glib_class_name == "GtkButtonClass"
    assert [p.ns_id for p in button.supertypes] == [MAIN, MAIN, MAIN, 1]

    widget = unit.types[1].wrapper
    assert widget.supertypes[0].ignored is True
    assert widget.supertypes[1].ignored is False

    settings = unit.types[2]
    assert settings.wrapper.glib_class_name is None
    assert settings.functions[0].visibility is Visibility.HIDDEN
    assert settings.functions[1].version == Version(3, 10)

    shared = unit.types[4].wrapper
    assert shared.get_type_fn is None


def test_load_glib_unit_marks_glib_as_main():
    unit = load_unit_file("tests/cases/glib_unit.json")
    assert unit.env.namespaces.glib_ns_id == MAIN


def test_invalid_json():
    with pytest.raises(LoadError, match="invalid JSON"):
        load_unit("{not json", source_name="broken.json")


def test_missing_config():
    with pytest.raises(LoadError, match="missing required field 'config'"):
        load_unit('{"namespaces": [{"name": "Gtk", "crate_name": "gtk"}]}')


def test_requires_main_namespace():
    with pytest.raises(LoadError, match="main namespace"):
        load_unit('{"config": {"library": "Gtk"}}')


def test_unknown_wrapper_kind_reports_path():
    source = Path("tests/cases/unknown_kind.json").read_text(encoding="utf-8")
    with pytest.raises(LoadError) as excinfo:
        load_unit(source, source_name="unknown_kind.json")
    assert "$.types[0]" in str(excinfo.value)
    assert "'interface'" in str(excinfo.value)


def test_unknown_supertype_namespace():
    source = """
    {
      "config": {"library": "Gtk"},
      "namespaces": [{"name": "Gtk", "crate_name": "gtk"}],
      "types": [{
        "kind": "object", "name": "Button", "glib_name": "GtkButton",
        "get_type": "gtk_button_get_type",
        "supertypes": [{"name": "Object", "namespace": "GObject"}]
      }]
    }
    """
    with pytest.raises(LoadError, match=r"\$\.types\[0\]\.supertypes\[0\].*'GObject'"):
        load_unit(source)


def test_bad_version_string():
    source = '{"config": {"library": "Gtk", "min_cfg_version": "three"}, "namespaces": [{"name": "Gtk", "crate_name": "gtk"}]}'
    with pytest.raises(LoadError, match="min_cfg_version"):
        load_unit(source)


def _object_unit(supertypes: str = "[]", functions: str = "[]") -> str:
    return f"""
    {{
      "config": {{"library": "Gtk"}},
      "namespaces": [
        {{"name": "Gtk", "crate_name": "gtk"}},
        {{"name": "GObject", "crate_name": "glib", "ffi_crate_name": "gobject_ffi"}}
      ],
      "types": [{{
        "kind": "object", "name": "Button", "glib_name": "GtkButton",
        "get_type": "gtk_button_get_type",
        "supertypes": {supertypes},
        "functions": {functions}
      }}]
    }}
    """


def test_foreign_supertype_requires_glib_name():
    source = _object_unit(supertypes='[{"name": "Object", "namespace": "GObject"}]')
    with pytest.raises(LoadError, match=r"\$\.types\[0\]\.supertypes\[0\].*'glib_name'"):
        load_unit(source)


def test_local_supertype_without_glib_name_is_accepted():
    unit = load_unit(_object_unit(supertypes='[{"name": "Widget", "namespace": "Gtk"}]'))
    widget = unit.types[0].wrapper.supertypes[0]
    assert widget.ns_id == MAIN
    assert widget.glib_name is None


@pytest.mark.parametrize("raw", ['"false"', "0", "null"])
def test_ignored_must_be_boolean(raw):
    source = _object_unit(
        supertypes=f'[{{"name": "Widget", "namespace": "Gtk", "ignored": {raw}}}]'
    )
    with pytest.raises(LoadError, match=r"\$\.types\[0\]\.supertypes\[0\].*'ignored'"):
        load_unit(source)


@pytest.mark.parametrize("raw", ["false", "true", "-1", '"0"', "1.0"])
def test_parameters_must_be_a_count(raw):
    source = _object_unit(functions=f'[{{"name": "new", "parameters": {raw}}}]')
    with pytest.raises(LoadError, match=r"\$\.types\[0\]\.functions\[0\].*'parameters'"):
        load_unit(source)
