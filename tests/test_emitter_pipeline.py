from pathlib import Path

import pytest

import emitter.writer
from codegen import GENERATOR_NAME, VERSION
from emitter import emit_unit, write_unit
from frontend import load_unit_file

EXPECTED_GTK = (
    f"// This file was generated by {GENERATOR_NAME} ({VERSION}) from gir-files (0c3a9b1)\n"
    "// DO NOT EDIT\n"
    "\n"
    "use glib;\n"
    "use gio;\n"
    "use glib_ffi;\n"
    '#[cfg(any(feature = "v3_10", feature = "dox"))]\n'
    "use gdk;\n"
    "use ffi;\n"
    "\n"
    "glib_wrapper! {\n"
    "\tpub struct Button(Object<ffi::GtkButton, ffi::GtkButtonClass>): [\n"
    "\t\tBin,\n"
    "\t\tContainer,\n"
    "\t\tWidget,\n"
    "\t\tglib::Object => gobject_ffi::GObject,\n"
    "\t];\n"
    "\n"
    "\tmatch fn {\n"
    "\t\tget_type => || ffi::gtk_button_get_type(),\n"
    "\t}\n"
    "}\n"
    "\n"
    "impl Default for Button {\n"
    "    fn default() -> Self {\n"
    "        Self::new()\n"
    "    }\n"
    "}\n"
    "\n"
    "glib_wrapper! {\n"
    "\tpub struct Widget(Object<ffi::GtkWidget, ffi::GtkWidgetClass>): Buildable;\n"
    "\n"
    "\tmatch fn {\n"
    "\t\tget_type => || ffi::gtk_widget_get_type(),\n"
    "\t}\n"
    "}\n"
    "\n"
    "glib_wrapper! {\n"
    "\tpub struct Settings(Object<ffi::GtkSettings>);\n"
    "\n"
    "\tmatch fn {\n"
    "\t\tget_type => || ffi::gtk_settings_get_type(),\n"
    "\t}\n"
    "}\n"
    "\n"
    '#[cfg(any(feature = "v3_10", feature = "dox"))]\n'
    "impl Default for Settings {\n"
    "    fn default() -> Self {\n"
    "        Self::new()\n"
    "    }\n"
    "}\n"
    "\n"
    "glib_wrapper! {\n"
    "\tpub struct TextIter(Boxed<ffi::GtkTextIter>);\n"
    "\n"
    "\tmatch fn {\n"
    "\t\tcopy => |ptr| ffi::gtk_text_iter_copy(mut_override(ptr)),\n"
    "\t\tfree => |ptr| ffi::gtk_text_iter_free(ptr),\n"
    "\t\tget_type => || ffi::gtk_text_iter_get_type(),\n"
    "\t}\n"
    "}\n"
    "\n"
    "glib_wrapper! {\n"
    "\tpub struct TargetList(Shared<ffi::GtkTargetList>);\n"
    "\n"
    "\tmatch fn {\n"
    "\t\tref => |ptr| ffi::gtk_target_list_ref(ptr),\n"
    "\t\tunref => |ptr| ffi::gtk_target_list_unref(ptr),\n"
    "\t}\n"
    "}\n"
)


def test_emit_gtk_unit():
    result = emit_unit(load_unit_file("tests/cases/gtk_unit.json"))
    assert result.source == EXPECTED_GTK
    assert result.line_count == EXPECTED_GTK.count("\n")


def test_emit_glib_unit_uses_own_ffi():
    source = emit_unit(load_unit_file("tests/cases/glib_unit.json")).source
    assert "use ffi as glib_ffi;\nuse gobject_ffi;\n" in source
    assert '#[cfg(any(feature = "v2_56", feature = "dox"))]\nuse std;\n' in source
    assert "impl Default for MainContext" in source
    assert "\t\tget_type => || ffi::g_main_context_get_type(),\n" in source


def test_write_unit(tmp_path):
    output_path = tmp_path / "nested" / "auto.rs"
    written = write_unit(load_unit_file("tests/cases/gtk_unit.json"), output_path)
    assert written == output_path
    assert output_path.read_text(encoding="utf-8") == EXPECTED_GTK


def test_write_unit_removes_partial_file(tmp_path, monkeypatch):
    def failing_generate(w, unit):
        w.write("// This file was generated")
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(emitter.writer, "generate_unit", failing_generate)
    output_path = tmp_path / "auto.rs"

    with pytest.raises(OSError):
        write_unit(load_unit_file("tests/cases/gtk_unit.json"), output_path)
    assert not Path(output_path).exists()
