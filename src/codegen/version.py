"""Identity of the generator, stamped into every generated file."""

GENERATOR_NAME = "glib-wrapper-gen"
VERSION = "0.4.1"

__all__ = ["GENERATOR_NAME", "VERSION"]
