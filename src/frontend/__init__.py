"""Front-end glue loading resolved metadata descriptions."""

from .pipeline import LoadError, load_unit, load_unit_file

__all__ = ["LoadError", "load_unit", "load_unit_file"]
