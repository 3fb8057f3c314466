"""
Assemble a complete generated file for one namespace.

The order is fixed: provenance header, imports, then every type's wrapper
block immediately followed by its `Default` impl when one can be inferred.
Types are emitted exactly as listed; duplicates are the caller's concern.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO, Tuple

from analysis import Imports, TypeDescription
from env import Env

from .general import declare_default_from_new, define_wrapper, start_comments, uses

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitDescription:
    """Everything needed to generate one output file."""

    env: Env
    imports: Imports
    types: Tuple[TypeDescription, ...]


def generate_unit(w: TextIO, unit: UnitDescription) -> None:
    env = unit.env
    start_comments(w, env.config)
    uses(w, env, unit.imports)
    for type_ in unit.types:
        logger.debug("generating %s", type_.name)
        define_wrapper(w, env, type_.wrapper)
        declare_default_from_new(w, env, type_.name, type_.functions)


__all__ = ["UnitDescription", "generate_unit"]
