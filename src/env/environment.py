"""Read-only context passed explicitly to every emitter call."""

from __future__ import annotations

from dataclasses import dataclass

from analysis import Namespaces

from .config import Config


@dataclass(frozen=True)
class Env:
    config: Config
    namespaces: Namespaces


__all__ = ["Env"]
