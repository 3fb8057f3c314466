"""
Generation settings shared by every emitter in a run.

`min_cfg_version` is the baseline: the oldest library version the generated
crate may assume, so anything available at or below it needs no gate.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from analysis import Version

DEFAULT_MIN_CFG_VERSION = Version(0, 0)


@dataclass(frozen=True)
class Config:
    library_name: str
    girs_version: str = ""
    min_cfg_version: Version = DEFAULT_MIN_CFG_VERSION

    def with_min_cfg_version(self, version: Optional[Version]) -> "Config":
        if version is None:
            return self
        return replace(self, min_cfg_version=version)


__all__ = ["Config", "DEFAULT_MIN_CFG_VERSION"]
