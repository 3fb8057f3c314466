"""
Library version tags used to gate generated declarations.

A `Version` orders like a tuple, so comparing it against the configured
baseline is a plain `>` and sorting requirements needs no key function.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?$")


class Version(NamedTuple):
    major: int
    minor: int
    patch: int = 0

    @classmethod
    def parse(cls, raw: str) -> "Version":
        """Parse `"3.10"` or `"3.10.2"` into a Version."""
        match = _VERSION_RE.match(raw.strip())
        if not match:
            raise ValueError(f"Invalid version string: {raw!r}")
        major, minor, patch = match.groups()
        return cls(int(major), int(minor), int(patch or 0))

    def to_feature(self) -> str:
        if self.patch:
            return f"v{self.major}_{self.minor}_{self.patch}"
        return f"v{self.major}_{self.minor}"

    def to_cfg(self) -> str:
        """Render the condition expression used inside a `cfg` attribute."""
        return f'feature = "{self.to_feature()}"'

    def __str__(self) -> str:
        if self.patch:
            return f"{self.major}.{self.minor}.{self.patch}"
        return f"{self.major}.{self.minor}"


__all__ = ["Version"]
