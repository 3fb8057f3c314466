"""Configuration and namespace context for a generation run."""

from .config import DEFAULT_MIN_CFG_VERSION, Config
from .environment import Env

__all__ = ["Config", "DEFAULT_MIN_CFG_VERSION", "Env"]
