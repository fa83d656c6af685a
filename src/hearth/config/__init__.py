"""Configuration loading and source resolution for Hearth.

This package facade re-exports all public names so that callers can use
``from hearth.config import ...``.
"""

from __future__ import annotations

from hearth.config.loader import (
    dedupe_sources,
    default_config_path,
    expand_user_path,
    load_config,
    load_config_file,
    resolve_home,
)
from hearth.config.model import HearthConfig, ScanSource

__all__ = [
    "HearthConfig",
    "ScanSource",
    "dedupe_sources",
    "default_config_path",
    "expand_user_path",
    "load_config",
    "load_config_file",
    "resolve_home",
]
