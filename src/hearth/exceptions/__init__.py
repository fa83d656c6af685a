"""Shared exception hierarchy for Hearth."""

from __future__ import annotations

from .assets import AssetExistsError, AssetImportError, FingerprintError, SelectorError
from .base import HearthError
from .config import ConfigError

__all__ = [
    "AssetExistsError",
    "AssetImportError",
    "ConfigError",
    "FingerprintError",
    "HearthError",
    "SelectorError",
]
