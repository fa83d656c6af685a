"""Configuration-related exceptions."""

from __future__ import annotations

from hearth.exceptions.base import HearthError


class ConfigError(HearthError, ValueError):
    """Raised when configuration or a scan source is invalid."""
