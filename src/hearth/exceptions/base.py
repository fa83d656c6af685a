"""Base exception for Hearth."""

from __future__ import annotations


class HearthError(Exception):
    """Base class for all Hearth errors."""
