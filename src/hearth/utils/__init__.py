"""Shared utility helpers."""

from __future__ import annotations

from .naming import normalize_asset_id, to_posix

__all__ = ["normalize_asset_id", "to_posix"]
