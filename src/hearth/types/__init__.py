"""Shared type aliases for Hearth."""

from .common import StatusState
from .report import (
    AssetErrorPayload,
    ConflictPayload,
    DiffPayload,
    DiscoveredAssetPayload,
    StatusItemPayload,
)

__all__ = [
    "AssetErrorPayload",
    "ConflictPayload",
    "DiffPayload",
    "DiscoveredAssetPayload",
    "StatusItemPayload",
    "StatusState",
]
