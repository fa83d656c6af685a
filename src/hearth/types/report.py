"""Typed payload structures for serialized scan reports."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class DiscoveredAssetPayload(TypedDict):
    """Serialized discovered asset."""

    kind: str
    id: str
    source: str
    path: str


class StatusItemPayload(TypedDict):
    """Serialized three-bucket status entry."""

    kind: str
    id: str
    sources: list[str]
    state: str


class DiffPayload(TypedDict):
    """Serialized diff summary attached to a conflict."""

    summary: str
    preview: NotRequired[list[str]]


class ConflictPayload(TypedDict):
    """Serialized reconciliation verdict for one asset identity."""

    kind: str
    id: str
    state: str
    reason: str
    recommendation: str
    sources: list[str]
    diff: NotRequired[DiffPayload]


class AssetErrorPayload(TypedDict):
    """Serialized per-asset failure."""

    kind: str
    id: str
    path: str
    message: str
