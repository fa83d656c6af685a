"""Core data models for Hearth."""

from .entities import (
    AssetError,
    AssetIdentity,
    AssetKind,
    DiffSummary,
    DiscoveredAsset,
    Fingerprint,
    ImportOutcome,
    ScanConflict,
    ScanReport,
    ScanResult,
    StatusItem,
)
from .verdicts import (
    DRIFT_VERDICTS,
    AmbiguousMultiSource,
    ConflictVerdict,
    ContentDrift,
    HomeModifiedUntracked,
    HomeUntracked,
    NoConflict,
)

__all__ = [
    "DRIFT_VERDICTS",
    "AmbiguousMultiSource",
    "AssetError",
    "AssetIdentity",
    "AssetKind",
    "ConflictVerdict",
    "ContentDrift",
    "DiffSummary",
    "DiscoveredAsset",
    "Fingerprint",
    "HomeModifiedUntracked",
    "HomeUntracked",
    "ImportOutcome",
    "NoConflict",
    "ScanConflict",
    "ScanReport",
    "ScanResult",
    "StatusItem",
]
