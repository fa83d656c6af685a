"""Core data entities for Hearth scans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from hearth.constants.discovery import HOME_PROMPTS_DIRNAME, HOME_SKILLS_DIRNAME, PROMPT_EXTENSION
from hearth.constants.reporting import SCHEMA_VERSION
from hearth.exceptions import SelectorError
from hearth.model.verdicts import ConflictVerdict
from hearth.types import (
    AssetErrorPayload,
    ConflictPayload,
    DiffPayload,
    DiscoveredAssetPayload,
    StatusItemPayload,
    StatusState,
)
from hearth.utils import normalize_asset_id


class AssetKind(StrEnum):
    """Kinds of assets kept in the home store."""

    PROMPT = "prompt"
    SKILL = "skill"


@dataclass(frozen=True, order=True)
class AssetIdentity:
    """Normalized ``(kind, id)`` pair that names one asset everywhere."""

    kind: AssetKind
    id: str

    @classmethod
    def of(cls, kind: AssetKind | str, raw_id: str) -> AssetIdentity:
        """Build an identity from an un-normalized id."""
        return cls(kind=AssetKind(kind), id=normalize_asset_id(raw_id))

    @classmethod
    def parse(cls, raw: str) -> AssetIdentity:
        """Parse the ``kind:id`` selector form used on the command line."""
        kind_raw, sep, id_raw = raw.strip().partition(":")
        if not sep:
            raise SelectorError(f"Asset selector must look like kind:id, got {raw!r}")
        try:
            kind = AssetKind(kind_raw.strip().lower())
        except ValueError as exc:
            valid = ", ".join(kind.value for kind in AssetKind)
            raise SelectorError(f"Unknown asset kind {kind_raw!r} (expected one of: {valid})") from exc
        identity = cls.of(kind, id_raw)
        if not identity.id:
            raise SelectorError(f"Asset selector {raw!r} has an empty id")
        return identity

    @property
    def home_relpath(self) -> str:
        """Canonical posix path of this asset relative to the home store."""
        if self.kind is AssetKind.PROMPT:
            return f"{HOME_PROMPTS_DIRNAME}/{self.id}{PROMPT_EXTENSION}"
        return f"{HOME_SKILLS_DIRNAME}/{self.id}"

    def home_path(self, home: Path) -> Path:
        """Canonical absolute location of this asset in *home*."""
        return home.joinpath(*self.home_relpath.split("/"))

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


@dataclass(frozen=True)
class DiscoveredAsset:
    """One asset candidate found under a source root during a scan."""

    identity: AssetIdentity
    source: str
    path: Path

    @property
    def kind(self) -> AssetKind:
        return self.identity.kind

    @property
    def id(self) -> str:
        return self.identity.id

    def sort_key(self) -> tuple[str, str, str, str]:
        return (self.kind.value, self.id, self.source, self.path.as_posix())

    def to_dict(self) -> DiscoveredAssetPayload:
        return {
            "kind": self.kind.value,
            "id": self.id,
            "source": self.source,
            "path": self.path.as_posix(),
        }


@dataclass(frozen=True)
class Fingerprint:
    """Content digest of one prompt file or skill directory."""

    digest: str
    description: str
    preview: tuple[str, ...] | None = None


@dataclass(frozen=True)
class DiffSummary:
    """Short explanation of how two asset variants differ."""

    summary: str
    preview: tuple[str, ...] | None = None

    def to_dict(self) -> DiffPayload:
        payload: DiffPayload = {"summary": self.summary}
        if self.preview is not None:
            payload["preview"] = list(self.preview)
        return payload


@dataclass(frozen=True)
class ScanConflict:
    """Reconciliation verdict for one asset identity."""

    identity: AssetIdentity
    verdict: ConflictVerdict
    sources: tuple[str, ...]
    diff: DiffSummary | None = None

    @property
    def state(self) -> str:
        return self.verdict.state

    @property
    def reason(self) -> str:
        return self.verdict.reason

    @property
    def recommendation(self) -> str:
        return self.verdict.recommendation

    def to_dict(self) -> ConflictPayload:
        payload: ConflictPayload = {
            "kind": self.identity.kind.value,
            "id": self.identity.id,
            "state": self.state,
            "reason": self.reason,
            "recommendation": self.recommendation,
            "sources": list(self.sources),
        }
        if self.diff is not None:
            payload["diff"] = self.diff.to_dict()
        return payload


@dataclass(frozen=True)
class AssetError:
    """Hard failure while classifying a single asset identity."""

    identity: AssetIdentity
    path: Path
    message: str

    def to_dict(self) -> AssetErrorPayload:
        return {
            "kind": self.identity.kind.value,
            "id": self.identity.id,
            "path": self.path.as_posix(),
            "message": self.message,
        }


@dataclass(frozen=True)
class StatusItem:
    """Three-bucket sync status for one discovered identity."""

    identity: AssetIdentity
    sources: tuple[str, ...]
    state: StatusState

    def to_dict(self) -> StatusItemPayload:
        return {
            "kind": self.identity.kind.value,
            "id": self.identity.id,
            "sources": list(self.sources),
            "state": self.state,
        }


@dataclass(frozen=True)
class ScanReport:
    """Discovered and unsynced assets for one scan invocation."""

    home: Path
    sources: tuple[str, ...]
    discovered_prompts: tuple[DiscoveredAsset, ...]
    discovered_skills: tuple[DiscoveredAsset, ...]
    unsynced_prompts: tuple[DiscoveredAsset, ...]
    unsynced_skills: tuple[DiscoveredAsset, ...]
    statuses: tuple[StatusItem, ...] = ()

    @property
    def discovered(self) -> tuple[DiscoveredAsset, ...]:
        return self.discovered_prompts + self.discovered_skills

    @property
    def unsynced(self) -> tuple[DiscoveredAsset, ...]:
        return self.unsynced_prompts + self.unsynced_skills

    def to_dict(self) -> dict[str, object]:
        return {
            "home": self.home.as_posix(),
            "sources": list(self.sources),
            "discovered_prompts": [asset.to_dict() for asset in self.discovered_prompts],
            "discovered_skills": [asset.to_dict() for asset in self.discovered_skills],
            "unsynced_prompts": [asset.to_dict() for asset in self.unsynced_prompts],
            "unsynced_skills": [asset.to_dict() for asset in self.unsynced_skills],
            "statuses": [item.to_dict() for item in self.statuses],
        }


@dataclass(frozen=True)
class ScanResult:
    """Report, conflicts and diagnostics returned by ``scan_home``."""

    report: ScanReport
    conflicts: tuple[ScanConflict, ...] | None = None
    errors: tuple[AssetError, ...] = ()
    warnings: tuple[str, ...] = ()
    active_sources: tuple[str, ...] = ()
    duration_seconds: float = 0.0

    @property
    def has_unsynced(self) -> bool:
        return bool(self.report.unsynced)

    def to_dict(self) -> dict[str, object]:
        """Serialize the result; timing is left out so repeated runs compare equal."""
        payload: dict[str, object] = {"schema_version": SCHEMA_VERSION, **self.report.to_dict()}
        payload["errors"] = [error.to_dict() for error in self.errors]
        payload["warnings"] = list(self.warnings)
        if self.conflicts is not None:
            payload["conflicts"] = [conflict.to_dict() for conflict in self.conflicts]
        return payload


@dataclass(frozen=True)
class ImportOutcome:
    """Result of importing one discovered asset into the home store."""

    asset: DiscoveredAsset
    target: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
