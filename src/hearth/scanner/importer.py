"""Copying of discovered assets into the home store."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from hearth.exceptions import AssetExistsError, AssetImportError, HearthError, SelectorError
from hearth.io import copy_asset, path_exists, remove_path
from hearth.model import AmbiguousMultiSource, AssetIdentity, DiscoveredAsset, ImportOutcome, ScanResult
from hearth.scanner.catalog import HomeCatalog, read_home_catalog
from hearth.scanner.reconcile import group_by_identity

logger = logging.getLogger(__name__)

UNRESOLVED_REASON: str = "sources disagree or could not be compared; select one source explicitly"
NO_MATCH_REASON: str = "no discovered asset matches"


@dataclass(frozen=True)
class AssetSelector:
    """A ``kind:id`` selector, optionally pinned to one source with ``@label`` or ``@path``."""

    identity: AssetIdentity
    source: str | None = None

    @classmethod
    def parse(cls, raw: str) -> AssetSelector:
        identity_raw, sep, source = raw.partition("@")
        if sep and not source.strip():
            raise SelectorError(f"Asset selector {raw!r} names an empty source")
        return cls(identity=AssetIdentity.parse(identity_raw), source=source.strip() or None)

    def matches(self, asset: DiscoveredAsset) -> bool:
        if asset.identity != self.identity:
            return False
        if self.source is None:
            return True
        return self.source in (asset.source, asset.path.as_posix())

    def __str__(self) -> str:
        return f"{self.identity}@{self.source}" if self.source else str(self.identity)


def import_asset(
    home: Path,
    identity: AssetIdentity,
    source_path: Path,
    *,
    overwrite: bool = False,
    existing: Path | None = None,
) -> Path:
    """Copy one asset into its canonical home location and return that path.

    *existing* is the home copy already on disk when its name differs from
    the canonical one (``prompts/Code Review.md`` for ``prompt:code-review``).
    Any existing copy blocks the import unless *overwrite* is set, in which
    case every copy is removed wholesale before copying.
    """
    target = identity.home_path(home)
    present = [path for path in dict.fromkeys((existing or target, target)) if path_exists(path)]
    if any(path.resolve() == source_path.resolve() for path in present):
        raise AssetImportError(f"Source already is the home copy: {source_path}")
    if present:
        if not overwrite:
            raise AssetExistsError(present[0])
        for path in present:
            if path_exists(path):
                remove_path(path)
    try:
        copy_asset(source_path, target)
    except OSError as exc:
        raise AssetImportError(f"Failed to copy {source_path} to {target}: {exc}") from exc
    return target


def import_assets(
    home: Path,
    assets: Iterable[DiscoveredAsset],
    *,
    overwrite: bool = False,
    catalog: HomeCatalog | None = None,
) -> list[ImportOutcome]:
    """Import each asset independently; a failure is recorded and the batch continues.

    Existing home copies are looked up by normalized id in *catalog*, read
    from *home* when not given.
    """
    catalog = catalog if catalog is not None else read_home_catalog(home)
    outcomes: list[ImportOutcome] = []
    for asset in assets:
        existing = catalog.path_for(asset.identity) if catalog.contains(asset.identity) else None
        try:
            target = import_asset(home, asset.identity, asset.path, overwrite=overwrite, existing=existing)
        except (HearthError, OSError) as exc:
            logger.warning("Failed to import %s from %s: %s", asset.identity, asset.source, exc)
            outcomes.append(ImportOutcome(asset=asset, error=str(exc)))
            continue
        logger.info("Imported %s from %s -> %s", asset.identity, asset.source, target)
        outcomes.append(ImportOutcome(asset=asset, target=target))
    return outcomes


def select_import_candidates(
    result: ScanResult,
    selectors: Iterable[AssetSelector] = (),
    *,
    include_all: bool = False,
) -> tuple[list[DiscoveredAsset], list[tuple[str, str]]]:
    """Resolve which discovered assets a sync should import.

    With no selectors and *include_all*, every unsynced identity is picked.
    An identity whose sources disagree is rejected unless its selector names
    one source. Returns ``(candidates, rejected)`` where each rejection is a
    ``(selector, reason)`` pair.
    """
    unresolved = unresolved_identities(result)
    selectors = list(selectors)
    candidates: list[DiscoveredAsset] = []
    rejected: list[tuple[str, str]] = []

    if not selectors and include_all:
        for identity, assets in group_by_identity(result.report.unsynced).items():
            if identity in unresolved:
                rejected.append((str(identity), UNRESOLVED_REASON))
                continue
            candidates.append(assets[0])
        return candidates, rejected

    discovered = result.report.discovered
    for selector in selectors:
        matches = [asset for asset in discovered if selector.matches(asset)]
        if not matches:
            rejected.append((str(selector), NO_MATCH_REASON))
            continue
        if selector.identity in unresolved and len({asset.path for asset in matches}) > 1:
            rejected.append((str(selector), UNRESOLVED_REASON))
            continue
        candidates.append(matches[0])
    return candidates, rejected


def unresolved_identities(result: ScanResult) -> set[AssetIdentity]:
    """Identities whose source cannot be picked automatically.

    These are ambiguous identities plus identities that failed to
    fingerprint. Without computed conflicts every identity offered by more
    than one path counts as unresolved.
    """
    if result.conflicts is None:
        return {
            identity
            for identity, assets in group_by_identity(result.report.discovered).items()
            if len({asset.path for asset in assets}) > 1
        }
    unresolved = {
        conflict.identity for conflict in result.conflicts if isinstance(conflict.verdict, AmbiguousMultiSource)
    }
    unresolved.update(error.identity for error in result.errors)
    return unresolved
