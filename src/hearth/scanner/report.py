"""Scan report assembly: unsynced assets and the three-bucket status view."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from hearth.constants.reporting import STATUS_SYNCED_TRACKED, STATUS_SYNCED_UNTRACKED, STATUS_UNSYNCED
from hearth.model import AssetIdentity, AssetKind, DiscoveredAsset, ScanReport, StatusItem
from hearth.scanner.catalog import HomeCatalog
from hearth.scanner.git import is_tracked
from hearth.scanner.walker import unique_assets
from hearth.types import StatusState


def build_scan_report(
    home: Path,
    source_roots: Iterable[str],
    discovered: Iterable[DiscoveredAsset],
    catalog: HomeCatalog,
    tracked_files: frozenset[str] | set[str],
) -> ScanReport:
    """Partition discovered assets by kind and work out which are missing from home."""
    assets = sort_assets(unique_assets(discovered))
    prompts = tuple(asset for asset in assets if asset.kind is AssetKind.PROMPT)
    skills = tuple(asset for asset in assets if asset.kind is AssetKind.SKILL)

    return ScanReport(
        home=home,
        sources=tuple(source_roots),
        discovered_prompts=prompts,
        discovered_skills=skills,
        unsynced_prompts=tuple(asset for asset in prompts if not catalog.contains(asset.identity)),
        unsynced_skills=tuple(asset for asset in skills if not catalog.contains(asset.identity)),
        statuses=tuple(build_status_items(assets, catalog, tracked_files)),
    )


def build_status_items(
    discovered: Iterable[DiscoveredAsset],
    catalog: HomeCatalog,
    tracked_files: frozenset[str] | set[str],
) -> list[StatusItem]:
    """Bucket each discovered identity as synced-tracked, synced-untracked or unsynced."""
    sources_by_identity: dict[AssetIdentity, set[str]] = {}
    for asset in discovered:
        sources_by_identity.setdefault(asset.identity, set()).add(asset.source)

    items: list[StatusItem] = []
    for identity, sources in sources_by_identity.items():
        state: StatusState
        if not catalog.contains(identity):
            state = STATUS_UNSYNCED  # type: ignore[assignment]
        else:
            home_relpath = catalog.path_for(identity).relative_to(catalog.home).as_posix()
            tracked = is_tracked(identity, tracked_files, home_relpath=home_relpath)
            state = STATUS_SYNCED_TRACKED if tracked else STATUS_SYNCED_UNTRACKED  # type: ignore[assignment]
        items.append(StatusItem(identity=identity, sources=tuple(sorted(sources)), state=state))

    return sorted(items, key=lambda item: (item.identity.kind.value, item.identity.id, ",".join(item.sources)))


def sort_assets(assets: Iterable[DiscoveredAsset]) -> list[DiscoveredAsset]:
    """Order assets by kind, id, source label, then path."""
    return sorted(assets, key=DiscoveredAsset.sort_key)
