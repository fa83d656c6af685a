"""Reconciliation of discovered assets against the home store.

Every discovered identity receives exactly one verdict. ``classify`` is the
single total decision function; precedence is fixed so that disagreeing
sources always dominate whatever the home store holds::

    ambiguous-multi-source > content-drift > home-modified-untracked
        > home-untracked > no-conflict
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from typing import TypeAlias
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from hearth.constants.reconcile import DIFF_PREVIEW_MAX_LINES
from hearth.exceptions import FingerprintError
from hearth.model import (
    DRIFT_VERDICTS,
    AmbiguousMultiSource,
    AssetError,
    AssetIdentity,
    AssetKind,
    ConflictVerdict,
    ContentDrift,
    DiffSummary,
    DiscoveredAsset,
    Fingerprint,
    HomeModifiedUntracked,
    HomeUntracked,
    NoConflict,
    ScanConflict,
)
from hearth.scanner.catalog import HomeCatalog, read_home_catalog
from hearth.scanner.fingerprint import fingerprint_asset
from hearth.scanner.git import is_tracked

logger = logging.getLogger(__name__)

SourcePrint: TypeAlias = tuple[DiscoveredAsset, Fingerprint]


def classify(source_digests: Collection[str], home_digest: str | None, home_tracked: bool) -> ConflictVerdict:
    """Map the fingerprints seen for one identity to its conflict verdict."""
    distinct = set(source_digests)
    if len(distinct) > 1:
        return AmbiguousMultiSource(variants=len(distinct))
    if home_digest is None:
        return NoConflict()
    if distinct and home_digest not in distinct:
        return ContentDrift() if home_tracked else HomeModifiedUntracked()
    if not home_tracked:
        return HomeUntracked()
    return NoConflict()


def group_by_identity(assets: Iterable[DiscoveredAsset]) -> dict[AssetIdentity, list[DiscoveredAsset]]:
    """Group assets by identity; keys and members come back sorted."""
    grouped: dict[AssetIdentity, list[DiscoveredAsset]] = {}
    for asset in assets:
        grouped.setdefault(asset.identity, []).append(asset)
    return {identity: sorted(grouped[identity], key=DiscoveredAsset.sort_key) for identity in sorted(grouped)}


def build_conflicts(
    home: Path,
    discovered: Iterable[DiscoveredAsset],
    tracked_files: frozenset[str] | set[str],
    *,
    catalog: HomeCatalog | None = None,
    include_diff: bool = False,
    include_diff_full: bool = False,
    max_workers: int = 1,
) -> tuple[list[ScanConflict], list[AssetError]]:
    """Classify every discovered identity against the home store.

    Identities whose fingerprints cannot be computed are returned as
    ``AssetError`` entries instead of conflicts; the rest of the batch is
    unaffected.
    """
    catalog = catalog if catalog is not None else read_home_catalog(home)
    groups = list(group_by_identity(discovered).items())

    def _reconcile(item: tuple[AssetIdentity, list[DiscoveredAsset]]) -> ScanConflict | AssetError:
        identity, assets = item
        try:
            return reconcile_identity(
                identity,
                assets,
                catalog=catalog,
                tracked_files=tracked_files,
                include_diff=include_diff,
                include_diff_full=include_diff_full,
            )
        except FingerprintError as exc:
            logger.warning("Cannot classify %s: %s", identity, exc)
            return AssetError(identity=identity, path=exc.path, message=str(exc))

    if max_workers > 1 and len(groups) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(_reconcile, groups))
    else:
        outcomes = [_reconcile(item) for item in groups]

    conflicts = [outcome for outcome in outcomes if isinstance(outcome, ScanConflict)]
    errors = [outcome for outcome in outcomes if isinstance(outcome, AssetError)]
    return conflicts, errors


def reconcile_identity(
    identity: AssetIdentity,
    assets: list[DiscoveredAsset],
    *,
    catalog: HomeCatalog,
    tracked_files: frozenset[str] | set[str],
    include_diff: bool = False,
    include_diff_full: bool = False,
) -> ScanConflict:
    """Fingerprint one identity's sources and home copy, then classify it."""
    source_prints: list[SourcePrint] = [
        (asset, fingerprint_asset(asset.kind, asset.path, include_preview=include_diff_full)) for asset in assets
    ]

    home_print: Fingerprint | None = None
    home_tracked = False
    if catalog.contains(identity):
        home_path = catalog.path_for(identity)
        home_print = fingerprint_asset(identity.kind, home_path, include_preview=include_diff_full)
        home_tracked = is_tracked(
            identity,
            tracked_files,
            home_relpath=home_path.relative_to(catalog.home).as_posix(),
        )

    verdict = classify(
        [fingerprint.digest for _, fingerprint in source_prints],
        home_print.digest if home_print is not None else None,
        home_tracked,
    )
    diff = None
    if include_diff or include_diff_full:
        diff = build_diff(verdict, identity.kind, source_prints, home_print, full=include_diff_full)

    return ScanConflict(
        identity=identity,
        verdict=verdict,
        sources=tuple(sorted({asset.source for asset in assets})),
        diff=diff,
    )


def build_diff(
    verdict: ConflictVerdict,
    kind: AssetKind,
    source_prints: list[SourcePrint],
    home_print: Fingerprint | None,
    *,
    full: bool = False,
) -> DiffSummary | None:
    """Describe the disagreement behind *verdict*, or None when there is none."""
    if isinstance(verdict, AmbiguousMultiSource):
        preview = None
        if full:
            preview = tuple(
                line
                for asset, fingerprint in source_prints
                for line in (f"source {asset.source}: {asset.path.as_posix()}", f"  {fingerprint.description}")
            )
        return DiffSummary(summary=f"Found {verdict.variants} distinct source variants.", preview=preview)

    if not isinstance(verdict, DRIFT_VERDICTS) or home_print is None or not source_prints:
        return None

    source_print = source_prints[0][1]
    summary = f"home({home_print.description}) != source({source_print.description})"
    if not full or home_print.preview is None or source_print.preview is None:
        return DiffSummary(summary=summary)
    if kind is AssetKind.PROMPT:
        return DiffSummary(summary=summary, preview=prompt_line_diff(home_print.preview, source_print.preview))
    return DiffSummary(summary=summary, preview=skill_listing_diff(home_print.preview, source_print.preview))


def prompt_line_diff(home_lines: tuple[str, ...], source_lines: tuple[str, ...]) -> tuple[str, ...]:
    """Pair up differing lines by position, capped at ``DIFF_PREVIEW_MAX_LINES`` output lines."""
    output: list[str] = []
    for index in range(max(len(home_lines), len(source_lines))):
        home_line = home_lines[index] if index < len(home_lines) else ""
        source_line = source_lines[index] if index < len(source_lines) else ""
        if home_line == source_line:
            continue
        output.append(f"line {index + 1} home:   {home_line}")
        output.append(f"line {index + 1} source: {source_line}")
        if len(output) >= DIFF_PREVIEW_MAX_LINES:
            break
    return tuple(output)


def skill_listing_diff(home_files: tuple[str, ...], source_files: tuple[str, ...]) -> tuple[str, ...]:
    return (
        "home files:",
        *(f"  {name}" for name in home_files),
        "source files:",
        *(f"  {name}" for name in source_files),
    )
