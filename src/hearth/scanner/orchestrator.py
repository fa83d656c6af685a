"""End-to-end scan orchestration for Hearth.

The ``scan_home`` function is the primary entry point.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor

from hearth.config import HearthConfig, ScanSource
from hearth.constants.discovery import DISCOVERY_MAX_WORKERS
from hearth.model import AssetError, DiscoveredAsset, ScanResult
from hearth.scanner.catalog import read_home_catalog
from hearth.scanner.git import list_tracked_files
from hearth.scanner.reconcile import build_conflicts
from hearth.scanner.report import build_scan_report
from hearth.scanner.walker import discover

logger = logging.getLogger(__name__)


def discover_all(
    sources: tuple[ScanSource, ...],
    *,
    max_workers: int = DISCOVERY_MAX_WORKERS,
) -> tuple[list[DiscoveredAsset], list[str]]:
    """Discover assets from every source concurrently.

    Results are gathered in source order once all sources finish. A source
    that fails outright contributes nothing and a warning.
    """
    if not sources:
        return [], []

    warnings: list[str] = []
    discovered: list[DiscoveredAsset] = []
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(sources)))) as executor:
        futures = [(source, executor.submit(discover, source)) for source in sources]
        for source, future in futures:
            try:
                discovered.extend(future.result())
            except OSError as exc:
                warning = f"Skipping source {source.label} ({source.root.as_posix()}): {exc}"
                warnings.append(warning)
                logger.warning(warning)
    return discovered, warnings


def scan_home(
    config: HearthConfig,
    *,
    include_conflicts: bool = False,
    include_diff: bool = False,
    include_diff_full: bool = False,
    max_workers: int = DISCOVERY_MAX_WORKERS,
) -> ScanResult:
    """Scan every configured source against the home store.

    Conflicts are only computed when asked for (or implied by a diff flag)
    since they require fingerprinting every discovered asset.
    """
    started_at = time.perf_counter()
    home = config.home

    discovered, warnings = discover_all(config.sources, max_workers=max_workers)
    catalog = read_home_catalog(home)
    tracked_files = list_tracked_files(home)
    report = build_scan_report(home, config.source_roots, discovered, catalog, tracked_files)

    conflicts = None
    errors: list[AssetError] = []
    if include_conflicts or include_diff or include_diff_full:
        computed, errors = build_conflicts(
            home,
            report.discovered,
            tracked_files,
            catalog=catalog,
            include_diff=include_diff,
            include_diff_full=include_diff_full,
            max_workers=max_workers,
        )
        conflicts = tuple(computed)

    active_sources = tuple(source.root.as_posix() for source in config.sources if source.root.is_dir())
    duration = time.perf_counter() - started_at
    logger.info(
        "Scanned %d of %d sources: %d discovered, %d unsynced in %.2fs",
        len(active_sources),
        len(config.sources),
        len(report.discovered),
        len(report.unsynced),
        duration,
    )
    return ScanResult(
        report=report,
        conflicts=conflicts,
        errors=tuple(errors),
        warnings=tuple(warnings),
        active_sources=active_sources,
        duration_seconds=duration,
    )
