"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hearth.config import HearthConfig, load_config
from hearth.exceptions import SelectorError
from hearth.io import dump_json
from hearth.reporting.stdout import ScanReporter, render_import_outcomes
from hearth.reporting.writer import render_scan_json, write_scan_report
from hearth.scanner.catalog import ensure_home_structure
from hearth.scanner.importer import AssetSelector, import_assets, select_import_candidates
from hearth.scanner.orchestrator import scan_home


def resolve_config(args: argparse.Namespace) -> HearthConfig:
    """Resolve configuration once from parsed command-line arguments."""
    return load_config(
        args.config,
        home=args.home,
        extra_sources=tuple(args.source),
        project_root=None if args.no_project else Path.cwd(),
    )


def _use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and sys.stdout.isatty()


def handle_scan(args: argparse.Namespace) -> int:
    """Run a scan and print it; exit 1 when unsynced assets remain."""
    config = resolve_config(args)
    result = scan_home(
        config,
        include_conflicts=args.conflicts,
        include_diff=args.diff,
        include_diff_full=args.diff_full,
    )

    if args.output is not None:
        write_scan_report(args.output, result)

    if args.json:
        sys.stdout.write(render_scan_json(result))
    else:
        reporter = ScanReporter(
            result,
            color=_use_color(args),
            verbose=args.verbose,
            sources_full=args.sources_full,
        )
        print(reporter.render())

    return 1 if result.has_unsynced else 0


def handle_sync(args: argparse.Namespace) -> int:
    """Import selected assets; exit 1 when any selection is rejected or any import fails."""
    if not args.select and not args.all:
        print("Nothing to sync: pass --select kind:id[@source] or --all", file=sys.stderr)
        return 2

    try:
        selectors = [AssetSelector.parse(raw) for raw in args.select]
    except SelectorError as exc:
        print(f"Invalid selection: {exc}", file=sys.stderr)
        return 2

    config = resolve_config(args)
    result = scan_home(config, include_conflicts=True)
    candidates, rejected = select_import_candidates(result, selectors, include_all=args.all)

    for selector, reason in rejected:
        print(f"Skipped {selector}: {reason}", file=sys.stderr)

    if not candidates:
        if not rejected:
            print("No unsynced assets to import.")
        return 1 if rejected else 0

    ensure_home_structure(config.home)
    outcomes = import_assets(config.home, candidates, overwrite=args.force)
    print(render_import_outcomes(outcomes, color=_use_color(args)))

    failures = sum(1 for outcome in outcomes if not outcome.ok)
    return 1 if failures or rejected else 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Resolve configuration and print it as JSON."""
    config = load_config(args.config, home=args.home)
    payload = {
        "home": config.home.as_posix(),
        "sources": [source.to_dict() for source in config.sources],
    }
    sys.stdout.write(dump_json(payload))
    print("Configuration is valid.", file=sys.stderr)
    return 0
