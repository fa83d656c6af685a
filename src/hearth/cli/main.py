"""CLI entrypoint for Hearth."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from hearth import __version__
from hearth.cli.handlers import handle_scan, handle_sync, handle_validate_config
from hearth.constants.branding import CLI_DESCRIPTION
from hearth.exceptions import ConfigError, HearthError


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-H", "--home", type=Path, default=None, help="Home store path (overrides HEARTH_HOME)")
    parser.add_argument(
        "-s",
        "--source",
        type=Path,
        action="append",
        default=[],
        help="Extra source root scanned explicitly (repeat flag for multiple values)",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "--no-project",
        action="store_true",
        help="Do not include the current directory as a project source",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show warnings and debug diagnostics")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="hearth",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Compare source directories against the home store")
    _add_source_arguments(scan)
    scan.add_argument("--json", action="store_true", help="Print the report as JSON")
    scan.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON report to this file")
    scan.add_argument("--conflicts", action="store_true", help="Fingerprint assets and classify conflicts")
    scan.add_argument("--diff", action="store_true", help="Attach diff summaries to conflicts (implies --conflicts)")
    scan.add_argument(
        "--diff-full",
        action="store_true",
        help="Attach line and file previews to conflicts (implies --diff)",
    )
    scan.add_argument("--sources-full", action="store_true", help="List every configured source root")

    sync = subparsers.add_parser("sync", help="Import discovered assets into the home store")
    _add_source_arguments(sync)
    sync.add_argument(
        "-S",
        "--select",
        action="append",
        default=[],
        help="Asset to import as kind:id or kind:id@source (repeat flag for multiple values)",
    )
    sync.add_argument("-a", "--all", action="store_true", help="Import every unsynced asset whose sources agree")
    sync.add_argument("-f", "--force", action="store_true", help="Replace existing home assets")

    validate = subparsers.add_parser("validate-config", help="Resolve configuration and print it")
    validate.add_argument("-H", "--home", type=Path, default=None, help="Home store path")
    validate.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    handlers = {
        "scan": handle_scan,
        "sync": handle_sync,
        "validate-config": handle_validate_config,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except HearthError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
