"""Reporting package for Hearth outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["ScanReporter", "render_scan_json", "write_scan_report"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name == "ScanReporter":
        from .stdout import ScanReporter

        return ScanReporter
    if name in {"render_scan_json", "write_scan_report"}:
        from .writer import render_scan_json, write_scan_report

        exports = {
            "render_scan_json": render_scan_json,
            "write_scan_report": write_scan_report,
        }
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
