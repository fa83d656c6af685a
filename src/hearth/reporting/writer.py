"""JSON report writer."""

from __future__ import annotations

from pathlib import Path

from hearth.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from hearth.io import dump_json, write_json_atomic
from hearth.model import ScanResult


def render_scan_json(result: ScanResult) -> str:
    """Serialize a scan result with sorted keys so unchanged input yields identical text."""
    return dump_json(result.to_dict())


def write_scan_report(path: Path, result: ScanResult) -> Path:
    """Write the JSON scan report atomically and return its path."""
    write_json_atomic(
        path=path,
        payload=result.to_dict(),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path
