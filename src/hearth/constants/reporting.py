"""Constants for report serialization and stdout formatting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1.0.0"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

STATUS_SYNCED_TRACKED: str = "synced-tracked"
STATUS_SYNCED_UNTRACKED: str = "synced-untracked"
STATUS_UNSYNCED: str = "unsynced"

STATUS_SECTION_TITLES: dict[str, str] = {
    STATUS_SYNCED_TRACKED: "Synced + git tracked",
    STATUS_SYNCED_UNTRACKED: "Synced + untracked in home git",
    STATUS_UNSYNCED: "Unsynced (missing from home)",
}

SOURCES_SUMMARY_SAMPLE_SIZE: int = 4

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_CYAN: str = "\033[36m"
ANSI_DIM: str = "\033[2m"

STATUS_COLORS: dict[str, str] = {
    STATUS_SYNCED_TRACKED: ANSI_GREEN,
    STATUS_SYNCED_UNTRACKED: ANSI_YELLOW,
    STATUS_UNSYNCED: ANSI_RED,
}
