"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "HEARTH"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ HEARTH",
    "     // one home for prompts and skills",
)
SCAN_SUMMARY_TITLE: str = "Scan summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} asset sync"))
