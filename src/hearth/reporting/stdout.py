"""Human-readable stdout reporter for scan results."""

from __future__ import annotations

from pathlib import Path

from hearth.constants.branding import ASCII_LOGO_LINES, SCAN_SUMMARY_TITLE
from hearth.constants.reconcile import STATE_AMBIGUOUS_MULTI_SOURCE, STATE_NO_CONFLICT
from hearth.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    SOURCES_SUMMARY_SAMPLE_SIZE,
    STATUS_COLORS,
    STATUS_SECTION_TITLES,
)
from hearth.model import ImportOutcome, ScanConflict, ScanResult, StatusItem


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def shorten_path(path: str, user_home: Path | None = None) -> str:
    """Abbreviate the user's home directory as ``~``."""
    home = (user_home or Path.home()).as_posix()
    if path == home or path.startswith(home + "/"):
        return "~" + path[len(home) :]
    return path


class ScanReporter:
    """Formats scan results as human-readable stdout output."""

    def __init__(
        self,
        result: ScanResult,
        *,
        color: bool = True,
        verbose: bool = False,
        sources_full: bool = False,
    ) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose
        self._sources_full = sources_full

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header()]
        sections.extend(self._render_status_section(state) for state in STATUS_SECTION_TITLES)
        sections.append(self._render_conflicts())
        sections.append(self._render_errors())
        sections.append(self._render_footer())
        return "\n".join(section for section in sections if section)

    def _c(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {SCAN_SUMMARY_TITLE}",
            sep,
            "",
            f"  Home        {self._c(r.report.home.as_posix(), ANSI_CYAN)}",
            f"  Sources     {self._format_sources()}",
            (
                f"  Assets      {len(r.report.discovered)} discovered / "
                f"{len(r.report.unsynced)} unsynced"
            ),
        ]
        if r.conflicts is not None:
            flagged = sum(1 for conflict in r.conflicts if conflict.state != STATE_NO_CONFLICT)
            lines.append(f"  Conflicts   {flagged}")
        if self._verbose:
            lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        lines.append("")
        return "\n".join(lines)

    def _format_sources(self) -> str:
        configured = self._result.report.sources
        active = self._result.active_sources
        if self._sources_full:
            return ", ".join(configured)
        summary = f"{len(active)} active of {len(configured)} configured"
        sample = [shorten_path(root) for root in active[:SOURCES_SUMMARY_SAMPLE_SIZE]]
        if not sample:
            return summary
        suffix = ", ..." if len(active) > len(sample) else ""
        return f"{summary} ({', '.join(sample)}{suffix})"

    def _render_status_section(self, state: str) -> str:
        items = [item for item in self._result.report.statuses if item.state == state]
        if not items:
            return ""
        dot = self._c("●", STATUS_COLORS[state])
        lines = [f"  {self._c(STATUS_SECTION_TITLES[state], ANSI_BOLD)} ({len(items)})"]
        lines.extend(f"    {dot} {self._format_status_item(item)}" for item in items)
        lines.append("")
        return "\n".join(lines)

    def _format_status_item(self, item: StatusItem) -> str:
        sources = self._c(f"[{', '.join(item.sources)}]", ANSI_DIM)
        return f"[{item.identity.kind.value}] {item.identity.id} {sources}"

    def _render_conflicts(self) -> str:
        conflicts = [c for c in (self._result.conflicts or ()) if c.state != STATE_NO_CONFLICT]
        if not conflicts:
            return ""
        lines = [f"  {self._c('Conflicts', ANSI_BOLD)} ({len(conflicts)})"]
        for conflict in conflicts:
            lines.extend(self._format_conflict(conflict))
        lines.append("")
        return "\n".join(lines)

    def _format_conflict(self, conflict: ScanConflict) -> list[str]:
        color = ANSI_RED if conflict.state == STATE_AMBIGUOUS_MULTI_SOURCE else ANSI_YELLOW
        lines = [
            f"    {self._c(conflict.state, color)} [{conflict.identity.kind.value}] {conflict.identity.id}"
            f" [{', '.join(conflict.sources)}]",
            f"      {conflict.reason}",
            f"      -> {conflict.recommendation}",
        ]
        if conflict.diff is not None:
            lines.append(f"      {conflict.diff.summary}")
            lines.extend(f"        {line}" for line in conflict.diff.preview or ())
        return lines

    def _render_errors(self) -> str:
        r = self._result
        if not r.errors and not (self._verbose and r.warnings):
            return ""
        lines: list[str] = []
        for error in r.errors:
            label = f"[{error.identity.kind.value}] {error.identity.id}"
            lines.append(f"  {self._c('Error', ANSI_RED)} {label}: {error.message}")
        if self._verbose:
            lines.extend(f"  {self._c('Warning', ANSI_YELLOW)} {warning}" for warning in r.warnings)
        lines.append("")
        return "\n".join(lines)

    def _render_footer(self) -> str:
        report = self._result.report
        if not report.discovered:
            return "  No assets discovered in configured scan sources."
        if not report.unsynced:
            return f"  {self._c('All discovered assets are synced.', ANSI_GREEN)}"
        return f"  Run `hearth sync --all` or `hearth sync --select kind:id` to import {len(report.unsynced)} asset(s)."


def render_import_outcomes(outcomes: list[ImportOutcome], *, color: bool = True) -> str:
    """Render one line per import attempt."""
    lines: list[str] = []
    for outcome in outcomes:
        label = f"[{outcome.asset.kind.value}] {outcome.asset.id}"
        if outcome.ok:
            status = _colorize("Synced", ANSI_GREEN) if color else "Synced"
            lines.append(f"{status} {label} ({outcome.asset.source}) -> {outcome.target}")
        else:
            status = _colorize("Failed", ANSI_RED) if color else "Failed"
            lines.append(f"{status} {label}: {outcome.error}")
    return "\n".join(lines)
