"""Config data model for Hearth scans."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ScanSource:
    """A directory outside the home store that may hold assets.

    Convention sources are only probed at well-known sub-paths such as
    ``.claude/skills``; explicit sources are also scanned at their root.
    """

    label: str
    root: Path
    explicit: bool = False

    def to_dict(self) -> dict[str, object]:
        return {"label": self.label, "root": self.root.as_posix(), "explicit": self.explicit}


@dataclass(frozen=True)
class HearthConfig:
    """Resolved, immutable configuration for one command invocation."""

    home: Path
    sources: tuple[ScanSource, ...] = ()
    codex_root: Path | None = None
    claude_root: Path | None = None
    agents_root: Path | None = None
    custom_sources: tuple[Path, ...] = ()
    config_path: Path | None = None

    @property
    def source_roots(self) -> tuple[str, ...]:
        """Resolved source roots as posix strings, in scan order."""
        return tuple(source.root.as_posix() for source in self.sources)
