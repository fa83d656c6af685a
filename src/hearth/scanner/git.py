"""Tracked-file lookup for the home store's git repository."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from hearth.model import AssetIdentity, AssetKind
from hearth.utils import to_posix

logger = logging.getLogger(__name__)

GIT_LS_FILES_TIMEOUT_SECONDS: int = 30


def list_tracked_files(repo_root: Path) -> frozenset[str]:
    """Return posix paths git tracks under *repo_root*.

    Anything that prevents asking git (no ``.git``, git missing, command
    failure) yields an empty set, so every home asset appears untracked.
    """
    if not (repo_root / ".git").exists():
        return frozenset()

    try:
        completed = subprocess.run(
            ["git", "-C", str(repo_root), "ls-files"],
            capture_output=True,
            text=True,
            check=True,
            timeout=GIT_LS_FILES_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git ls-files failed in %s: %s", repo_root, exc)
        return frozenset()

    return frozenset(
        to_posix(line.strip()) for line in completed.stdout.splitlines() if line.strip()
    )


def is_tracked(
    identity: AssetIdentity,
    tracked_files: frozenset[str] | set[str],
    *,
    home_relpath: str | None = None,
) -> bool:
    """Return True when git tracks the home copy of *identity*.

    A prompt is tracked when its file is; a skill is tracked when any file
    beneath its directory is. *home_relpath* overrides the canonical location
    when the home copy is spelled differently on disk.
    """
    relpath = home_relpath or identity.home_relpath
    if identity.kind is AssetKind.PROMPT:
        return relpath in tracked_files
    prefix = relpath.rstrip("/") + "/"
    return any(path.startswith(prefix) for path in tracked_files)
