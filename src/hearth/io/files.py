"""File-level helpers for streaming digests and copying assets."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

from hearth.constants.fingerprint import FILE_HASH_CHUNK_SIZE


def update_digest_from_file(digest: Any, path: Path) -> None:
    """Stream the raw bytes of *path* into an existing hashlib digest."""
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)


def path_exists(path: Path) -> bool:
    """Return True for existing paths, including dangling symlinks."""
    return path.exists() or path.is_symlink()


def remove_path(path: Path) -> None:
    """Remove a file, symlink or directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def copy_asset(source: Path, target: Path) -> None:
    """Copy a single file or a whole directory tree to *target*."""
    target.parent.mkdir(parents=True, exist_ok=True)
    if source.is_dir():
        shutil.copytree(source, target)
    else:
        shutil.copy2(source, target)
