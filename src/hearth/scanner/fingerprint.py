"""Content fingerprints for prompt files and skill directories."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

from hearth.constants.fingerprint import PREVIEW_LINE_LIMIT
from hearth.exceptions import FingerprintError
from hearth.io import update_digest_from_file
from hearth.model import AssetKind, Fingerprint


def fingerprint_asset(kind: AssetKind, path: Path, *, include_preview: bool = False) -> Fingerprint:
    """Compute the content fingerprint of one asset.

    Raises ``FingerprintError`` when any part of the asset cannot be read;
    a partial fingerprint is never returned.
    """
    if kind is AssetKind.PROMPT:
        return fingerprint_prompt(path, include_preview=include_preview)
    return fingerprint_skill(path, include_preview=include_preview)


def fingerprint_prompt(path: Path, *, include_preview: bool = False) -> Fingerprint:
    """Hash the raw bytes of a prompt file."""
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise FingerprintError(path, str(exc)) from exc

    lines = content.decode("utf-8", errors="replace").splitlines()
    return Fingerprint(
        digest=hashlib.sha256(content).hexdigest(),
        description=f"{len(lines)} lines",
        preview=tuple(lines[:PREVIEW_LINE_LIMIT]) if include_preview else None,
    )


def fingerprint_skill(path: Path, *, include_preview: bool = False) -> Fingerprint:
    """Hash every regular file of a skill directory as one ordered stream.

    Each file contributes ``relpath + "\\n" + bytes + "\\n"`` in forward-slash
    relative path order, so traversal order and platform separators never
    change the digest.
    """
    files = list_skill_files(path)
    digest = hashlib.sha256()
    for relative, file_path in files:
        digest.update(relative.encode("utf-8"))
        digest.update(b"\n")
        try:
            update_digest_from_file(digest, file_path)
        except OSError as exc:
            raise FingerprintError(file_path, str(exc)) from exc
        digest.update(b"\n")

    return Fingerprint(
        digest=digest.hexdigest(),
        description=f"{len(files)} file(s)",
        preview=tuple(relative for relative, _ in files[:PREVIEW_LINE_LIMIT]) if include_preview else None,
    )


def list_skill_files(root: Path) -> list[tuple[str, Path]]:
    """Return ``(posix relpath, path)`` for every regular file under *root*, sorted by relpath."""
    if not root.is_dir():
        raise FingerprintError(root, "not a directory")

    def _raise(exc: OSError) -> None:
        raise FingerprintError(Path(exc.filename or root), str(exc)) from exc

    files: list[tuple[str, Path]] = []
    for directory, _dirnames, filenames in os.walk(root, onerror=_raise):
        base = Path(directory)
        for name in filenames:
            file_path = base / name
            if not file_path.is_file():
                continue
            files.append((file_path.relative_to(root).as_posix(), file_path))
    files.sort(key=lambda item: item[0])
    return files
