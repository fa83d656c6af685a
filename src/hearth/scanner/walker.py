"""Source root discovery of prompt and skill candidates."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from enum import StrEnum
from pathlib import Path

from hearth.config import ScanSource
from hearth.constants.discovery import (
    PROMPT_EXTENSION,
    PROMPT_SOURCE_DIRS,
    SKILL_MANIFEST_FILENAME,
    SKILL_SOURCE_DIRS,
    SKIP_DIRS,
)
from hearth.model import AssetIdentity, AssetKind, DiscoveredAsset

logger = logging.getLogger(__name__)


class EntryKind(StrEnum):
    """Filesystem entry kinds reported by ``walk_tree``."""

    FILE = "file"
    DIRECTORY = "directory"


def walk_tree(root: Path, skip_dirs: frozenset[str] = SKIP_DIRS) -> Iterator[tuple[Path, EntryKind]]:
    """Yield ``(path, kind)`` pairs under *root* breadth-first.

    Directories named in *skip_dirs* are neither yielded nor descended into.
    Unreadable directories are skipped. Symlinked directories are yielded but
    not followed, so cycles cannot occur. Calling again restarts the walk.
    """
    queue: deque[Path] = deque([root])
    while queue:
        current = queue.popleft()
        try:
            entries = sorted(current.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", current, exc)
            continue

        for entry in entries:
            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
            except OSError:
                continue
            if is_dir:
                if entry.name in skip_dirs:
                    continue
                yield entry, EntryKind.DIRECTORY
                if not entry.is_symlink():
                    queue.append(entry)
            elif is_file:
                yield entry, EntryKind.FILE


def resolve_candidate_roots(root: Path, subdirs: Iterable[str], *, explicit: bool) -> list[Path]:
    """Return existing conventional roots under *root*, deduplicated in probe order."""
    candidates = [root] if explicit else []
    candidates.extend(root.joinpath(*subdir.split("/")) for subdir in subdirs)

    resolved: list[Path] = []
    for candidate in candidates:
        try:
            if not candidate.is_dir():
                continue
            path = candidate.resolve()
        except OSError as exc:
            logger.debug("Ignoring candidate root %s: %s", candidate, exc)
            continue
        if path not in resolved:
            resolved.append(path)
    return resolved


def discover_prompts(source: ScanSource) -> list[DiscoveredAsset]:
    """Find markdown prompt files under a source's prompt roots."""
    prompts: list[DiscoveredAsset] = []
    for root in resolve_candidate_roots(source.root, PROMPT_SOURCE_DIRS, explicit=source.explicit):
        for path, kind in walk_tree(root):
            if kind is not EntryKind.FILE or not path.name.lower().endswith(PROMPT_EXTENSION):
                continue
            relative = path.relative_to(root).as_posix()
            identity = AssetIdentity.of(AssetKind.PROMPT, relative[: -len(PROMPT_EXTENSION)])
            if not identity.id:
                continue
            prompts.append(DiscoveredAsset(identity=identity, source=source.label, path=path))
    return prompts


def discover_skills(source: ScanSource) -> list[DiscoveredAsset]:
    """Find skill directories (those directly holding a manifest) under a source's skill roots."""
    skills: list[DiscoveredAsset] = []
    for root in resolve_candidate_roots(source.root, SKILL_SOURCE_DIRS, explicit=source.explicit):
        for path, kind in walk_tree(root):
            if kind is not EntryKind.DIRECTORY or not has_skill_manifest(path):
                continue
            identity = AssetIdentity.of(AssetKind.SKILL, path.relative_to(root).as_posix())
            if not identity.id:
                continue
            skills.append(DiscoveredAsset(identity=identity, source=source.label, path=path))
    return skills


def discover(source: ScanSource) -> list[DiscoveredAsset]:
    """Discover every prompt and skill a source provides.

    Sources are best-effort: a missing root yields an empty list.
    """
    if not source.root.is_dir():
        logger.debug("Source %s root does not exist: %s", source.label, source.root)
        return []
    return unique_assets([*discover_prompts(source), *discover_skills(source)])


def has_skill_manifest(directory: Path) -> bool:
    """Return True when *directory* directly contains a manifest file (any case)."""
    expected = SKILL_MANIFEST_FILENAME.lower()
    try:
        return any(entry.name.lower() == expected and entry.is_file() for entry in directory.iterdir())
    except OSError:
        return False


def unique_assets(assets: Iterable[DiscoveredAsset]) -> list[DiscoveredAsset]:
    """Drop repeated ``(kind, id, path)`` entries, keeping first occurrence order."""
    seen: set[tuple[AssetKind, str, Path]] = set()
    output: list[DiscoveredAsset] = []
    for asset in assets:
        key = (asset.kind, asset.id, asset.path)
        if key in seen:
            continue
        seen.add(key)
        output.append(asset)
    return output
