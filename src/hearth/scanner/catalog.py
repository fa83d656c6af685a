"""Listing of assets already held in the home store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from hearth.constants.discovery import HOME_PROMPTS_DIRNAME, HOME_SKILLS_DIRNAME, PROMPT_EXTENSION
from hearth.model import AssetIdentity, AssetKind
from hearth.scanner.walker import EntryKind, has_skill_manifest, walk_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HomeCatalog:
    """Home asset ids mapped to their on-disk locations."""

    home: Path
    prompts: dict[str, Path] = field(default_factory=dict)
    skills: dict[str, Path] = field(default_factory=dict)

    def contains(self, identity: AssetIdentity) -> bool:
        return identity.id in self._bucket(identity.kind)

    def path_for(self, identity: AssetIdentity) -> Path:
        """Return the existing home path, or the canonical one when absent."""
        return self._bucket(identity.kind).get(identity.id, identity.home_path(self.home))

    def _bucket(self, kind: AssetKind) -> dict[str, Path]:
        return self.prompts if kind is AssetKind.PROMPT else self.skills


def read_home_catalog(home: Path) -> HomeCatalog:
    """List home prompts and skills by normalized id."""
    return HomeCatalog(
        home=home,
        prompts=list_prompt_paths(home / HOME_PROMPTS_DIRNAME),
        skills=list_skill_paths(home / HOME_SKILLS_DIRNAME),
    )


def list_prompt_paths(prompts_dir: Path) -> dict[str, Path]:
    found: dict[str, Path] = {}
    if not prompts_dir.is_dir():
        return found
    for path, kind in walk_tree(prompts_dir):
        if kind is not EntryKind.FILE or not path.name.lower().endswith(PROMPT_EXTENSION):
            continue
        identity = AssetIdentity.of(AssetKind.PROMPT, path.relative_to(prompts_dir).as_posix())
        _record(found, identity, path)
    return found


def list_skill_paths(skills_dir: Path) -> dict[str, Path]:
    found: dict[str, Path] = {}
    if not skills_dir.is_dir():
        return found
    for path, kind in walk_tree(skills_dir):
        if kind is not EntryKind.DIRECTORY or not has_skill_manifest(path):
            continue
        identity = AssetIdentity.of(AssetKind.SKILL, path.relative_to(skills_dir).as_posix())
        _record(found, identity, path)
    return found


def ensure_home_structure(home: Path) -> Path:
    """Create the home store's ``prompts`` and ``skills`` directories if missing."""
    (home / HOME_PROMPTS_DIRNAME).mkdir(parents=True, exist_ok=True)
    (home / HOME_SKILLS_DIRNAME).mkdir(parents=True, exist_ok=True)
    return home


def _record(found: dict[str, Path], identity: AssetIdentity, path: Path) -> None:
    if not identity.id:
        return
    existing = found.get(identity.id)
    if existing is not None:
        # Two spellings normalize to the same id; the first one walked wins.
        logger.warning("Home %s id '%s' is ambiguous: %s and %s", identity.kind, identity.id, existing, path)
        return
    found[identity.id] = path
