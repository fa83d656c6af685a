"""Shared pytest fixtures for building home stores and source trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

from hearth.config import HearthConfig, ScanSource

WritePrompt: TypeAlias = Callable[[Path, str, str], Path]
WriteSkill: TypeAlias = Callable[..., Path]


@pytest.fixture()
def write_prompt() -> WritePrompt:
    """Return a helper writing ``<root>/<relative>`` with text content."""

    def _write(root: Path, relative: str, content: str = "# Prompt\n") -> Path:
        path = root.joinpath(*relative.split("/"))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_skill() -> WriteSkill:
    """Return a helper creating a skill directory with a manifest and extra files."""

    def _write(
        root: Path,
        relative: str,
        files: dict[str, str] | None = None,
        *,
        manifest: str = "---\nname: skill\n---\n# Skill\n",
        manifest_name: str = "SKILL.md",
    ) -> Path:
        skill_dir = root.joinpath(*relative.split("/"))
        skill_dir.mkdir(parents=True, exist_ok=True)
        (skill_dir / manifest_name).write_text(manifest, encoding="utf-8")
        for name, content in (files or {}).items():
            file_path = skill_dir.joinpath(*name.split("/"))
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        return skill_dir

    return _write


@pytest.fixture()
def home(tmp_path: Path) -> Path:
    """Return an empty home store with ``prompts`` and ``skills`` directories."""
    root = tmp_path / "home"
    (root / "prompts").mkdir(parents=True)
    (root / "skills").mkdir(parents=True)
    return root


@pytest.fixture()
def make_config(home: Path) -> Callable[..., HearthConfig]:
    """Return a helper building a config over explicit ``(label, root)`` sources."""

    def _make(*sources: tuple[str, Path], explicit: bool = False) -> HearthConfig:
        return HearthConfig(
            home=home,
            sources=tuple(ScanSource(label=label, root=root, explicit=explicit) for label, root in sources),
        )

    return _make
