"""Constants for source discovery and home store layout."""

from __future__ import annotations

PROMPT_EXTENSION: str = ".md"
SKILL_MANIFEST_FILENAME: str = "SKILL.md"

HOME_PROMPTS_DIRNAME: str = "prompts"
HOME_SKILLS_DIRNAME: str = "skills"

# Relative sub-paths probed under every source root, in probe order.
PROMPT_SOURCE_DIRS: tuple[str, ...] = (
    "prompts",
    "commands",
    ".agents/prompts",
    ".claude/prompts",
    ".claude/commands",
    ".codex/prompts",
)
SKILL_SOURCE_DIRS: tuple[str, ...] = (
    "skills",
    ".agents/skills",
    ".claude/skills",
    ".codex/skills",
)

SKIP_DIRS: frozenset[str] = frozenset(
    {
        ".git",
        "node_modules",
        "dist",
        "build",
        ".next",
        ".turbo",
        "__pycache__",
        ".venv",
    }
)

DISCOVERY_MAX_WORKERS: int = 8
