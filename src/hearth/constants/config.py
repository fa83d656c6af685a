"""Configuration defaults, file names and environment variables."""

from __future__ import annotations

CONFIG_DIRNAME: str = "hearth"
CONFIG_FILENAME: str = "config.yaml"

ENV_HOME: str = "HEARTH_HOME"
ENV_XDG_CONFIG_HOME: str = "XDG_CONFIG_HOME"
ENV_CODEX_HOME: str = "CODEX_HOME"
ENV_CLAUDE_CONFIG_DIR: str = "CLAUDE_CONFIG_DIR"

DEFAULT_HOME_DIRNAME: str = "hearth"
# Home directories probed (relative to the user's home) when nothing is configured.
HOME_FALLBACK_CANDIDATES: tuple[str, ...] = ("hearth", "dotagents")

DEFAULT_CODEX_DIRNAME: str = ".codex"
DEFAULT_CLAUDE_DIRNAME: str = ".claude"
DEFAULT_AGENTS_DIRNAME: str = ".agents"

SOURCE_LABEL_CODEX: str = "codex"
SOURCE_LABEL_CLAUDE: str = "claude"
SOURCE_LABEL_AGENTS: str = "agents"
SOURCE_LABEL_CUSTOM: str = "custom"
SOURCE_LABEL_PROJECT: str = "project"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"home", "agents", "custom_sources"})
ALLOWED_AGENT_KEYS: frozenset[str] = frozenset({"codex", "claude", "agents"})
