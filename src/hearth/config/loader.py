"""Config loading and source resolution for Hearth."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from hearth.config.model import HearthConfig, ScanSource
from hearth.constants.config import (
    ALLOWED_AGENT_KEYS,
    ALLOWED_CONFIG_KEYS,
    CONFIG_DIRNAME,
    CONFIG_FILENAME,
    DEFAULT_AGENTS_DIRNAME,
    DEFAULT_CLAUDE_DIRNAME,
    DEFAULT_CODEX_DIRNAME,
    DEFAULT_HOME_DIRNAME,
    ENV_CLAUDE_CONFIG_DIR,
    ENV_CODEX_HOME,
    ENV_HOME,
    ENV_XDG_CONFIG_HOME,
    HOME_FALLBACK_CANDIDATES,
    SOURCE_LABEL_AGENTS,
    SOURCE_LABEL_CLAUDE,
    SOURCE_LABEL_CODEX,
    SOURCE_LABEL_CUSTOM,
    SOURCE_LABEL_PROJECT,
)
from hearth.exceptions import ConfigError

logger = logging.getLogger(__name__)


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the per-user config file location, honoring ``XDG_CONFIG_HOME``."""
    env = os.environ if env is None else env
    xdg = env.get(ENV_XDG_CONFIG_HOME, "").strip()
    base = expand_user_path(xdg) if xdg else Path.home() / ".config"
    return base / CONFIG_DIRNAME / CONFIG_FILENAME


def load_config_file(config_path: Path | None = None, env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Read and validate the raw YAML config mapping.

    A missing default config file yields an empty mapping; a missing
    explicit file is an error.
    """
    path = config_path.expanduser().resolve() if config_path else default_config_path(env)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(set(raw) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(map(str, unknown))}")

    home = raw.get("home")
    if home is not None and not isinstance(home, str):
        raise ConfigError("home must be a string path")

    agents = raw.get("agents", {})
    if agents is None:
        agents = {}
    if not isinstance(agents, dict):
        raise ConfigError("agents must be a mapping")
    unknown_agents = sorted(set(agents) - ALLOWED_AGENT_KEYS)
    if unknown_agents:
        raise ConfigError(f"Unknown agents key(s): {', '.join(map(str, unknown_agents))}")
    for key, value in agents.items():
        if not isinstance(value, str):
            raise ConfigError(f"agents.{key} must be a string path")

    raw["agents"] = agents
    raw["custom_sources"] = _ensure_string_list(raw.get("custom_sources", []), "custom_sources")
    return raw


def load_config(
    config_path: Path | None = None,
    *,
    home: Path | str | None = None,
    extra_sources: Iterable[Path | str] = (),
    project_root: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> HearthConfig:
    """Resolve the home store and scan sources once for a command.

    Precedence for the home store is: explicit argument, ``HEARTH_HOME``,
    the config file, then the first existing fallback under the user's home.
    ``project_root`` is appended as a convention source when given.
    """
    env = os.environ if env is None else env
    raw = load_config_file(config_path, env)
    agents: dict[str, str] = raw.get("agents", {})

    resolved_home = resolve_home(home, raw.get("home"), env)
    codex_root = _resolve_tool_root(agents.get("codex"), env.get(ENV_CODEX_HOME), DEFAULT_CODEX_DIRNAME)
    claude_root = _resolve_tool_root(agents.get("claude"), env.get(ENV_CLAUDE_CONFIG_DIR), DEFAULT_CLAUDE_DIRNAME)
    agents_root = _resolve_tool_root(agents.get("agents"), None, DEFAULT_AGENTS_DIRNAME)
    custom_sources = tuple(expand_user_path(item) for item in raw.get("custom_sources", []))

    sources: list[ScanSource] = [
        ScanSource(label=SOURCE_LABEL_CODEX, root=codex_root),
        ScanSource(label=SOURCE_LABEL_CLAUDE, root=claude_root),
        ScanSource(label=SOURCE_LABEL_AGENTS, root=agents_root),
    ]
    sources.extend(ScanSource(label=SOURCE_LABEL_CUSTOM, root=root, explicit=True) for root in custom_sources)
    sources.extend(
        ScanSource(label=SOURCE_LABEL_CUSTOM, root=expand_user_path(str(item)), explicit=True)
        for item in extra_sources
    )
    if project_root is not None:
        sources.append(ScanSource(label=SOURCE_LABEL_PROJECT, root=project_root.resolve()))

    return HearthConfig(
        home=resolved_home,
        sources=dedupe_sources(sources),
        codex_root=codex_root,
        claude_root=claude_root,
        agents_root=agents_root,
        custom_sources=custom_sources,
        config_path=config_path,
    )


def resolve_home(
    explicit: Path | str | None,
    configured: str | None,
    env: Mapping[str, str],
) -> Path:
    """Pick the home store directory according to precedence rules."""
    if explicit:
        return expand_user_path(str(explicit))

    env_home = env.get(ENV_HOME, "").strip()
    if env_home:
        return expand_user_path(env_home)

    if configured:
        return expand_user_path(configured)

    user_home = Path.home()
    for candidate in HOME_FALLBACK_CANDIDATES:
        path = user_home / candidate
        if path.exists():
            logger.debug("Using existing home store candidate %s", path)
            return path
    return user_home / DEFAULT_HOME_DIRNAME


def dedupe_sources(sources: Iterable[ScanSource]) -> tuple[ScanSource, ...]:
    """Drop sources whose resolved root was already seen; the first label wins."""
    seen: set[Path] = set()
    deduped: list[ScanSource] = []
    for source in sources:
        root = source.root.resolve()
        if root in seen:
            continue
        seen.add(root)
        deduped.append(ScanSource(label=source.label, root=root, explicit=source.explicit))
    return tuple(deduped)


def expand_user_path(value: str) -> Path:
    """Expand a leading ``~`` and return an absolute path."""
    return Path(value.strip()).expanduser().resolve()


def _resolve_tool_root(configured: str | None, env_value: str | None, default_dirname: str) -> Path:
    if configured:
        return expand_user_path(configured)
    if env_value and env_value.strip():
        return expand_user_path(env_value)
    return Path.home() / default_dirname


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item for item in value if item.strip()]
