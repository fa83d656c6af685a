"""Tests for config loading, home precedence and source resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from hearth.config import ScanSource, dedupe_sources, default_config_path, load_config, load_config_file
from hearth.exceptions import ConfigError


@pytest.fixture()
def user_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home()`` at an empty directory."""
    root = tmp_path / "user"
    root.mkdir()
    monkeypatch.setenv("HOME", str(root))
    return root


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_default_config_path_honors_xdg(tmp_path: Path) -> None:
    path = default_config_path({"XDG_CONFIG_HOME": str(tmp_path)})

    assert path == tmp_path.resolve() / "hearth" / "config.yaml"


def test_default_config_path_falls_back_to_dot_config(user_home: Path) -> None:
    assert default_config_path({}) == user_home / ".config" / "hearth" / "config.yaml"


def test_missing_default_config_is_empty(tmp_path: Path) -> None:
    assert load_config_file(None, {"XDG_CONFIG_HOME": str(tmp_path / "nowhere")}) == {}


def test_missing_explicit_config_is_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config_file(tmp_path / "missing.yaml", {})


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("home: [unclosed", "Invalid YAML"),
        ("- a\n- b\n", "must be a YAML mapping"),
        ("homes: /tmp\n", "Unknown config key"),
        ("home: 3\n", "home must be a string"),
        ("agents: [codex]\n", "agents must be a mapping"),
        ("agents:\n  cursor: /tmp\n", "Unknown agents key"),
        ("agents:\n  codex: 1\n", "agents.codex must be a string"),
        ("custom_sources: /tmp\n", "custom_sources must be a list of strings"),
    ],
)
def test_invalid_config_files_are_rejected(tmp_path: Path, text: str, message: str) -> None:
    path = _write_config(tmp_path, text)

    with pytest.raises(ConfigError, match=message):
        load_config_file(path, {})


def test_empty_config_file_is_valid(tmp_path: Path) -> None:
    raw = load_config_file(_write_config(tmp_path, ""), {})

    assert raw == {"agents": {}, "custom_sources": []}


def test_home_precedence(tmp_path: Path, user_home: Path) -> None:
    config_path = _write_config(tmp_path, f"home: {tmp_path / 'from-file'}\n")
    env = {"HEARTH_HOME": str(tmp_path / "from-env")}

    assert load_config(config_path, home=tmp_path / "explicit", env=env).home == tmp_path / "explicit"
    assert load_config(config_path, env=env).home == tmp_path / "from-env"
    assert load_config(config_path, env={}).home == tmp_path / "from-file"


def test_home_falls_back_to_existing_candidate(tmp_path: Path, user_home: Path) -> None:
    env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}

    assert load_config(env=env).home == user_home / "hearth"

    (user_home / "dotagents").mkdir()
    assert load_config(env=env).home == user_home / "dotagents"


def test_source_order_and_labels(tmp_path: Path, user_home: Path) -> None:
    custom = tmp_path / "custom"
    extra = tmp_path / "extra"
    project = tmp_path / "project"
    config_path = _write_config(
        tmp_path,
        f"agents:\n  claude: {tmp_path / 'claude'}\ncustom_sources:\n  - {custom}\n",
    )

    config = load_config(
        config_path,
        home=tmp_path / "home",
        extra_sources=[extra],
        project_root=project,
        env={"CODEX_HOME": str(tmp_path / "codex")},
    )

    assert [(source.label, source.root, source.explicit) for source in config.sources] == [
        ("codex", tmp_path / "codex", False),
        ("claude", tmp_path / "claude", False),
        ("agents", user_home / ".agents", False),
        ("custom", custom, True),
        ("custom", extra, True),
        ("project", project, False),
    ]
    assert config.custom_sources == (custom,)


def test_env_overrides_default_tool_roots_but_not_config(tmp_path: Path, user_home: Path) -> None:
    config_path = _write_config(tmp_path, f"agents:\n  codex: {tmp_path / 'configured'}\n")
    env = {"CODEX_HOME": str(tmp_path / "env-codex"), "CLAUDE_CONFIG_DIR": str(tmp_path / "env-claude")}

    config = load_config(config_path, home=tmp_path / "home", env=env)

    assert config.codex_root == tmp_path / "configured"
    assert config.claude_root == tmp_path / "env-claude"


def test_duplicate_roots_keep_first_label(tmp_path: Path) -> None:
    root = tmp_path / "shared"
    sources = [
        ScanSource(label="claude", root=root),
        ScanSource(label="custom", root=tmp_path / "shared" / ".." / "shared", explicit=True),
        ScanSource(label="project", root=tmp_path / "other"),
    ]

    deduped = dedupe_sources(sources)

    assert [(source.label, source.root) for source in deduped] == [
        ("claude", root.resolve()),
        ("project", (tmp_path / "other").resolve()),
    ]


def test_project_root_equal_to_tool_root_is_deduplicated(tmp_path: Path, user_home: Path) -> None:
    config = load_config(home=tmp_path / "home", project_root=user_home / ".claude", env={})

    assert [source.label for source in config.sources] == ["codex", "claude", "agents"]
