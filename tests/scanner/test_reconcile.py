"""Tests for conflict classification and diff construction."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from hearth.constants.reconcile import RECOMMEND_AMBIGUOUS_MULTI_SOURCE
from hearth.exceptions import FingerprintError
from hearth.model import (
    AmbiguousMultiSource,
    AssetIdentity,
    AssetKind,
    ContentDrift,
    DiscoveredAsset,
    HomeModifiedUntracked,
    HomeUntracked,
    NoConflict,
)
from hearth.scanner.fingerprint import fingerprint_asset
from hearth.scanner.reconcile import build_conflicts, classify, group_by_identity, prompt_line_diff

RELEASE = AssetIdentity(AssetKind.PROMPT, "release")
DEPLOY = AssetIdentity(AssetKind.SKILL, "deploy")


def _asset(identity: AssetIdentity, source: str, path: Path) -> DiscoveredAsset:
    return DiscoveredAsset(identity=identity, source=source, path=path)


@pytest.mark.parametrize(
    ("sources", "home_digest", "tracked", "expected"),
    [
        (["a", "b"], None, False, AmbiguousMultiSource(variants=2)),
        (["a", "b"], "a", True, AmbiguousMultiSource(variants=2)),
        (["a", "b", "c"], "a", False, AmbiguousMultiSource(variants=3)),
        (["a"], "b", True, ContentDrift()),
        (["a"], "b", False, HomeModifiedUntracked()),
        (["a"], "a", False, HomeUntracked()),
        (["a", "a"], "a", False, HomeUntracked()),
        (["a"], "a", True, NoConflict()),
        (["a"], None, False, NoConflict()),
        ([], "a", True, NoConflict()),
        ([], "a", False, HomeUntracked()),
    ],
)
def test_classify_precedence(sources: list[str], home_digest: str | None, tracked: bool, expected: object) -> None:
    assert classify(sources, home_digest, tracked) == expected


def test_classify_is_deterministic() -> None:
    assert classify(["b", "a"], "c", True) == classify(["a", "b"], "c", True)


def test_release_drift_against_tracked_home(home: Path, tmp_path: Path, write_prompt) -> None:
    write_prompt(home, "prompts/release.md", "---\ndescription: home\n---\n")
    source = write_prompt(tmp_path / "source", "prompts/release.md", "---\ndescription: source\n---\n")

    conflicts, errors = build_conflicts(
        home,
        [_asset(RELEASE, "custom", source)],
        {"prompts/release.md"},
        include_diff_full=True,
    )

    assert errors == []
    assert len(conflicts) == 1
    conflict = conflicts[0]
    assert conflict.identity == RELEASE
    assert conflict.state == "content-drift"
    assert conflict.diff is not None
    assert conflict.diff.summary == "home(3 lines) != source(3 lines)"
    assert conflict.diff.preview == (
        "line 2 home:   description: home",
        "line 2 source: description: source",
    )


def test_drift_against_untracked_home(home: Path, tmp_path: Path, write_prompt) -> None:
    write_prompt(home, "prompts/release.md", "home\n")
    source = write_prompt(tmp_path / "source", "prompts/release.md", "source\n")

    conflicts, _ = build_conflicts(home, [_asset(RELEASE, "custom", source)], set(), include_diff=True)

    assert conflicts[0].state == "home-modified-untracked"
    assert conflicts[0].diff is not None
    assert conflicts[0].diff.preview is None


def test_two_disagreeing_sources_are_ambiguous_without_home(home: Path, tmp_path: Path, write_prompt) -> None:
    source_a = write_prompt(tmp_path / "source-a", "prompts/release.md", "---\ndescription: a\n---\n")
    source_b = write_prompt(tmp_path / "source-b", "prompts/release.md", "---\ndescription: b\n---\n")

    conflicts, _ = build_conflicts(
        home,
        [_asset(RELEASE, "b", source_b), _asset(RELEASE, "a", source_a)],
        set(),
        include_diff=True,
    )

    assert len(conflicts) == 1
    assert conflicts[0].state == "ambiguous-multi-source"
    assert conflicts[0].recommendation == RECOMMEND_AMBIGUOUS_MULTI_SOURCE
    assert "--select" in conflicts[0].recommendation
    assert conflicts[0].sources == ("a", "b")
    assert conflicts[0].diff is not None
    assert conflicts[0].diff.summary == "Found 2 distinct source variants."


def test_ambiguity_dominates_matching_tracked_home(home: Path, tmp_path: Path, write_prompt) -> None:
    write_prompt(home, "prompts/release.md", "a\n")
    source_a = write_prompt(tmp_path / "a", "prompts/release.md", "a\n")
    source_b = write_prompt(tmp_path / "b", "prompts/release.md", "b\n")

    conflicts, _ = build_conflicts(
        home,
        [_asset(RELEASE, "a", source_a), _asset(RELEASE, "b", source_b)],
        {"prompts/release.md"},
        include_diff_full=True,
    )

    assert conflicts[0].state == "ambiguous-multi-source"
    assert conflicts[0].diff is not None
    assert conflicts[0].diff.preview == (
        f"source a: {source_a.as_posix()}",
        "  1 lines",
        f"source b: {source_b.as_posix()}",
        "  1 lines",
    )


def test_agreeing_sources_match_tracked_home(home: Path, tmp_path: Path, write_prompt) -> None:
    write_prompt(home, "prompts/release.md", "same\n")
    source_a = write_prompt(tmp_path / "a", "prompts/release.md", "same\n")
    source_b = write_prompt(tmp_path / "b", "prompts/release.md", "same\n")

    conflicts, _ = build_conflicts(
        home,
        [_asset(RELEASE, "a", source_a), _asset(RELEASE, "b", source_b)],
        {"prompts/release.md"},
        include_diff=True,
    )

    assert conflicts[0].state == "no-conflict"
    assert conflicts[0].diff is None


def test_single_source_without_home_has_no_conflict(home: Path, tmp_path: Path, write_prompt) -> None:
    source = write_prompt(tmp_path / "a", "prompts/release.md", "new\n")

    conflicts, _ = build_conflicts(home, [_asset(RELEASE, "a", source)], set())

    assert conflicts[0].state == "no-conflict"
    assert conflicts[0].reason == "No detected conflict for this asset id."


def test_matching_untracked_home_is_hygiene_warning(home: Path, tmp_path: Path, write_skill) -> None:
    write_skill(home, "skills/deploy", {"run.sh": "echo\n"})
    source = write_skill(tmp_path / "a", "skills/deploy", {"run.sh": "echo\n"})

    conflicts, _ = build_conflicts(home, [_asset(DEPLOY, "a", source)], set())

    assert conflicts[0].state == "home-untracked"


def test_skill_drift_lists_files(home: Path, tmp_path: Path, write_skill) -> None:
    write_skill(home, "skills/deploy", {"run.sh": "echo\n"})
    source = write_skill(tmp_path / "a", "skills/deploy", {"run.sh": "echo\n", "extra.md": "more\n"})

    conflicts, _ = build_conflicts(
        home,
        [_asset(DEPLOY, "a", source)],
        {"skills/deploy/SKILL.md"},
        include_diff_full=True,
    )

    conflict = conflicts[0]
    assert conflict.state == "content-drift"
    assert conflict.diff is not None
    assert conflict.diff.summary == "home(2 file(s)) != source(3 file(s))"
    assert conflict.diff.preview == (
        "home files:",
        "  SKILL.md",
        "  run.sh",
        "source files:",
        "  SKILL.md",
        "  extra.md",
        "  run.sh",
    )


def test_diff_is_dropped_unless_requested(home: Path, tmp_path: Path, write_prompt) -> None:
    write_prompt(home, "prompts/release.md", "home\n")
    source = write_prompt(tmp_path / "a", "prompts/release.md", "source\n")

    conflicts, _ = build_conflicts(home, [_asset(RELEASE, "a", source)], {"prompts/release.md"})

    assert conflicts[0].state == "content-drift"
    assert conflicts[0].diff is None


def test_prompt_line_diff_is_capped() -> None:
    home_lines = tuple(f"home {index}" for index in range(10))
    source_lines = tuple(f"source {index}" for index in range(10))

    preview = prompt_line_diff(home_lines, source_lines)

    assert len(preview) == 8
    assert preview[0] == "line 1 home:   home 0"
    assert preview[-1] == "line 4 source: source 3"


def test_prompt_line_diff_pads_shorter_side() -> None:
    assert prompt_line_diff(("a",), ("a", "b")) == ("line 2 home:   ", "line 2 source: b")


def test_unreadable_asset_becomes_per_identity_error(home: Path, tmp_path: Path, write_prompt, write_skill) -> None:
    good = write_prompt(tmp_path / "a", "prompts/release.md", "fine\n")
    bad = write_skill(tmp_path / "a", "skills/deploy")

    def _flaky(kind, path, *, include_preview=False):
        if path == bad:
            raise FingerprintError(path, "permission denied")
        return fingerprint_asset(kind, path, include_preview=include_preview)

    with patch("hearth.scanner.reconcile.fingerprint_asset", side_effect=_flaky):
        conflicts, errors = build_conflicts(
            home,
            [_asset(RELEASE, "a", good), _asset(DEPLOY, "a", bad)],
            set(),
        )

    assert [conflict.identity for conflict in conflicts] == [RELEASE]
    assert len(errors) == 1
    assert errors[0].identity == DEPLOY
    assert "permission denied" in errors[0].message


def test_concurrent_classification_matches_sequential(home: Path, tmp_path: Path, write_prompt) -> None:
    assets = [
        _asset(AssetIdentity(AssetKind.PROMPT, f"p{index}"), "a", write_prompt(tmp_path, f"a/p{index}.md", str(index)))
        for index in range(6)
    ]
    write_prompt(home, "prompts/p3.md", "different")

    sequential = build_conflicts(home, assets, set(), include_diff=True)
    concurrent = build_conflicts(home, list(reversed(assets)), set(), include_diff=True, max_workers=4)

    assert sequential == concurrent
    assert [conflict.state for conflict in sequential[0]].count("home-modified-untracked") == 1


def test_group_by_identity_sorts_keys_and_members(tmp_path: Path) -> None:
    grouped = group_by_identity(
        [
            _asset(DEPLOY, "b", tmp_path / "b"),
            _asset(RELEASE, "z", tmp_path / "z"),
            _asset(RELEASE, "a", tmp_path / "a"),
        ]
    )

    assert list(grouped) == [RELEASE, DEPLOY]
    assert [asset.source for asset in grouped[RELEASE]] == ["a", "z"]
