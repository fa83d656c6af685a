"""Conflict verdict variants, one frozen dataclass per reconciliation state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from hearth.constants.reconcile import (
    REASON_AMBIGUOUS_MULTI_SOURCE,
    REASON_CONTENT_DRIFT,
    REASON_HOME_MODIFIED_UNTRACKED,
    REASON_HOME_UNTRACKED,
    REASON_NO_CONFLICT,
    RECOMMEND_AMBIGUOUS_MULTI_SOURCE,
    RECOMMEND_CONTENT_DRIFT,
    RECOMMEND_HOME_MODIFIED_UNTRACKED,
    RECOMMEND_HOME_UNTRACKED,
    RECOMMEND_NO_CONFLICT,
    STATE_AMBIGUOUS_MULTI_SOURCE,
    STATE_CONTENT_DRIFT,
    STATE_HOME_MODIFIED_UNTRACKED,
    STATE_HOME_UNTRACKED,
    STATE_NO_CONFLICT,
)


@dataclass(frozen=True)
class NoConflict:
    """Sources agree with home, or nothing to compare against."""

    state: ClassVar[str] = STATE_NO_CONFLICT
    reason: ClassVar[str] = REASON_NO_CONFLICT
    recommendation: ClassVar[str] = RECOMMEND_NO_CONFLICT


@dataclass(frozen=True)
class ContentDrift:
    """Single source differs from a git-tracked home copy."""

    state: ClassVar[str] = STATE_CONTENT_DRIFT
    reason: ClassVar[str] = REASON_CONTENT_DRIFT
    recommendation: ClassVar[str] = RECOMMEND_CONTENT_DRIFT


@dataclass(frozen=True)
class HomeModifiedUntracked:
    """Single source differs from a home copy git does not know about."""

    state: ClassVar[str] = STATE_HOME_MODIFIED_UNTRACKED
    reason: ClassVar[str] = REASON_HOME_MODIFIED_UNTRACKED
    recommendation: ClassVar[str] = RECOMMEND_HOME_MODIFIED_UNTRACKED


@dataclass(frozen=True)
class HomeUntracked:
    """Home copy matches its source but is not tracked."""

    state: ClassVar[str] = STATE_HOME_UNTRACKED
    reason: ClassVar[str] = REASON_HOME_UNTRACKED
    recommendation: ClassVar[str] = RECOMMEND_HOME_UNTRACKED


@dataclass(frozen=True)
class AmbiguousMultiSource:
    """Two or more sources disagree; no merge decision is safe."""

    variants: int

    state: ClassVar[str] = STATE_AMBIGUOUS_MULTI_SOURCE
    reason: ClassVar[str] = REASON_AMBIGUOUS_MULTI_SOURCE
    recommendation: ClassVar[str] = RECOMMEND_AMBIGUOUS_MULTI_SOURCE


ConflictVerdict: TypeAlias = NoConflict | ContentDrift | HomeModifiedUntracked | HomeUntracked | AmbiguousMultiSource

# Drift verdicts compare exactly one source variant against the home copy.
DRIFT_VERDICTS: tuple[type, ...] = (ContentDrift, HomeModifiedUntracked)
