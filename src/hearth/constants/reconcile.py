"""Canned conflict explanations and diff limits."""

from __future__ import annotations

STATE_NO_CONFLICT: str = "no-conflict"
STATE_CONTENT_DRIFT: str = "content-drift"
STATE_HOME_MODIFIED_UNTRACKED: str = "home-modified-untracked"
STATE_HOME_UNTRACKED: str = "home-untracked"
STATE_AMBIGUOUS_MULTI_SOURCE: str = "ambiguous-multi-source"

REASON_NO_CONFLICT: str = "No detected conflict for this asset id."
REASON_CONTENT_DRIFT: str = "Home asset content differs from discovered source content."
REASON_HOME_MODIFIED_UNTRACKED: str = "Home asset differs from source and is not git-tracked."
REASON_HOME_UNTRACKED: str = "Home asset exists but is not git-tracked."
REASON_AMBIGUOUS_MULTI_SOURCE: str = "Multiple sources provide different content for the same asset id."

RECOMMEND_NO_CONFLICT: str = "No action required."
RECOMMEND_CONTENT_DRIFT: str = "Review drift with --diff-full before syncing."
RECOMMEND_HOME_MODIFIED_UNTRACKED: str = "Review and track home asset, then sync intentionally."
RECOMMEND_HOME_UNTRACKED: str = "Track the home asset in git to avoid accidental drift."
RECOMMEND_AMBIGUOUS_MULTI_SOURCE: str = (
    "Select one source explicitly with --select kind:id@source after reviewing --diff-full."
)

DIFF_PREVIEW_MAX_LINES: int = 8
