"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

StatusState: TypeAlias = Literal["synced-tracked", "synced-untracked", "unsynced"]
