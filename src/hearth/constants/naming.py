"""Constants for asset id normalization."""

from __future__ import annotations

import re
from re import Pattern

NON_ID_CHAR_PATTERN: Pattern[str] = re.compile(r"[^a-z0-9._/]+")
COLLAPSE_SLASH_PATTERN: Pattern[str] = re.compile(r"/{2,}")
COLLAPSE_DASH_PATTERN: Pattern[str] = re.compile(r"-{2,}")
MARKDOWN_SUFFIX_PATTERN: Pattern[str] = re.compile(r"\.md$", re.IGNORECASE)
EDGE_TRIM_CHARS: str = "-/."
TRAVERSAL_SEGMENTS: frozenset[str] = frozenset({"", ".", ".."})
