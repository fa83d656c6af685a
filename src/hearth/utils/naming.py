"""String normalization helpers for asset ids."""

from __future__ import annotations

from hearth.constants.naming import (
    COLLAPSE_DASH_PATTERN,
    COLLAPSE_SLASH_PATTERN,
    EDGE_TRIM_CHARS,
    MARKDOWN_SUFFIX_PATTERN,
    NON_ID_CHAR_PATTERN,
    TRAVERSAL_SEGMENTS,
)


def normalize_asset_id(raw_id: str) -> str:
    """Normalize an asset id into a comparable slash-delimited slug.

    Case is folded, backslashes become forward slashes, runs of unsupported
    characters become a single dash, and empty, ``.`` and ``..`` segments are
    dropped so an id can never escape the home store.
    """
    normalized = raw_id.strip().replace("\\", "/").lower()
    normalized = MARKDOWN_SUFFIX_PATTERN.sub("", normalized)
    normalized = NON_ID_CHAR_PATTERN.sub("-", normalized)
    normalized = COLLAPSE_SLASH_PATTERN.sub("/", normalized)
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized)
    normalized = normalized.strip(EDGE_TRIM_CHARS)
    segments = [segment for segment in normalized.split("/") if segment not in TRAVERSAL_SEGMENTS]
    return "/".join(segments)


def to_posix(relative: str) -> str:
    """Return *relative* with platform separators replaced by forward slashes."""
    return relative.replace("\\", "/")
