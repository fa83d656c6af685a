"""Constants used by asset fingerprinting."""

from __future__ import annotations

FILE_HASH_CHUNK_SIZE: int = 65536
PREVIEW_LINE_LIMIT: int = 10
