"""JSON serialization helpers with atomic persistence."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path


def dump_json(payload: object) -> str:
    """Serialize *payload* deterministically for stdout and report files."""
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Write ``dump_json(payload)`` to *path* so readers never see a partial report.

    The payload is serialized before anything touches the disk; the text then
    goes to a sibling temp file that replaces *path* in one rename.
    """
    text = dump_json(payload)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(temp_path, path)
    except OSError:
        with suppress(FileNotFoundError):
            temp_path.unlink()
        raise
