"""Asset fingerprinting, selection and import exceptions."""

from __future__ import annotations

from pathlib import Path

from hearth.exceptions.base import HearthError


class FingerprintError(HearthError, OSError):
    """Raised when an asset cannot be read completely for fingerprinting."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to fingerprint {path}: {reason}")
        self.path = path
        self.reason = reason


class AssetImportError(HearthError, OSError):
    """Raised when an asset cannot be copied into the home store."""


class AssetExistsError(AssetImportError, FileExistsError):
    """Raised when the import target exists and overwriting was not allowed."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"Target already exists: {target}. Use --force to overwrite.")
        self.target = target


class SelectorError(HearthError, ValueError):
    """Raised when an asset selector such as ``prompt:review@claude`` is malformed."""
