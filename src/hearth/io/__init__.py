"""Shared file I/O helpers."""

from .files import copy_asset, path_exists, remove_path, update_digest_from_file
from .json_io import dump_json, write_json_atomic

__all__ = [
    "copy_asset",
    "dump_json",
    "path_exists",
    "remove_path",
    "update_digest_from_file",
    "write_json_atomic",
]
