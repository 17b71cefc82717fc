"""Storage adapter - byte-level persistence of the store blob.

Contents:
    * :class:`.file.FileBackend` - single file with atomic replace
    * :func:`.file.default_store_path` - per-user default location
    * :func:`.file.open_file_backend` - OpenBackend port implementation
"""

from __future__ import annotations

from .file import FileBackend, default_store_path, open_file_backend

__all__ = [
    "FileBackend",
    "default_store_path",
    "open_file_backend",
]
