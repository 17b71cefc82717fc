"""File storage backend with temp-file-then-rename writes.

A crash during ``write_all`` leaves either the previous blob or the new one
on disk, never a partial write.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from bland import __init__conf__
from bland.domain.errors import BackendIOError

if TYPE_CHECKING:
    from bland.adapters.config.settings import StoreSettings

logger = logging.getLogger(__name__)

#: File name used inside the per-user configuration directory.
DEFAULT_STORE_FILENAME = "store.bin"


def _user_config_dir() -> Path:
    """Return the platform's per-user configuration directory."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


def default_store_path() -> Path:
    """Return ``<user config dir>/<slug>/store.bin``.

    Example:
        >>> default_store_path().name
        'store.bin'
    """
    return _user_config_dir() / __init__conf__.LAYEREDCONF_SLUG / DEFAULT_STORE_FILENAME


class FileBackend:
    """Persist the blob as a single file.

    Args:
        path: Target file. Parent directories are created on first write.

    Example:
        >>> import tempfile, pathlib
        >>> backend = FileBackend(pathlib.Path(tempfile.mkdtemp()) / "store.bin")
        >>> backend.read_all()
        b''
        >>> backend.write_all(b"data")
        >>> backend.read_all()
        b'data'
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"FileBackend({str(self._path)!r})"

    def exists(self) -> bool:
        """Return True when the store file is present."""
        return self._path.is_file()

    def read_all(self) -> bytes:
        """Return the file contents, or ``b""`` when the file does not exist.

        Raises:
            BackendIOError: The file exists but cannot be read.
        """
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            return b""
        except OSError as exc:
            raise BackendIOError(f"Cannot read store file {self._path}: {exc}") from exc

    def write_all(self, data: bytes) -> None:
        """Write ``data`` to a sibling temp file and atomically replace the target.

        Raises:
            BackendIOError: Directory creation, write, flush or rename failed.
        """
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent)
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as exc:
            raise BackendIOError(f"Cannot write store file {self._path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_name)
        logger.debug("Wrote store file", extra={"path": str(self._path), "bytes": len(data)})

    def delete(self) -> bool:
        """Remove the store file.

        Returns:
            True when a file was removed, False when none existed.

        Raises:
            BackendIOError: The file exists but cannot be removed.
        """
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise BackendIOError(f"Cannot delete store file {self._path}: {exc}") from exc
        logger.info("Deleted store file", extra={"path": str(self._path)})
        return True


def open_file_backend(settings: StoreSettings) -> FileBackend:
    """Open the file backend for validated store settings.

    An unset ``path`` falls back to :func:`default_store_path`.
    """
    return FileBackend(settings.path if settings.path is not None else default_store_path())


__all__ = [
    "DEFAULT_STORE_FILENAME",
    "FileBackend",
    "default_store_path",
    "open_file_backend",
]
