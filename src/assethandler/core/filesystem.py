"""Filesystem capability used for base path validation and versioning."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Filesystem(Protocol):
    """Protocol for the filesystem queries the registry performs."""

    def is_directory(self, path: str) -> bool:
        """Return True if ``path`` is an existing directory."""

    def exists(self, path: str) -> bool:
        """Return True if ``path`` exists."""

    def modification_time(self, path: str) -> int:
        """Return the modification time of ``path`` in whole seconds."""


class LocalFilesystem(Filesystem):
    """Filesystem backed by the local disk.

    I/O errors are reported as "does not exist" rather than raised. An empty path
    never exists; it is not taken to mean the working directory.
    """

    def is_directory(self, path: str) -> bool:
        if not path:
            return False
        try:
            return Path(path).is_dir()
        except OSError:
            return False

    def exists(self, path: str) -> bool:
        if not path:
            return False
        try:
            return Path(path).exists()
        except OSError:
            return False

    def modification_time(self, path: str) -> int:
        return int(Path(path).stat().st_mtime)
