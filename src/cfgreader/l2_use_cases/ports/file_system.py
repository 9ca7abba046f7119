"""Port: read-only file system access."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from cfgreader.l1_entities.file_info import FileInfo


class FileSystem(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract file system. All methods raise ``OSError`` on failure."""

    def stat(self, path: Path) -> FileInfo:
        """Return metadata for *path* (symlinks followed)."""
        ...

    def list_dir(self, path: Path) -> list[Path]:
        """Return the immediate children of *path*, sorted by name."""
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Return the full content of the file at *path*."""
        ...
