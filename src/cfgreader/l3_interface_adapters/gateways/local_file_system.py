"""Gateway: local file system — implements FileSystem port."""

from __future__ import annotations

import stat as stat_mod
from pathlib import Path

from cfgreader.l1_entities.file_info import FileInfo


class LocalFileSystem:
    """Read-only access to the local disk through pathlib."""

    def stat(self, path: Path) -> FileInfo:
        st = path.stat()
        return FileInfo(
            name=path.name,
            size=st.st_size,
            is_dir=stat_mod.S_ISDIR(st.st_mode),
            is_symlink=path.is_symlink(),
        )

    def list_dir(self, path: Path) -> list[Path]:
        return sorted(path.iterdir(), key=lambda p: p.name)

    def read_bytes(self, path: Path) -> bytes:
        with path.open('rb') as f:
            return f.read()
