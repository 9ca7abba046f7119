"""L1 entity: file metadata snapshot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileInfo:
    name: str
    size: int = 0
    is_dir: bool = False
    is_symlink: bool = False
