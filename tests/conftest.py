"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import BaseModel, TypeAdapter

from cfgreader.l1_entities.file_info import FileInfo
from cfgreader.l2_use_cases.format_registry import FormatRegistry
from cfgreader.l2_use_cases.load_file_use_case import LoadFileUseCase
from cfgreader.l3_interface_adapters.gateways.builtin_formats import DEFAULT_FORMATS

# --- Target types ---


class ServiceConfig(BaseModel):
    name: str
    port: int = 8080


# --- Protocol-conforming Fakes ---


class FakeFileSystem:
    """In-memory file system for L2 use case tests — implements FileSystem protocol."""

    def __init__(self) -> None:
        self._files: dict[Path, bytes] = {}
        self._sizes: dict[Path, int] = {}
        self._dirs: set[Path] = set()
        self._symlinks: set[Path] = set()
        self.stat_errors: set[Path] = set()
        self.list_errors: set[Path] = set()
        self.read_errors: set[Path] = set()
        self.read_calls: list[Path] = []

    def add_dir(self, path: str | Path, *, symlink: bool = False) -> Path:
        p = Path(path)
        self._dirs.add(p)
        self._dirs.update(parent for parent in p.parents if parent != parent.parent)
        if symlink:
            self._symlinks.add(p)
        return p

    def add_file(self, path: str | Path, content: str | bytes = b'', *, size: int | None = None) -> Path:
        p = Path(path)
        data = content.encode('utf-8') if isinstance(content, str) else content
        self._files[p] = data
        self._sizes[p] = len(data) if size is None else size
        if p.parent != p.parent.parent:
            self.add_dir(p.parent)
        return p

    def stat(self, path: Path) -> FileInfo:
        if path in self.stat_errors:
            raise PermissionError(f'Permission denied: {path}')
        if path in self._dirs:
            return FileInfo(name=path.name, is_dir=True, is_symlink=path in self._symlinks)
        if path in self._files:
            return FileInfo(name=path.name, size=self._sizes[path])
        raise FileNotFoundError(f'No such file or directory: {path}')

    def list_dir(self, path: Path) -> list[Path]:
        if path in self.list_errors:
            raise PermissionError(f'Permission denied: {path}')
        if path not in self._dirs:
            raise FileNotFoundError(f'No such file or directory: {path}')
        children = [p for p in (*self._dirs, *self._files) if p.parent == path and p != path]
        return sorted(children, key=lambda p: p.name)

    def read_bytes(self, path: Path) -> bytes:
        self.read_calls.append(path)
        if path in self.read_errors:
            raise PermissionError(f'Permission denied: {path}')
        try:
            return self._files[path]
        except KeyError:
            raise FileNotFoundError(f'No such file or directory: {path}') from None


# --- Standard Fixtures ---


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def registry() -> FormatRegistry:
    return FormatRegistry(DEFAULT_FORMATS)


@pytest.fixture
def service_loader(fake_fs: FakeFileSystem, registry: FormatRegistry) -> LoadFileUseCase[ServiceConfig]:
    return LoadFileUseCase(TypeAdapter(ServiceConfig), registry, fake_fs, max_file_size=1024)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """On-disk directory with two valid services and one unrelated file."""
    d = tmp_path / 'config'
    d.mkdir()
    (d / 'api.yaml').write_text('name: api\nport: 9000\n', encoding='utf-8')
    (d / 'worker.json').write_text('{"name": "worker"}', encoding='utf-8')
    (d / 'notes.txt').write_text('not a config', encoding='utf-8')
    return d
