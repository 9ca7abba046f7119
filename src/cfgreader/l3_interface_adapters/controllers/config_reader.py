"""ConfigReader — caller-facing facade over the load and scan use cases."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePath
from typing import Any, Generic, NamedTuple, TypeVar

from pydantic import TypeAdapter

from cfgreader.l1_entities.errors import IsDirectoryError, NotDirectoryError, PathInaccessibleError
from cfgreader.l1_entities.file_info import FileInfo
from cfgreader.l1_entities.format import Format
from cfgreader.l1_entities.reader_config import ReaderConfig
from cfgreader.l2_use_cases.format_registry import FormatRegistry
from cfgreader.l2_use_cases.load_file_use_case import LoadFileUseCase
from cfgreader.l2_use_cases.ports.file_system import FileSystem
from cfgreader.l2_use_cases.scan_directory_use_case import ScanDirectoryUseCase
from cfgreader.l3_interface_adapters.gateways.builtin_formats import DEFAULT_FORMATS
from cfgreader.l3_interface_adapters.gateways.local_file_system import LocalFileSystem

T = TypeVar('T')

log = logging.getLogger('cfgreader.reader')


class ReadResult(NamedTuple):
    """Outcome of :meth:`ConfigReader.read` — a single value or a name → value mapping."""

    content: Any
    is_dir: bool


class ConfigReader(Generic[T]):
    """Reads configuration files and directories into values of type *target*.

    *target* is anything pydantic can validate into: a BaseModel subclass,
    a dataclass, a TypedDict, or a plain annotation such as ``dict[str, Any]``.
    Single-file reads always raise on failure; directory reads follow
    ``config.strict_mode``.
    """

    def __init__(
        self,
        target: type[T],
        config: ReaderConfig | None = None,
        *,
        registry: FormatRegistry | None = None,
        file_system: FileSystem | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or ReaderConfig()
        self._registry = registry if registry is not None else FormatRegistry(DEFAULT_FORMATS)
        self._fs: FileSystem = file_system or LocalFileSystem()
        self._log = logger or log

        self._load_uc: LoadFileUseCase[T] = LoadFileUseCase(
            TypeAdapter(target),
            self._registry,
            self._fs,
            self._config.max_file_size,
            logger=logger,
        )
        self._scan_uc: ScanDirectoryUseCase[T] = ScanDirectoryUseCase(
            self._load_uc,
            self._fs,
            strict_mode=self._config.strict_mode,
            recursive=self._config.recursive,
            logger=logger,
        )

    @property
    def config(self) -> ReaderConfig:
        return self._config

    @property
    def formats(self) -> dict[str, Format]:
        return self._registry.formats

    def register_formats(self, formats: Iterable[Format]) -> None:
        """Add or replace formats. Meant for setup time, before any reads."""
        self._registry.register(formats)

    def detect_format(self, filename: str) -> Format:
        return self._registry.detect(filename)

    def read_file(self, file_path: str | Path | None = None) -> T | None:
        """Read and parse a single configuration file.

        An empty document yields the target's default value (``{}`` validated
        into it), or None when the target has required fields.
        """
        path = self._resolve(file_path, 'file')
        self._log.info('Reading configuration file %s', path)

        info = self._stat(path, 'configuration file')
        if info.is_dir:
            raise IsDirectoryError('path is a directory, use read_dir or read_dir_map instead', path=path)

        loaded = self._load_uc.process(path, info)
        self._log.info('Configuration loaded successfully from %s', path)
        return loaded.value

    def read_dir(self, dir_path: str | Path | None = None) -> list[T]:
        """Read every configuration file in a directory; order is not meaningful."""
        return list(self.read_dir_map(dir_path).values())

    def read_dir_map(self, dir_path: str | Path | None = None) -> dict[str, T]:
        """Read every configuration file in a directory, keyed by logical name."""
        path = self._resolve(dir_path, 'directory')

        info = self._stat(path, 'configuration directory')
        if not info.is_dir:
            raise NotDirectoryError('path is not a directory, use read_file instead', path=path)

        return self._scan_uc.scan(path).configs

    def read(self, path: str | Path | None = None) -> ReadResult:
        """Dispatch to :meth:`read_file` or :meth:`read_dir_map` based on what *path* is."""
        resolved = self._resolve(path, None)
        info = self._stat(resolved, 'path')

        if info.is_dir:
            self._log.info('Detected directory %s, using read_dir_map', resolved)
            return ReadResult(content=self.read_dir_map(resolved), is_dir=True)

        self._log.info('Detected file %s, using read_file', resolved)
        return ReadResult(content=self.read_file(resolved), is_dir=False)

    def _resolve(self, path: str | Path | None, kind: str | None) -> Path:
        # Path('') collapses to Path('.'), so an empty Path also means the default; pass '.' for the cwd.
        if path is None or path == '' or (isinstance(path, PurePath) and not path.parts):
            if kind is not None:
                self._log.info('Using default configuration %s %s', kind, self._config.default_path)
            return self._config.default_path
        return Path(path)

    def _stat(self, path: Path, what: str) -> FileInfo:
        try:
            return self._fs.stat(path)
        except OSError as exc:
            raise PathInaccessibleError(f'{what} inaccessible: {exc}', path=path) from exc
