"""Use case: scan a directory into a name → value mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

from cfgreader.l1_entities.errors import (
    ConfigReaderError,
    DuplicateNameError,
    ScanAbortedError,
    TraversalError,
)
from cfgreader.l1_entities.file_info import FileInfo
from cfgreader.l1_entities.scan_stats import ScanStats
from cfgreader.l2_use_cases.load_file_use_case import LoadFileUseCase
from cfgreader.l2_use_cases.ports.file_system import FileSystem

T = TypeVar('T')

log = logging.getLogger('cfgreader.scan')


@dataclass
class ScanResult(Generic[T]):
    configs: dict[str, T] = field(default_factory=dict)
    stats: ScanStats = field(default_factory=ScanStats)


class ScanDirectoryUseCase(Generic[T]):
    """Walks a directory (flat or recursive) and loads every file in it.

    Strict mode aborts on the first failing entry, in traversal order.
    Lenient mode counts the failure, skips the entry, and keeps going.
    Entries are visited in name order, so last-write-wins on duplicate
    names is reproducible.
    """

    def __init__(
        self,
        loader: LoadFileUseCase[T],
        file_system: FileSystem,
        *,
        strict_mode: bool = False,
        recursive: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._loader = loader
        self._fs = file_system
        self._strict = strict_mode
        self._recursive = recursive
        self._log = logger or log

    def scan(self, directory: Path) -> ScanResult[T]:
        self._log.info(
            'Scanning configuration directory %s (strict=%s, recursive=%s)',
            directory,
            self._strict,
            self._recursive,
        )
        result: ScanResult[T] = ScanResult()

        try:
            children = self._fs.list_dir(directory)
        except OSError as exc:
            if self._strict or not self._recursive:
                raise TraversalError(f'failed to read directory: {exc}', path=directory) from exc
            result.stats.errors += 1
            self._log.warning('Error accessing %s during recursive scan: %s', directory, exc)
            children = []
        self._log.info('Directory %s has %d entries', directory, len(children))

        self._walk(children, result)

        stats = result.stats
        self._log.info(
            'Configuration loading complete: processed=%d, skipped=%d, errors=%d, total=%d',
            stats.processed,
            stats.skipped,
            stats.errors,
            len(result.configs),
        )
        if not result.configs:
            self._log.warning('No valid configuration files found in %s', directory)
        return result

    def _walk(self, children: list[Path], result: ScanResult[T]) -> None:
        # One iterator per open directory; the top of the stack is the deepest level.
        pending: list[Iterator[Path]] = [iter(children)]
        while pending:
            child = next(pending[-1], None)
            if child is None:
                pending.pop()
                continue
            info = self._stat_entry(child, result.stats)
            if info is None:
                continue
            if info.is_dir:
                if self._recursive and not info.is_symlink:
                    sub = self._list_subdir(child, result.stats)
                    if sub is not None:
                        pending.append(iter(sub))
                else:
                    result.stats.skipped += 1
                continue
            self._process_entry(child, info, result)

    def _list_subdir(self, directory: Path, stats: ScanStats) -> list[Path] | None:
        try:
            return self._fs.list_dir(directory)
        except OSError as exc:
            stats.errors += 1
            self._log.warning('Error accessing %s during recursive scan: %s', directory, exc)
            if self._strict:
                raise ScanAbortedError(f'strict mode: failed to access {directory}', path=directory) from exc
            return None

    def _stat_entry(self, path: Path, stats: ScanStats) -> FileInfo | None:
        try:
            return self._fs.stat(path)
        except OSError as exc:
            stats.errors += 1
            self._log.warning('Failed to get file info for %s: %s', path.name, exc)
            if self._strict:
                raise ScanAbortedError(f'strict mode: failed to get info for {path.name}', path=path) from exc
            stats.skipped += 1
            return None

    def _process_entry(self, path: Path, info: FileInfo, result: ScanResult[T]) -> None:
        stats = result.stats
        try:
            loaded = self._loader.process(path, info)
        except ConfigReaderError as exc:
            stats.errors += 1
            self._log.warning('Failed to process configuration file %s: %s', path, exc)
            if self._strict:
                raise ScanAbortedError(
                    f'strict mode: failed to process {info.name}: {exc}', path=path, name=exc.name
                ) from exc
            stats.skipped += 1
            return

        if loaded.value is None:
            stats.skipped += 1
            return

        name = loaded.name
        if name in result.configs:
            self._log.warning('Duplicate service name %r detected in %s', name, path)
            if self._strict:
                raise DuplicateNameError(
                    f"strict mode: duplicate service name '{name}' in file {info.name}", path=path, name=name
                )
            self._log.info('Overwriting previous configuration for %r', name)

        result.configs[name] = loaded.value
        stats.processed += 1
        self._log.info('Configuration %r loaded from %s', name, path)
