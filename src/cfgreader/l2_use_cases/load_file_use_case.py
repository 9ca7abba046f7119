"""Use case: load one configuration file into the target type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from cfgreader.l1_entities.errors import (
    FileReadError,
    FileTooLargeError,
    IsDirectoryError,
    ParseError,
    UnsupportedFormatError,
)
from cfgreader.l1_entities.file_info import FileInfo
from cfgreader.l1_entities.format import UNKNOWN_FORMAT, Format
from cfgreader.l1_entities.names import base_name
from cfgreader.l2_use_cases.format_registry import FormatRegistry
from cfgreader.l2_use_cases.ports.file_system import FileSystem

T = TypeVar('T')

log = logging.getLogger('cfgreader.load')


@dataclass(frozen=True)
class LoadedFile(Generic[T]):
    """A successfully loaded file.

    ``value`` is None for an empty document the target type cannot be built from.
    """

    name: str
    path: Path
    format: Format
    value: T | None = None


class LoadFileUseCase(Generic[T]):
    """Checks, reads, and deserializes a single file.

    The size ceiling is enforced from *info* before any bytes are read.
    """

    def __init__(
        self,
        adapter: TypeAdapter[T],
        registry: FormatRegistry,
        file_system: FileSystem,
        max_file_size: int,
        logger: logging.Logger | None = None,
    ) -> None:
        self._adapter = adapter
        self._registry = registry
        self._fs = file_system
        self._max_file_size = max_file_size
        self._log = logger or log

    def process(self, path: Path, info: FileInfo) -> LoadedFile[T]:
        name = base_name(info.name)

        if info.is_dir:
            raise IsDirectoryError('path is a directory', path=path, name=name)

        if info.size > self._max_file_size:
            raise FileTooLargeError(info.size, self._max_file_size, path=path, name=name)

        fmt = self._registry.detect(info.name)
        if fmt is UNKNOWN_FORMAT or fmt.unmarshal is None:
            raise UnsupportedFormatError(f'unsupported file format: {info.name}', path=path, name=name)

        value = self._read_and_parse(path, fmt)
        return LoadedFile(name=name, path=path, format=fmt, value=value)

    def _read_and_parse(self, path: Path, fmt: Format) -> T | None:
        self._log.debug('Reading configuration file %s (format=%s)', path, fmt.name)
        try:
            data = self._fs.read_bytes(path)
        except OSError as exc:
            raise FileReadError(f'failed to read file: {exc}', path=path) from exc
        self._log.debug('Read %d bytes from %s', len(data), path)

        try:
            raw: Any = fmt.unmarshal(data)
        except Exception as exc:
            raise ParseError(f'failed to unmarshal {fmt.name}: {exc}', format_name=fmt.name, path=path) from exc

        if raw is None:
            return self._empty_value(path, fmt)

        try:
            value = self._adapter.validate_python(raw)
        except ValidationError as exc:
            raise ParseError(
                f'failed to convert {fmt.name} content: {exc.error_count()} validation error(s)',
                format_name=fmt.name,
                path=path,
            ) from exc

        self._log.debug('Parsed %s as %s', path, fmt.name)
        return value

    def _empty_value(self, path: Path, fmt: Format) -> T | None:
        """Zero value for an empty document: the target built from ``{}``, or None if it needs content."""
        try:
            value = self._adapter.validate_python({})
        except ValidationError:
            self._log.debug('Empty %s document in %s has no value for the target type', fmt.name, path)
            return None
        self._log.debug('Empty %s document in %s, using the default value', fmt.name, path)
        return value
