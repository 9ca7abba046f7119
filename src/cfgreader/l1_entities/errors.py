"""Domain error types."""

from __future__ import annotations

from pathlib import Path


class ConfigReaderError(Exception):
    """Base class for every error raised while reading configuration."""

    def __init__(self, message: str, *, path: Path | str | None = None, name: str = '') -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.name = name  # logical name, when known


class PathInaccessibleError(ConfigReaderError):
    """Raised when the requested path cannot be stat'ed."""


class IsDirectoryError(ConfigReaderError):
    """Raised when a file operation is given a directory."""


class NotDirectoryError(ConfigReaderError):
    """Raised when a directory operation is given a regular file."""


class FileTooLargeError(ConfigReaderError):
    """Raised when a file exceeds the configured size ceiling."""

    def __init__(self, size: int, limit: int, *, path: Path | str | None = None, name: str = '') -> None:
        super().__init__(f'file size {size} exceeds maximum allowed size {limit}', path=path, name=name)
        self.size = size
        self.limit = limit


class UnsupportedFormatError(ConfigReaderError):
    """Raised when no registered format owns the file's extension."""


class FileReadError(ConfigReaderError):
    """Raised when the file content cannot be read."""


class ParseError(ConfigReaderError):
    """Raised when content cannot be deserialized into the target type."""

    def __init__(self, message: str, *, format_name: str, path: Path | str | None = None) -> None:
        super().__init__(message, path=path)
        self.format_name = format_name


class DuplicateNameError(ConfigReaderError):
    """Raised in strict mode when two files derive the same logical name."""


class TraversalError(ConfigReaderError):
    """Raised when a directory cannot be listed or an entry cannot be inspected."""


class ScanAbortedError(ConfigReaderError):
    """Raised in strict mode to abort a directory scan on the first failing entry.

    The original error is available as ``__cause__``.
    """
