"""Extension → format registry."""

from __future__ import annotations

from collections.abc import Iterable

from cfgreader.l1_entities.format import UNKNOWN_FORMAT, Format
from cfgreader.l1_entities.names import extension


class FormatRegistry:
    """Maps lower-cased file extensions to formats.

    Extensions are globally unique: registering a format that claims an
    extension already owned by another format moves ownership to the newcomer.
    Formats are also catalogued by name. Nothing is ever removed.
    """

    def __init__(self, formats: Iterable[Format] = ()) -> None:
        self._by_ext: dict[str, Format] = {}
        self._by_name: dict[str, Format] = {}
        self.register([UNKNOWN_FORMAT])
        self.register(formats)

    def register(self, formats: Iterable[Format]) -> None:
        for fmt in formats:
            for ext in fmt.extensions:
                self._by_ext[ext.lower()] = fmt
            self._by_name[fmt.name] = fmt

    def detect(self, filename: str) -> Format:
        """Return the format owning *filename*'s extension, or ``UNKNOWN_FORMAT``."""
        ext = extension(filename).lower()
        if not ext:
            return UNKNOWN_FORMAT
        return self._by_ext.get(ext, UNKNOWN_FORMAT)

    def get(self, name: str) -> Format:
        return self._by_name.get(name, UNKNOWN_FORMAT)

    @property
    def formats(self) -> dict[str, Format]:
        return dict(self._by_name)

    @property
    def extensions(self) -> list[str]:
        return sorted(ext for ext in self._by_ext if ext)
