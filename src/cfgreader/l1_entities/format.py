"""Serialization format descriptor — pure data, no parser imports."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Unmarshal = Callable[[bytes], Any]


@dataclass(frozen=True)
class Format:
    """A named serialization scheme bound to file extensions.

    ``unmarshal`` turns raw file bytes into plain Python data (dicts, lists,
    scalars, or ``None`` for an empty document) and raises on malformed input.
    """

    name: str
    extensions: tuple[str, ...]
    unmarshal: Unmarshal | None = None


# Not-found sentinel; owns only the empty extension.
UNKNOWN_FORMAT = Format(name='unknown', extensions=('',))
