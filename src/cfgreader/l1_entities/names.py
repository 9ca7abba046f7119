"""Logical-name and extension helpers for configuration filenames."""

from __future__ import annotations


def base_name(filename: str) -> str:
    """Strip the final extension: ``app.tar.gz`` -> ``app.tar``.

    A leading dot is not an extension, so ``.env`` and ``README`` come back unchanged.
    """
    idx = filename.rfind('.')
    if idx > 0:
        return filename[:idx]
    return filename


def extension(filename: str) -> str:
    """Return the final extension including the dot, or ``''`` when there is none."""
    idx = filename.rfind('.')
    if idx > 0:
        return filename[idx:]
    return ''
