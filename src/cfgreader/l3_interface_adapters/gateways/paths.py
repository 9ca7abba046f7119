"""Shared path helpers for default configuration locations."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path

from cfgreader.l1_entities.reader_config import DEFAULT_CONFIG_PATH

__all__ = ['DEFAULT_CONFIG_PATH', 'user_config_dir']


def user_config_dir(app_name: str) -> Path:
    """Per-user configuration directory for *app_name* (e.g. ``~/.config/<app_name>`` on Linux)."""
    return user_config_path(app_name)
