"""Composition root — wires config, registry, and file system into a ConfigReader."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from cfgreader.l1_entities.format import Format
from cfgreader.l1_entities.reader_config import DEFAULT_MAX_FILE_SIZE, ReaderConfig
from cfgreader.l2_use_cases.format_registry import FormatRegistry
from cfgreader.l2_use_cases.ports.file_system import FileSystem
from cfgreader.l3_interface_adapters.controllers.config_reader import ConfigReader
from cfgreader.l3_interface_adapters.gateways.builtin_formats import DEFAULT_FORMATS
from cfgreader.l3_interface_adapters.gateways.local_file_system import LocalFileSystem
from cfgreader.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATH, user_config_dir

T = TypeVar('T')


def build_config_reader(
    target: type[T],
    *,
    logger: logging.Logger | None = None,
    strict_mode: bool = False,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    default_path: str | Path | None = None,
    app_name: str | None = None,
    recursive: bool = False,
    formats: Iterable[Format] = (),
    file_system: FileSystem | None = None,
) -> ConfigReader[T]:
    """Create a ConfigReader with the built-in YAML/JSON formats plus any extra *formats*.

    The default path is *default_path* if given, else the per-user config
    directory for *app_name*, else ``/etc/config``.

    Raises pydantic.ValidationError for invalid settings (e.g. a non-positive max_file_size).
    """
    if default_path is None:
        default_path = user_config_dir(app_name) if app_name else DEFAULT_CONFIG_PATH
    config = ReaderConfig(
        default_path=default_path,
        max_file_size=max_file_size,
        strict_mode=strict_mode,
        recursive=recursive,
    )
    registry = FormatRegistry(DEFAULT_FORMATS)
    registry.register(formats)
    return ConfigReader(
        target,
        config,
        registry=registry,
        file_system=file_system or LocalFileSystem(),
        logger=logger,
    )
