"""cfgreader — load configuration files and directories into typed values."""

from __future__ import annotations

import logging

from cfgreader.l1_entities.errors import (
    ConfigReaderError,
    DuplicateNameError,
    FileReadError,
    FileTooLargeError,
    IsDirectoryError,
    NotDirectoryError,
    ParseError,
    PathInaccessibleError,
    ScanAbortedError,
    TraversalError,
    UnsupportedFormatError,
)
from cfgreader.l1_entities.format import UNKNOWN_FORMAT, Format
from cfgreader.l1_entities.names import base_name
from cfgreader.l1_entities.reader_config import ReaderConfig
from cfgreader.l2_use_cases.format_registry import FormatRegistry
from cfgreader.l3_interface_adapters.controllers.config_reader import ConfigReader, ReadResult
from cfgreader.l3_interface_adapters.gateways.builtin_formats import JSON, TOML, YAML
from cfgreader.l4_frameworks_and_drivers.container import build_config_reader

__version__ = '0.1.0'

logging.getLogger('cfgreader').addHandler(logging.NullHandler())

__all__ = [
    'JSON',
    'TOML',
    'UNKNOWN_FORMAT',
    'YAML',
    'ConfigReader',
    'ConfigReaderError',
    'DuplicateNameError',
    'FileReadError',
    'FileTooLargeError',
    'Format',
    'FormatRegistry',
    'IsDirectoryError',
    'NotDirectoryError',
    'ParseError',
    'PathInaccessibleError',
    'ReadResult',
    'ReaderConfig',
    'ScanAbortedError',
    'TraversalError',
    'UnsupportedFormatError',
    '__version__',
    'base_name',
    'build_config_reader',
]
