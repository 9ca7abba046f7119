"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = 'cfgreader'


def setup_file_logging(log_path: Path, level: int = logging.DEBUG) -> logging.Handler:
    """Send the package's diagnostics to *log_path*. Returns the installed handler."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    root.addHandler(handler)
    root.info('Debug logging started → %s', log_path)
    return handler
