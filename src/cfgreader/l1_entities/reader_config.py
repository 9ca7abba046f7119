"""Reader configuration Pydantic model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONFIG_PATH = Path('/etc/config')
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB


class ReaderConfig(BaseModel):
    """Settings fixed at reader construction."""

    model_config = ConfigDict(frozen=True)

    default_path: Path = DEFAULT_CONFIG_PATH  # file or directory
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
    strict_mode: bool = False
    recursive: bool = False
