"""Gateway: built-in deserializers for YAML, JSON, and TOML."""

from __future__ import annotations

import json
import tomllib
from typing import Any

import yaml

from cfgreader.l1_entities.format import Format


def _load_yaml(data: bytes) -> Any:
    return yaml.safe_load(data)


def _load_toml(data: bytes) -> Any:
    return tomllib.loads(data.decode('utf-8'))


YAML = Format(name='yaml', extensions=('.yaml', '.yml'), unmarshal=_load_yaml)
JSON = Format(name='json', extensions=('.json',), unmarshal=json.loads)
TOML = Format(name='toml', extensions=('.toml',), unmarshal=_load_toml)  # opt-in

DEFAULT_FORMATS: tuple[Format, ...] = (YAML, JSON)
