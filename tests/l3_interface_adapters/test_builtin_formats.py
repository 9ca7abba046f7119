"""Tests for the built-in YAML/JSON/TOML deserializers."""

from __future__ import annotations

import json
import tomllib

import pytest
import yaml

from cfgreader.l3_interface_adapters.gateways.builtin_formats import DEFAULT_FORMATS, JSON, TOML, YAML


class TestBuiltinFormats:
    def test_defaults_are_yaml_and_json(self):
        assert DEFAULT_FORMATS == (YAML, JSON)
        assert TOML not in DEFAULT_FORMATS

    def test_yaml(self):
        assert YAML.unmarshal(b'a: 1\nb: [x]\n') == {'a': 1, 'b': ['x']}

    def test_yaml_empty_document(self):
        assert YAML.unmarshal(b'') is None

    def test_yaml_is_safe(self):
        with pytest.raises(yaml.YAMLError):
            YAML.unmarshal(b'!!python/object/apply:os.system ["true"]\n')

    def test_json(self):
        assert JSON.unmarshal(b'{"a": [1, 2]}') == {'a': [1, 2]}

    def test_json_empty_is_error(self):
        with pytest.raises(json.JSONDecodeError):
            JSON.unmarshal(b'')

    def test_toml(self):
        assert TOML.unmarshal(b'name = "api"\n[server]\nport = 80\n') == {'name': 'api', 'server': {'port': 80}}

    def test_toml_malformed(self):
        with pytest.raises(tomllib.TOMLDecodeError):
            TOML.unmarshal(b'name = \n')

    def test_toml_rejects_invalid_utf8(self):
        with pytest.raises(UnicodeDecodeError):
            TOML.unmarshal(b'\xff\xfe')
