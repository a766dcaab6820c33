"""
Configuration Loader Unit Tests
"""

import json

import pytest

from kvgateway.common.errors import ConfigError
from kvgateway.config import Configuration, parse_config


@pytest.fixture
def config_file(tmp_path):
    def _write(content):
        path = tmp_path / "config.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return path

    return _write


def test_parse_full_config(config_file):
    path = config_file(
        {
            "application": {"host": "1.1.1.1", "port": 8080},
            "databases": [
                {"name": "cache", "type": "inmemory", "connection_string": ""},
                {"name": "getir", "type": "mongodb", "connection_string": "mongodb://localhost:27017"},
            ],
        }
    )

    config = parse_config(str(path))

    assert config.application.host == "1.1.1.1"
    assert config.application.port == 8080
    assert [(d.name, d.type) for d in config.databases] == [("cache", "inmemory"), ("getir", "mongodb")]
    assert config.databases[1].connection_string == "mongodb://localhost:27017"


def test_parse_without_databases(config_file):
    config = parse_config(config_file({"application": {"host": "1.1.1.1", "port": 8080}}))

    assert config.databases == []


def test_parse_keeps_unknown_database_types(config_file):
    config = parse_config(config_file({"databases": [{"name": "x", "type": "cassandra"}]}))

    assert config.databases[0].type == "cassandra"
    assert config.application == Configuration().application


@pytest.mark.parametrize("path", [None, ""])
def test_missing_path(path):
    with pytest.raises(ConfigError, match="config file value not given"):
        parse_config(path)


def test_nonexistent_file(tmp_path):
    with pytest.raises(ConfigError):
        parse_config(tmp_path / "wrongname.json")


def test_invalid_json(config_file):
    with pytest.raises(ConfigError):
        parse_config(config_file("{not json"))


def test_invalid_shape(config_file):
    with pytest.raises(ConfigError):
        parse_config(config_file({"application": {"port": "not-a-port"}}))
