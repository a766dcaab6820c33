"""
Configuration Management Module

Loads application parameters from a JSON configuration file:

    {
        "application": {"host": "0.0.0.0", "port": 8080},
        "databases": [
            {"name": "cache", "type": "inmemory", "connection_string": ""},
            {"name": "cache", "type": "redis", "connection_string": "redis://localhost:6379/0"},
            {"name": "getir", "type": "mongodb", "connection_string": "mongodb://localhost:27017"}
        ]
    }
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kvgateway.common.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./config.json"


class ApplicationConfig(BaseModel):
    """Listener settings"""

    host: str = "0.0.0.0"
    port: int = 8080

    model_config = ConfigDict(extra="ignore")


class DatabaseConfig(BaseModel):
    """
    Backend Descriptor

    `type` selects the initializer (`inmemory`, `redis` or `mongodb`); for
    MongoDB, `name` is the database holding the `records` collection.
    """

    name: str = ""
    type: str = ""
    connection_string: str = ""

    model_config = ConfigDict(extra="ignore")


class Configuration(BaseModel):
    """Root of the configuration file"""

    application: ApplicationConfig = Field(default_factory=ApplicationConfig)
    databases: list[DatabaseConfig] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


def parse_config(path: Optional[Union[str, Path]]) -> Configuration:
    """
    Parse the JSON configuration file

    Args:
        path: Absolute or relative path of the configuration file

    Returns:
        Configuration: Parsed configuration

    Raises:
        ConfigError: If the path is missing, the file cannot be read or its
            content is not a valid configuration
    """
    if path is None or str(path) == "":
        raise ConfigError()

    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"can't read configuration file {path}: {e}") from e

    try:
        config = Configuration.model_validate_json(content)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration file {path}: {e}") from e

    logger.debug("Loaded configuration from %s with %d database(s)", path, len(config.databases))
    return config
