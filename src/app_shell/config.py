"""
Service configuration file.

The file is optional. When present it is YAML, validated against AppConfig;
environment variables (PORT, HOST, LOG_LEVEL) override what it sets.

Example settings.yaml:

    server:
      host: 0.0.0.0
      port: 3005
    logging:
      level: INFO
    docs:
      url: /api-docs
    cors:
      origins: []
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_PORT = 3005


class ServerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class DocsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url: str = "/api-docs"
    redoc_url: str | None = "/redoc"


class CorsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    origins: list[str] = []


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
    docs: DocsConfig = DocsConfig()
    cors: CorsConfig = CorsConfig()


def load_config(path: Path) -> AppConfig:
    """
    Load and validate the configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e
