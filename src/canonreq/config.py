import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .error import ConfigError

CONFIG_ENV_KEY = "CANONREQ_CONFIG"

_LOG_LEVELS = {"DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"}


class Config(BaseModel):
    """Canonreq Config"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    debug: bool = False

    logger_level: Optional[str] = None
    logger_colored: Optional[bool] = None
    logger_format: str = (
        "%(levelname)1.1s %(asctime)s "
        "%(name)s:%(lineno)-4d %(message)s"
    )
    logger_datefmt: str = "%H:%M:%S"

    preview_width: int = Field(default=60, ge=8)

    @field_validator("logger_level", mode="before")
    @classmethod
    def validate_loglevel(cls, value):
        if value is None:
            return value
        try:
            value = value.upper()
        except Exception:
            raise ValueError(f"Invalid log level {value!r}")
        if value not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return value


def effective_logger_level(config):
    if config.logger_level:
        return config.logger_level
    return "DEBUG" if config.debug else "INFO"


def effective_logger_colored(config):
    if config.logger_colored is None:
        return config.debug
    return config.logger_colored


def _format_errors(ex):
    return "; ".join(
        "{}: {}".format(".".join(str(x) for x in err["loc"]), err["msg"])
        for err in ex.errors()
    )


def _read_config_file(config_path):
    config_path = str(Path(config_path).expanduser().absolute())
    try:
        with open(config_path) as f:
            content = f.read()
    except FileNotFoundError:
        msg = f"config file {config_path!r} not found"
        raise ConfigError(msg) from None
    try:
        return toml.loads(content)
    except toml.TomlDecodeError:
        msg = f"config file {config_path!r} is not valid TOML file"
        raise ConfigError(msg) from None


def load_config(**overrides):
    """Load config from the TOML file named by CANONREQ_CONFIG, if any,
    then apply overrides on top of it.

    Raises:
        ConfigError: config file missing, not TOML, or has invalid values
    """
    config_path = os.getenv(CONFIG_ENV_KEY, None)
    if config_path:
        config = _read_config_file(config_path)
    else:
        config = {}
    config.update(overrides)
    try:
        return Config(**config)
    except ValidationError as ex:
        raise ConfigError(_format_errors(ex)) from None
