import logging

import pytest
from pydantic import ValidationError

from canonreq.config import (
    CONFIG_ENV_KEY,
    Config,
    load_config,
    effective_logger_level,
    effective_logger_colored,
)
from canonreq.error import ConfigError
from canonreq.logger import config_logging


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_KEY, raising=False)


def test_default_config():
    config = load_config()
    assert config.debug is False
    assert config.preview_width == 60
    assert effective_logger_level(config) == "INFO"
    assert effective_logger_colored(config) is False


def test_debug_defaults():
    config = load_config(debug=True)
    assert effective_logger_level(config) == "DEBUG"
    assert effective_logger_colored(config) is True
    config = load_config(debug=True, logger_level="warning", logger_colored=False)
    assert effective_logger_level(config) == "WARNING"
    assert effective_logger_colored(config) is False


@pytest.mark.parametrize("overrides", [
    dict(logger_level="verbose"),
    dict(logger_level=1),
    dict(preview_width=4),
    dict(unknown_key=True),
])
def test_invalid_config(overrides):
    with pytest.raises(ConfigError):
        load_config(**overrides)


def test_config_immutable():
    config = load_config()
    with pytest.raises(ValidationError):
        config.debug = True


def test_load_config_file(tmp_path, monkeypatch):
    path = tmp_path / "canonreq.toml"
    path.write_text('logger_level = "error"\npreview_width = 20\n')
    monkeypatch.setenv(CONFIG_ENV_KEY, str(path))
    config = load_config(preview_width=30)
    assert config.logger_level == "ERROR"
    assert config.preview_width == 30


def test_config_file_not_found(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_KEY, str(tmp_path / "missing.toml"))
    with pytest.raises(ConfigError) as exc_info:
        load_config()
    assert "not found" in str(exc_info.value)


def test_config_file_invalid(tmp_path, monkeypatch):
    path = tmp_path / "canonreq.toml"
    path.write_text("logger_level = \n")
    monkeypatch.setenv(CONFIG_ENV_KEY, str(path))
    with pytest.raises(ConfigError) as exc_info:
        load_config()
    assert "not valid TOML" in str(exc_info.value)


def test_config_logging_level():
    config_logging(Config(logger_level="ERROR", logger_colored=False))
    assert logging.getLogger("canonreq").level == logging.ERROR
    config_logging(Config(debug=True, logger_colored=False))
    assert logging.getLogger("canonreq").level == logging.DEBUG
