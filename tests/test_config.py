"""
Configuration Tests
===================
Tests for environment-driven configuration and logging setup.
"""

import logging

import pytest

from careengine.config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    EngineConfig,
    configure_logging,
    load_config,
    setup_logging,
    validate_config,
)
from careengine.domain.exceptions import ConfigurationError
from careengine.enums import CareEnvironment, FertilizerType

ENV_VARS = (
    "CAREENGINE_ENV",
    "CAREENGINE_DEBUG",
    "CAREENGINE_LOG_LEVEL",
    "CAREENGINE_LOG_FILE",
    "CAREENGINE_LOG_MAX_BYTES",
    "CAREENGINE_LOG_BACKUP_COUNT",
    "CAREENGINE_HEMISPHERE",
    "CAREENGINE_DEFAULT_ENVIRONMENT",
    "CAREENGINE_DEFAULT_FERTILIZER",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def root_logger():
    """Root logger with any handlers added by the test removed afterwards."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in original_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(original_level)


class TestEngineConfig:
    """Tests for EngineConfig and load_config."""

    def test_defaults(self):
        config = load_config()

        assert config.environment == "development"
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.hemisphere == "northern"
        assert config.care_environment == CareEnvironment.INDOOR
        assert config.fertilizer_type == FertilizerType.LIQUID

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CAREENGINE_DEBUG", "true")
        monkeypatch.setenv("CAREENGINE_LOG_LEVEL", "debug")
        monkeypatch.setenv("CAREENGINE_HEMISPHERE", "Southern")
        monkeypatch.setenv("CAREENGINE_DEFAULT_ENVIRONMENT", "Greenhouse")
        monkeypatch.setenv("CAREENGINE_DEFAULT_FERTILIZER", "slow_release")
        monkeypatch.setenv("CAREENGINE_LOG_BACKUP_COUNT", "2")

        config = load_config()

        assert config.debug is True
        assert config.log_level == "DEBUG"
        assert config.hemisphere == "southern"
        assert config.care_environment == CareEnvironment.GREENHOUSE
        assert config.fertilizer_type == FertilizerType.SLOW_RELEASE
        assert config.log_backup_count == 2

    @pytest.mark.parametrize(
        "name, value",
        [
            ("CAREENGINE_HEMISPHERE", "equatorial"),
            ("CAREENGINE_LOG_LEVEL", "LOUD"),
            ("CAREENGINE_DEFAULT_ENVIRONMENT", "attic"),
            ("CAREENGINE_DEFAULT_FERTILIZER", "compost"),
            ("CAREENGINE_LOG_MAX_BYTES", "0"),
        ],
    )
    def test_invalid_values_are_rejected(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ConfigurationError) as excinfo:
            load_config()
        assert excinfo.value.detail

    def test_non_integer_is_rejected(self, monkeypatch):
        monkeypatch.setenv("CAREENGINE_LOG_MAX_BYTES", "ten megabytes")

        with pytest.raises(ConfigurationError) as excinfo:
            EngineConfig()
        assert excinfo.value.detail == {"name": "CAREENGINE_LOG_MAX_BYTES", "value": "ten megabytes"}

    def test_validate_explicit_config(self):
        validate_config(EngineConfig(hemisphere="southern", default_environment="balcony"))

        with pytest.raises(ConfigurationError):
            validate_config(EngineConfig(log_backup_count=-1))


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_adds_console_handler_once(self, root_logger):
        setup_logging()
        setup_logging()

        names = [handler.name for handler in root_logger.handlers]
        assert names.count(CONSOLE_HANDLER_NAME) == 1
        assert root_logger.level == logging.INFO

    def test_debug_overrides_level(self, root_logger):
        setup_logging(debug=True, level="WARNING")
        assert root_logger.level == logging.DEBUG

    def test_file_handler(self, root_logger, tmp_path):
        log_file = tmp_path / "logs" / "careengine.log"

        setup_logging(log_file=str(log_file), level="INFO")
        setup_logging(log_file=str(log_file), level="INFO")
        logging.getLogger("careengine.test").warning("care plan applied")
        for handler in root_logger.handlers:
            handler.flush()

        names = [handler.name for handler in root_logger.handlers]
        assert names.count(FILE_HANDLER_NAME) == 1
        assert log_file.exists()
        assert "care plan applied" in log_file.read_text(encoding="utf-8")

    def test_configure_from_config(self, root_logger, monkeypatch):
        monkeypatch.setenv("CAREENGINE_LOG_LEVEL", "warning")

        configure_logging(load_config())

        assert root_logger.level == logging.WARNING
        assert CONSOLE_HANDLER_NAME in [handler.name for handler in root_logger.handlers]
