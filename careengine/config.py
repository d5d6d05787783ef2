"""
Configuration for the Care Recommendation Engine
================================================
Runtime settings read from ``CAREENGINE_*`` environment variables, plus the
logging setup used by hosts that embed the engine.
"""

import logging
import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path

from careengine.domain.exceptions import ConfigurationError
from careengine.enums import CareEnvironment, FertilizerType

HEMISPHERES = ("northern", "southern")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONSOLE_HANDLER_NAME = "careengine_console"
FILE_HANDLER_NAME = "careengine_file"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(
            f"Environment variable {name} must be an integer.",
            detail={"name": name, "value": value},
        ) from None


def _env_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip()


@dataclass
class EngineConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: _env_str("CAREENGINE_ENV", "development"))
    debug: bool = field(default_factory=lambda: _env_bool("CAREENGINE_DEBUG", False))
    log_level: str = field(default_factory=lambda: _env_str("CAREENGINE_LOG_LEVEL", "INFO").upper())
    log_file: str | None = field(default_factory=lambda: os.getenv("CAREENGINE_LOG_FILE") or None)
    log_max_bytes: int = field(default_factory=lambda: _env_int("CAREENGINE_LOG_MAX_BYTES", 10 * 1024 * 1024))
    log_backup_count: int = field(default_factory=lambda: _env_int("CAREENGINE_LOG_BACKUP_COUNT", 5))

    # Season.current() flips months for the southern hemisphere
    hemisphere: str = field(default_factory=lambda: _env_str("CAREENGINE_HEMISPHERE", "northern").lower())

    # Used when a plant record does not say
    default_environment: str = field(
        default_factory=lambda: _env_str("CAREENGINE_DEFAULT_ENVIRONMENT", CareEnvironment.INDOOR.value).lower()
    )
    default_fertilizer: str = field(
        default_factory=lambda: _env_str("CAREENGINE_DEFAULT_FERTILIZER", FertilizerType.LIQUID.value).lower()
    )

    @property
    def care_environment(self) -> CareEnvironment:
        return CareEnvironment(self.default_environment)

    @property
    def fertilizer_type(self) -> FertilizerType:
        return FertilizerType(self.default_fertilizer)


# ==================== CONFIGURATION VALIDATION ====================


def validate_config(config: EngineConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: EngineConfig instance

    Raises:
        ConfigurationError: On the first invalid value
    """
    if config.hemisphere not in HEMISPHERES:
        raise ConfigurationError(
            f"CAREENGINE_HEMISPHERE must be one of {', '.join(HEMISPHERES)}",
            detail={"value": config.hemisphere},
        )

    if config.log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"CAREENGINE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}",
            detail={"value": config.log_level},
        )

    if config.default_environment not in {item.value for item in CareEnvironment}:
        raise ConfigurationError(
            "CAREENGINE_DEFAULT_ENVIRONMENT is not a known placement",
            detail={"value": config.default_environment},
        )

    if config.default_fertilizer not in {item.value for item in FertilizerType}:
        raise ConfigurationError(
            "CAREENGINE_DEFAULT_FERTILIZER is not a known fertilizer form",
            detail={"value": config.default_fertilizer},
        )

    if config.log_max_bytes <= 0 or config.log_backup_count < 0:
        raise ConfigurationError(
            "Log rotation settings must be positive",
            detail={"max_bytes": config.log_max_bytes, "backup_count": config.log_backup_count},
        )


def setup_logging(
    debug: bool = False,
    log_file: str | None = None,
    *,
    level: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Setup logging configuration."""
    log_level = logging.DEBUG if debug else logging.getLevelName(level or "INFO")

    # Root logger
    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid adding duplicates when called more than once
    has_console = any(getattr(h, "name", "") == CONSOLE_HANDLER_NAME for h in root.handlers)
    has_file = any(getattr(h, "name", "") == FILE_HANDLER_NAME for h in root.handlers)
    added_handler = False

    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter(LOG_FORMAT)

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = CONSOLE_HANDLER_NAME
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if log_file and not has_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.name = FILE_HANDLER_NAME
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    # Ensure handler levels follow the desired log level
    for handler in root.handlers:
        if getattr(handler, "name", "") in {CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME}:
            handler.setLevel(log_level)

    if added_handler:
        root.info("Logging initialized at level: %s", logging.getLevelName(log_level))


def load_config() -> EngineConfig:
    """Helper for callers to load and validate configuration."""
    config = EngineConfig()
    validate_config(config)
    return config


def configure_logging(config: EngineConfig) -> None:
    """Apply the logging settings of a loaded configuration."""
    setup_logging(
        debug=config.debug,
        log_file=config.log_file,
        level=config.log_level,
        max_bytes=config.log_max_bytes,
        backup_count=config.log_backup_count,
    )
