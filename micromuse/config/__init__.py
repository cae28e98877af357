"""
Configuration module for micromuse.

Usage:
    from micromuse.config import get_config

    config = get_config()
    setup_logging(config.logging.to_dict())
"""

import sys
from functools import lru_cache
from os import getenv

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError
from .models import AppConfig, LoggingConfig

__all__ = ["get_config", "reset_config", "AppConfig", "LoggingConfig"]


def _is_test_mode() -> bool:
    """Detect if running under pytest."""
    if "pytest" in sys.modules:
        return True

    if getenv("PYTEST_CURRENT_TEST"):
        return True

    return False


def _create_config_instance() -> AppConfig:
    """
    Create a new AppConfig instance from the current environment.

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    try:
        return AppConfig()
    except PydanticValidationError as e:
        errors = e.errors()
        config_key = ".".join(str(part) for part in errors[0]["loc"]) if errors else None
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            config_key=config_key,
            details={"error_count": len(errors)},
            user_friendly="Configuration could not be loaded",
        ) from e


@lru_cache(maxsize=1)
def _get_config_cached() -> AppConfig:
    """Production config loader; lru_cache keeps the single instance."""
    return _create_config_instance()


def get_config() -> AppConfig:
    """
    Get application configuration (singleton in production, fresh in tests).

    Returns:
        AppConfig: The application configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    if _is_test_mode():
        return _create_config_instance()
    return _get_config_cached()


def reset_config() -> None:
    """Reset the configuration cache so the next get_config() reloads."""
    _get_config_cached.cache_clear()
