"""
Structlog-based logging configuration for micromuse.

This module configures structlog on top of the standard library logging
module and provides the logger factory used throughout the package, along
with helpers for binding contextual data (room IDs, operations) to every
subsequent log entry.
"""

import json
import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    merge_contextvars,
)
from structlog.stdlib import BoundLogger, LoggerFactory

VALID_ENVIRONMENTS = ["local", "unit_test", "production"]
VALID_FORMATS = ["human", "json"]

_LOGGING_INITIALIZED = False
_LOGGING_SIGNATURE: str | None = None


def detect_environment() -> str:
    """
    Detect the current environment based on various indicators.

    Returns:
        Environment name: "unit_test", "local", or "production"
    """
    # Check if running under pytest (unit tests)
    if "pytest" in sys.modules or "pytest" in sys.argv[0]:
        return "unit_test"

    env = os.getenv("LOGGING_ENVIRONMENT", "")
    if env in VALID_ENVIRONMENTS:
        return env

    return "local"


def _build_renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"])


def configure_structlog(
    environment: str | None = None,
    log_level: str = "INFO",
    log_format: str = "human",
) -> None:
    """
    Configure structlog processors and the standard library root handler.

    Args:
        environment: Environment name (auto-detected if None)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "human" for key=value lines, "json" for one JSON object per line
    """
    if environment is None:
        environment = detect_environment()

    processors = [
        # Merge context variables (room_id, operation, ...)
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _build_renderer(log_format),
    ]

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_micromuse_handler", False):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._micromuse_handler = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )

    get_logger(__name__).debug(
        "Structlog configured", environment=environment, log_level=log_level, log_format=log_format
    )


def setup_logging(config: dict[str, Any], *, force_reconfigure: bool = False) -> None:
    """
    Set up logging from a configuration dictionary.

    The dictionary is the shape produced by ``LoggingConfig.to_dict()``:
    ``environment``, ``level``, ``format`` and ``disable_logging``.

    Args:
        config: Logging configuration dictionary
        force_reconfigure: When True, reconfigure even if logging is already initialized
    """
    global _LOGGING_INITIALIZED
    global _LOGGING_SIGNATURE

    config_signature = json.dumps(config, sort_keys=True, default=str)

    if _LOGGING_INITIALIZED and not force_reconfigure:
        get_logger("micromuse.logging.setup").debug(
            "setup_logging skipped; logging system already initialized",
            config_signature=_LOGGING_SIGNATURE,
        )
        return

    if config.get("disable_logging", False):
        structlog.configure(
            processors=[structlog.stdlib.filter_by_level, structlog.processors.KeyValueRenderer()],
            logger_factory=LoggerFactory(),
            wrapper_class=BoundLogger,
            cache_logger_on_first_use=False,
        )
        logging.getLogger().setLevel(logging.CRITICAL + 1)
    else:
        environment = config.get("environment") or detect_environment()
        log_level = config.get("level", "INFO")
        configure_structlog(environment, log_level, config.get("format", "human"))

        get_logger("micromuse.logging").info(
            "Logging system initialized",
            environment=environment,
            log_level=log_level,
        )

    _LOGGING_INITIALIZED = True
    _LOGGING_SIGNATURE = config_signature


def reset_logging() -> None:
    """Forget previous setup so the next setup_logging() call reconfigures."""
    global _LOGGING_INITIALIZED
    global _LOGGING_SIGNATURE
    _LOGGING_INITIALIZED = False
    _LOGGING_SIGNATURE = None
    clear_contextvars()


def bind_context(**kwargs) -> None:
    """
    Bind context to all subsequent log entries in the current context.

    None values are dropped.
    """
    bind_contextvars(**{k: v for k, v in kwargs.items() if v is not None})


def clear_context() -> None:
    """Clear the current logging context."""
    clear_contextvars()


def get_current_context() -> dict[str, Any]:
    """Get the current logging context."""
    return structlog.contextvars.get_contextvars()


def get_logger(name: str) -> Any:  # Returns BoundLogger but typed as Any for flexibility
    """
    Get a structlog logger with the specified name.

    The logger wraps the standard library logger of the same name, so until
    setup_logging() runs the standard library defaults apply and debug or
    info entries produce no output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=BoundLogger)
