"""
Logging package for micromuse.

All modules obtain their logger through ``get_logger(__name__)``.
"""

from .logging_config import (
    bind_context,
    clear_context,
    configure_structlog,
    detect_environment,
    get_current_context,
    get_logger,
    setup_logging,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_structlog",
    "detect_environment",
    "get_current_context",
    "get_logger",
    "setup_logging",
]
