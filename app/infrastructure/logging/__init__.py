"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the translation service using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_build_context(): Context manager binding locale/domain to logs
    - get_correlation_id(): Get current correlation ID from context
    - clear_build_context(): Clear all bound context

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_build_context,
    get_correlation_id,
    clear_build_context,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_build_context",
    "get_correlation_id",
    "clear_build_context",
]
