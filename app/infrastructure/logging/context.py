"""Build context binding for structured logging.

Binds the locale (and optionally the domain) being worked on to every log
entry emitted inside the block, so cache and provider logs of one build can
be correlated.

Usage:
    from infrastructure.logging import bind_build_context

    with bind_build_context(locale="fr_FR", dry_run=True):
        logger.info("build_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_build_context(
    locale: str,
    domain: Optional[str] = None,
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind build-scoped context to all logs within the context manager.

    Args:
        locale: Locale being built or translated.
        domain: Domain being built, if the block is about a single domain.
        correlation_id: Identifier of the run. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {
        "correlation_id": correlation_id or str(uuid.uuid4()),
        "locale": locale,
    }

    if domain is not None:
        context["domain"] = domain

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_build_context() -> None:
    """Clear all bound context from the logging context."""
    structlog.contextvars.clear_contextvars()
