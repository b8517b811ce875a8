"""Active translation service registry.

The active service is held per execution context (``contextvars``): each
thread or asyncio task sees the service activated in its own context, and a
new task starts from the value of the context that spawned it.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Generator, Optional

if TYPE_CHECKING:
    from infrastructure.i18n.service import TranslationService

_active_service: ContextVar[Optional["TranslationService"]] = ContextVar(
    "active_translation_service", default=None
)


def get_active_service() -> Optional["TranslationService"]:
    """Get the active service of the current context, if any."""
    return _active_service.get()


def set_active_service(service: Optional["TranslationService"]) -> Token:
    """Install a service as active in the current context."""
    return _active_service.set(service)


def reset_active_service(token: Optional[Token] = None) -> None:
    """Restore the previous active service, or clear it when no token is given."""
    if token is None:
        _active_service.set(None)
    else:
        _active_service.reset(token)


@contextmanager
def active_service(service: "TranslationService") -> Generator["TranslationService", None, None]:
    """Make a service active for the duration of a block.

    Unlike TranslationService.set_active(), the process locale is left
    untouched.

    Example:
        with active_service(TranslationService("fr_FR")):
            translate("welcome")
    """
    token = set_active_service(service)
    try:
        yield service
    finally:
        reset_active_service(token)
