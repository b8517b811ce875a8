"""
Dependency injection services.

Provides provider functions for application-scoped collaborators.
"""

from infrastructure.services.providers import get_settings

__all__ = [
    "get_settings",
]
