"""Command line interface of the translation service."""

from cli.translation import app

__all__ = ["app"]
