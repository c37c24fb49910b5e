"""Web interface for stronk."""

from .app import create_app

__all__ = ["create_app"]
