"""Command-line interface for namegen."""

from .app import app

__all__ = ["app"]
