"""Command line interface for sorbet-ext."""

from .main import app

__all__ = ["app"]
