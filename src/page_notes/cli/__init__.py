"""
Command-line interface for page-notes.
"""

from .app import app

__all__ = ["app"]
