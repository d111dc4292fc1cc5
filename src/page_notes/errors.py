"""
Exception types raised by page-notes.
"""

from __future__ import annotations


class PageNotesError(Exception):
    """Base class for page-notes errors."""


class PreconditionError(PageNotesError):
    """The command cannot run in the current document context."""


class NothingSelectedError(PageNotesError):
    """A quote was requested but there is no selected text."""


class DocumentConnectionError(PageNotesError):
    """The page document could not be opened."""


class CommitError(PageNotesError):
    """The modified page document could not be written back."""
