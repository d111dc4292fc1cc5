"""
page-notes: a typed object model over page documents and a placement
engine for annotation boxes.
"""

__version__ = "0.1.0"

from .core import Outline, OEChildren, Page, PageNamespace, Paragraph
from .commands import AddNoteCommand, NoteType
from .host import MemoryConnection, XmlFileConnection, get_current_outline

__all__ = [
    "Outline",
    "OEChildren",
    "Page",
    "PageNamespace",
    "Paragraph",
    "AddNoteCommand",
    "NoteType",
    "MemoryConnection",
    "XmlFileConnection",
    "get_current_outline",
]
