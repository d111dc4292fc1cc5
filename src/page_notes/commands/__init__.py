"""
Page commands.
"""

from .add_note import (
    NOTE_TYPES,
    AddNoteCommand,
    CommandResult,
    CommandStatus,
    NoteType,
    NoteTypeInfo,
    quote_selection,
)

__all__ = [
    "NOTE_TYPES",
    "AddNoteCommand",
    "CommandResult",
    "CommandStatus",
    "NoteType",
    "NoteTypeInfo",
    "quote_selection",
]
