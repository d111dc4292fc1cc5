"""
Add-note command: places an annotation box next to the selected outline.

The note is appended to an existing outline when one already sits at the
anchor point beside the reference outline, otherwise a new outline is
created and positioned to its right.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..config import NotesConfig, load_config
from ..core.namespace import PageNamespace
from ..core.outline import Outline
from ..core.page import Page
from ..core.paragraph import Paragraph
from ..errors import (
    CommitError,
    DocumentConnectionError,
    NothingSelectedError,
    PreconditionError,
)
from ..host.connection import DocumentConnection, session
from ..host.notifier import ConsoleNotifier, Notifier


class NoteType(Enum):
    """Kinds of note that can be added to a page."""
    SIDENOTE = "sidenote"
    EDITING_NOTE = "editing-note"
    OVERALL_EDITING_NOTE = "overall-editing-note"
    ADDITION_NOTE = "addition-note"
    INLINE_ADDITION_NOTE = "inline-addition-note"


class NoteTypeInfo(BaseModel):
    """Display label and text style of a note type."""

    note_type: NoteType = NoteType.SIDENOTE
    name: str = "Sidenote"
    color: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def style(self) -> Optional[str]:
        """CSS-like style for the note label, or None for plain text."""
        parts = []
        if self.color:
            parts.append(f"color:{self.color}")
        if self.bold:
            parts.append("font-weight:bold")
        if self.italic:
            parts.append("font-style:italic")
        if self.underline:
            parts.append("text-decoration:underline")
        return ";".join(parts) or None


NOTE_TYPES: Dict[NoteType, NoteTypeInfo] = {
    NoteType.SIDENOTE: NoteTypeInfo(),
    NoteType.EDITING_NOTE: NoteTypeInfo(
        note_type=NoteType.EDITING_NOTE, name="Editing note", color="#FF0000"
    ),
    NoteType.OVERALL_EDITING_NOTE: NoteTypeInfo(
        note_type=NoteType.OVERALL_EDITING_NOTE, name="OVERALL EDITING NOTE", color="#FF0000"
    ),
    NoteType.ADDITION_NOTE: NoteTypeInfo(
        note_type=NoteType.ADDITION_NOTE, name="Add note", color="#3DAEFF", italic=True
    ),
    NoteType.INLINE_ADDITION_NOTE: NoteTypeInfo(
        note_type=NoteType.INLINE_ADDITION_NOTE, name="In-line add note", color="#3DAEFF"
    ),
}


class CommandStatus(Enum):
    """Outcome of a command run."""
    COMPLETED = "completed"
    ABORTED = "aborted"
    FAILED = "failed"
    NOT_IMPLEMENTED = "not_implemented"


@dataclass
class CommandResult:
    """Result of running a page command."""
    success: bool
    status: CommandStatus
    message: str = ""
    error: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


class AddNoteCommand:
    """
    Adds a labelled note box beside the outline the user is working in.

    Each run opens the page through the connection, builds the note in
    memory and commits the whole page once; on any failure nothing is
    committed.
    """

    def __init__(
        self,
        connection: DocumentConnection,
        notifier: Optional[Notifier] = None,
        config: Optional[NotesConfig] = None,
    ):
        self.connection = connection
        self.notifier = notifier or ConsoleNotifier()
        self.config = config or load_config()
        self.logger = logging.getLogger(__name__)
        self.page: Optional[Page] = None
        self._last_quote = ""

    @property
    def horizontal_offset(self) -> int:
        return self.config.horizontal_offset

    def note_type_info(self, note_type: NoteType) -> NoteTypeInfo:
        info = NOTE_TYPES[note_type]
        label = self.config.labels.get(note_type.value)
        if label:
            info = info.model_copy(update={"name": label})
        return info

    def execute(self, note_type: NoteType, quote: Optional[bool] = None) -> CommandResult:
        """
        Add a note of the given type to the page.

        Args:
            note_type: Kind of note to add
            quote: Quote the selected text into the note; defaults to config

        Returns:
            Command result; the page is committed only when it succeeded
        """
        if quote is None:
            quote = self.config.quote
        self._last_quote = ""

        try:
            with session(self.connection) as page:
                self.page = page

                if not page.confirm_body_context():
                    self.notifier.display("Place the cursor in the body of the page")
                    return CommandResult(
                        success=False,
                        status=CommandStatus.ABORTED,
                        error="Selection is not in the page body",
                    )

                PageNamespace.set(page.ns)

                if note_type == NoteType.INLINE_ADDITION_NOTE:
                    self.notifier.write("In-line notes are not implemented")
                    return CommandResult(
                        success=False,
                        status=CommandStatus.NOT_IMPLEMENTED,
                        error=f"{note_type.value} is not supported",
                    )

                info = self.note_type_info(note_type)
                overall = note_type == NoteType.OVERALL_EDITING_NOTE
                reference = page.selected_outline()

                note_box = self.create_note_box(info, reference, overall=overall, quote=quote)
                created = not page.contains(note_box)
                if created:
                    page.add_outline(note_box)

                self.connection.commit(page.element)

                quoted = self._last_quote != ""
                message = f"Added {info.name} {'with' if quoted else 'without'} quoting."
                self.notifier.write(message)
                x, y = note_box.get_position()
                return CommandResult(
                    success=True,
                    status=CommandStatus.COMPLETED,
                    message=message,
                    data={"created": created, "x": x, "y": y, "quoted": quoted},
                )

        except (DocumentConnectionError, CommitError) as e:
            self.notifier.display(str(e))
            return CommandResult(success=False, status=CommandStatus.FAILED, error=str(e))
        except Exception as e:
            self.logger.error(f"Failed to execute {type(self).__name__}: {e}", exc_info=True)
            self.notifier.write(f"Failed to execute {type(self).__name__}")
            return CommandResult(
                success=False,
                status=CommandStatus.FAILED,
                error=f"Add note failed: {e}",
                data={"exception_type": type(e).__name__},
            )
        finally:
            self.page = None

    def create_note_box(
        self,
        note_type: NoteTypeInfo,
        reference: Outline,
        overall: bool = False,
        quote: bool = True,
    ) -> Outline:
        """Find or create the note outline and add a note paragraph to it."""
        note_box = self.setup_note_box(reference, overall)

        paragraph = note_box.add_content(f"{note_type.name}: ")
        label = paragraph.runs()[-1]
        style = note_type.style()
        if style:
            label.set("style", style)

        self._last_quote = self.get_quote(reference) if quote else ""
        if self._last_quote:
            paragraph.add_text(self._last_quote)

        self.place_cursor(paragraph)
        return note_box

    def place_cursor(self, paragraph: Paragraph) -> None:
        """Add the placeholder run and make it the only selection on the page."""
        placeholder = paragraph.add_text(self.config.placeholder)
        if self.page is not None:
            self.page.deselect_all()
        paragraph.mark_selected(placeholder, "all")

    def setup_note_box(self, reference: Outline, overall: bool = False) -> Outline:
        """
        Get the outline a note beside the reference outline should go into.

        An existing outline containing the anchor point right of the
        reference is reused; otherwise a new, unattached outline is
        positioned closer to the reference.
        """
        if self.page is None:
            raise PreconditionError("A page must be open to place a note box")

        ref_x, ref_y, ref_width, _ = reference.get_all_positional_data()

        x = ref_x + ref_width + self.horizontal_offset * 2
        y = ref_y

        if not overall:
            # caret-relative placement is not supported; notes align with the reference top
            self.logger.debug("Placing note at the reference outline's top edge")

        for outline in self.page.outlines():
            if outline.overlap(x, y):
                self.logger.debug(f"Reusing outline at {outline.box} for anchor ({x},{y})")
                return outline

        note_box = Outline(namespace=reference.ns)
        note_box.set_position(ref_x + ref_width + self.horizontal_offset, y)
        return note_box

    def get_quote(self, source: Optional[Outline]) -> str:
        """Get the selected text of the source outline formatted as a quote prefix."""
        try:
            return quote_selection(source)
        except NothingSelectedError as e:
            self.notifier.display(str(e))
            return ""


def quote_selection(source: Optional[Outline]) -> str:
    """
    Wrap the selected text of an outline as ``"text" -> ``.

    Raises:
        NothingSelectedError: No outline is given or it has no selected text
    """
    if source is None:
        raise NothingSelectedError("Nothing selected to quote")
    selected_text = source.get_selected_text()
    if not selected_text:
        raise NothingSelectedError("Can't quote without a selection!")
    return f'"{selected_text}" -> '
