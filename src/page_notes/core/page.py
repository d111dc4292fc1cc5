"""
Page document view.

Wraps the root element of a page document and exposes the outlines laid
out directly beneath it along with page-level selection helpers.
"""

from __future__ import annotations

from typing import List, Optional
from xml.etree import ElementTree as ET

from .namespace import split_tag
from .nodes import NodeView, is_selected
from .outline import Outline, find_selected_outline


class Page(NodeView):
    """The root of a page document."""

    tag = "Page"

    @classmethod
    def from_root(cls, root: ET.Element) -> Page:
        return cls(root, split_tag(root.tag)[0])

    @property
    def title(self) -> Optional[ET.Element]:
        return self.child("Title")

    def outlines(self) -> List[Outline]:
        """Outlines directly under the page root, in document order."""
        return [Outline(element, self.ns) for element in self.children("Outline")]

    def add_outline(self, outline: Outline) -> Outline:
        self.add(outline.element)
        return outline

    def contains(self, outline: Outline) -> bool:
        return any(element is outline.element for element in self.element)

    def selected_outline(self) -> Optional[Outline]:
        return find_selected_outline(self.element, self.ns)

    def selected_elements(self) -> List[ET.Element]:
        return [element for element in self.element.iter() if is_selected(element)]

    def deselect_all(self) -> int:
        """Remove every selection marker on the page, returning how many were cleared."""
        cleared = 0
        for element in self.element.iter():
            if "selected" in element.attrib:
                del element.attrib["selected"]
                cleared += 1
        return cleared

    def confirm_body_context(self) -> bool:
        """True when the selection lies in the page body rather than the title."""
        title = self.title
        if title is not None and any(is_selected(element) for element in title.iter()):
            return False
        return self.selected_outline() is not None
