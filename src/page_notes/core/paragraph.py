"""
Paragraph (OE) block view.
"""

from __future__ import annotations

from typing import List, Optional, Union
from xml.etree import ElementTree as ET

from .nodes import NodeView, element_text


class Paragraph(NodeView):
    """A single content block inside an outline, holding text runs (T)."""

    tag = "OE"

    @classmethod
    def from_text(cls, text: str, namespace: Optional[str] = None) -> Paragraph:
        paragraph = cls(namespace=namespace)
        paragraph.add_text(text)
        return paragraph

    @classmethod
    def from_element(cls, content: ET.Element, namespace: Optional[str] = None) -> Paragraph:
        """Wrap arbitrary content in a new paragraph."""
        paragraph = cls(namespace=namespace)
        paragraph.add(content)
        return paragraph

    def add_text(self, text: str, selected: Optional[str] = None) -> ET.Element:
        """Append a text run and return it."""
        run = self.make("T", text=text)
        if selected is not None:
            run.set("selected", selected)
        return self.add(run)

    def append(self, content: Union[str, ET.Element]) -> Paragraph:
        if isinstance(content, str):
            self.add_text(content)
        else:
            self.add(content)
        return self

    def runs(self) -> List[ET.Element]:
        return self.children("T")

    def mark_selected(self, run: ET.Element, value: str = "all") -> ET.Element:
        run.set("selected", value)
        return run

    @property
    def text(self) -> str:
        return "".join(element_text(run) for run in self.runs())
