"""
Outline region view.

An Outline is a positioned, sized content area on a page. It owns exactly
one OEChildren container holding its paragraphs, and optional Position and
Size metadata children that always precede the content.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union
from xml.etree import ElementTree as ET

from .geometry import Box, Point, Size, format_decimal, parse_decimal
from .namespace import qualify
from .nodes import NodeView, element_text, is_selected
from .paragraph import Paragraph


logger = logging.getLogger(__name__)


class OEChildren(NodeView):
    """Ordered container of the paragraphs inside an outline."""

    tag = "OEChildren"

    def paragraphs(self) -> List[Paragraph]:
        return [Paragraph(oe, self.ns) for oe in self.children("OE")]

    def add_content(self, content: Union[str, ET.Element], index: int = -1) -> Optional[Paragraph]:
        """
        Add content as a new paragraph, or amend an existing one.

        Args:
            content: Text for a new T run, or an element to insert as-is
            index: -1 appends a new paragraph; otherwise the paragraph at
                this position is amended

        Returns:
            The created or amended paragraph, or None if index is out of range
        """
        if index == -1:
            if isinstance(content, str):
                paragraph = Paragraph.from_text(content, self.ns)
            else:
                paragraph = Paragraph.from_element(content, self.ns)
            self.add(paragraph.element)
            return paragraph

        blocks = self.children("OE")
        if not 0 <= index < len(blocks):
            logger.debug(f"No paragraph at index {index} ({len(blocks)} present)")
            return None

        paragraph = Paragraph(blocks[index], self.ns)
        paragraph.append(content)
        return paragraph


class Outline(NodeView):
    """A content region on the page with position, size and paragraphs."""

    tag = "Outline"

    def __init__(self, element: Optional[ET.Element] = None, namespace: Optional[str] = None):
        created = element is None
        super().__init__(element, namespace)
        if created:
            self.add(self.make("OEChildren"))

    @property
    def oe_children(self) -> OEChildren:
        """The content container, added on first use to outlines lacking one."""
        container = self.child("OEChildren")
        if container is None:
            container = self.add(self.make("OEChildren"))
        return OEChildren(container, self.ns)

    @classmethod
    def from_content(cls, content: ET.Element, namespace: Optional[str] = None) -> Outline:
        """
        Create a new outline holding the given content.

        If content is itself an Outline its paragraphs go into the new
        outline's container and its metadata ahead of it; otherwise content
        is added directly.
        """
        outline = cls(namespace=namespace)
        if content.tag == outline.qname("Outline"):
            metadata = 0
            for child in list(content):
                if child.tag == outline.qname("OEChildren"):
                    for block in list(child):
                        child.remove(block)
                        outline.oe_children.add(block)
                else:
                    outline.element.insert(metadata, child)
                    metadata += 1
                content.remove(child)
        else:
            outline.add(content)
        return outline

    # Positional data

    def _metadata_value(self, child_name: str, attribute: str) -> int:
        child = self.child(child_name)
        if child is None:
            return 0
        return parse_decimal(child.get(attribute))

    def get_position_x(self) -> int:
        return self._metadata_value("Position", "x")

    def get_position_y(self) -> int:
        return self._metadata_value("Position", "y")

    def get_position(self) -> Tuple[int, int]:
        return self.get_position_x(), self.get_position_y()

    def set_position(self, x: int = 0, y: int = 0) -> None:
        position = self.child("Position")
        if position is None:
            position = self.add_first(self.make("Position"))
        position.set("x", format_decimal(x))
        position.set("y", format_decimal(y))

    def get_width(self) -> int:
        return self._metadata_value("Size", "width")

    def get_height(self) -> int:
        return self._metadata_value("Size", "height")

    def get_size(self) -> Tuple[int, int]:
        return self.get_width(), self.get_height()

    def set_size(self, width: int, height: int = 0) -> None:
        """Set the size; height is only written when greater than zero."""
        size = self.child("Size")
        if size is None:
            size = self.add_first(self.make("Size"))
        size.set("width", format_decimal(width))
        if height > 0:
            size.set("height", format_decimal(height))

    def get_all_positional_data(self) -> Tuple[int, int, int, int]:
        x, y = self.get_position()
        width, height = self.get_size()
        return x, y, width, height

    def set_all_positional_data(self, x: int, y: int, width: int, height: int) -> None:
        self.set_position(x, y)
        self.set_size(width, height)

    @property
    def position(self) -> Point:
        return Point(*self.get_position())

    @property
    def size(self) -> Size:
        return Size(*self.get_size())

    @property
    def box(self) -> Box:
        return Box(*self.get_all_positional_data())

    def overlap(self, other_or_x: Union[Outline, int], y: Optional[int] = None) -> bool:
        """Overlap test against another outline or against a point."""
        if isinstance(other_or_x, Outline):
            return overlaps(self, other_or_x)
        if y is None:
            raise TypeError("overlap() with an x coordinate requires y")
        return overlaps_point(self, other_or_x, y)

    # Content

    def add_content(self, content: Union[str, ET.Element], index: int = -1) -> Optional[Paragraph]:
        if index != -1 and self.child("OEChildren") is None:
            return None
        return self.oe_children.add_content(content, index)

    def paragraphs(self) -> List[Paragraph]:
        container = self.child("OEChildren")
        if container is None:
            return []
        return OEChildren(container, self.ns).paragraphs()

    # Selection

    def get_selected_text_nodes(self) -> List[ET.Element]:
        return [run for run in self.descendants("T") if is_selected(run)]

    def get_selected_text(self) -> str:
        """Get the selected text in this outline, one run per line."""
        return "\n".join(element_text(run) for run in self.get_selected_text_nodes())

    @property
    def is_selected(self) -> bool:
        return is_selected(self.element)


def overlaps_point(outline: Outline, x: int, y: int) -> bool:
    """True if (x, y) lies inside the outline's box, edges included."""
    return outline.box.contains(x, y)


def overlaps(first: Outline, second: Outline) -> bool:
    """
    True if either outline's position point lies inside the other's box.

    Only the corner points are tested, so two boxes that cross without
    either corner falling inside the other are not reported.
    """
    x, y = first.get_position()
    if overlaps_point(second, x, y):
        return True
    x, y = second.get_position()
    return overlaps_point(first, x, y)


def find_selected_outline(root: ET.Element, namespace: str) -> Optional[Outline]:
    """Find the first outline on the page flagged as selected."""
    for element in root.iter(qualify(namespace, "Outline")):
        if is_selected(element):
            return Outline(element, namespace)
    return None
