"""
Page document model: typed views over page nodes and layout geometry.
"""

from .geometry import Box, Point, Size, format_decimal, parse_decimal
from .namespace import DEFAULT_NAMESPACE, PageNamespace
from .nodes import NodeView
from .outline import OEChildren, Outline, find_selected_outline, overlaps, overlaps_point
from .page import Page
from .paragraph import Paragraph

__all__ = [
    "Box",
    "Point",
    "Size",
    "format_decimal",
    "parse_decimal",
    "DEFAULT_NAMESPACE",
    "PageNamespace",
    "NodeView",
    "OEChildren",
    "Outline",
    "find_selected_outline",
    "overlaps",
    "overlaps_point",
    "Page",
    "Paragraph",
]
