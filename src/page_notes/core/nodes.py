"""
Typed views over generic page tree nodes.

The page document is an ``xml.etree.ElementTree`` tree. Views hold a
reference to an element without owning it; the tree owns its nodes, so a
view can be rebuilt over the same element at any time.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional
from xml.etree import ElementTree as ET

from .namespace import PageNamespace, qualify, split_tag


class NodeView:
    """
    Base class for typed, non-owning views over a page element.

    Subclasses set ``tag`` to the local name of the element they wrap.
    """

    tag: str = ""

    def __init__(self, element: Optional[ET.Element] = None, namespace: Optional[str] = None):
        if namespace is None:
            if element is not None:
                namespace = split_tag(element.tag)[0]
            else:
                namespace = PageNamespace.get()
        self.ns = namespace
        if element is None:
            element = ET.Element(self.qname(self.tag))
        self.element = element

    def qname(self, local_name: str) -> str:
        """Qualify a local name with this view's namespace."""
        return qualify(self.ns, local_name)

    @property
    def local_name(self) -> str:
        return split_tag(self.element.tag)[1]

    def make(self, local_name: str, attributes: Optional[Dict[str, str]] = None, text: Optional[str] = None) -> ET.Element:
        """Create a detached element in this view's namespace."""
        element = ET.Element(self.qname(local_name), attributes or {})
        if text is not None:
            element.text = text
        return element

    def child(self, local_name: str) -> Optional[ET.Element]:
        """Get the first direct child with the given local name."""
        return self.element.find(self.qname(local_name))

    def children(self, local_name: str) -> List[ET.Element]:
        return self.element.findall(self.qname(local_name))

    def descendants(self, local_name: str) -> Iterator[ET.Element]:
        """Iterate descendants (excluding self) in document order."""
        name = self.qname(local_name)
        for element in self.element.iter(name):
            if element is not self.element:
                yield element

    def add_first(self, element: ET.Element) -> ET.Element:
        self.element.insert(0, element)
        return element

    def add(self, element: ET.Element) -> ET.Element:
        self.element.append(element)
        return element

    def get(self, attribute: str, default: Optional[str] = None) -> Optional[str]:
        return self.element.get(attribute, default)

    def set(self, attribute: str, value: str) -> None:
        self.element.set(attribute, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeView):
            return NotImplemented
        return self.element is other.element

    def __hash__(self) -> int:
        return id(self.element)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.local_name}>"


def is_selected(element: ET.Element) -> bool:
    """True when the element carries a ``selected`` attribute other than 'none'."""
    value = element.get("selected")
    return value is not None and value != "none"


def element_text(element: ET.Element) -> str:
    """Concatenate all text contained in an element."""
    return "".join(element.itertext())
