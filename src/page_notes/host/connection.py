"""
Connections to the host that supplies and persists page documents.

A connection is acquired for the duration of one command through
``session()``, which always releases it, and commits only when asked to.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Protocol, Tuple
from xml.etree import ElementTree as ET

from ..core.namespace import split_tag
from ..core.outline import Outline, find_selected_outline
from ..core.page import Page
from ..errors import CommitError, DocumentConnectionError


logger = logging.getLogger(__name__)

NAMESPACE_PREFIX = "one"


class DocumentConnection(Protocol):
    """Contract for a host document connection."""

    def open(self) -> Tuple[ET.Element, str]:
        """Load the page and return its root element and namespace."""
        ...

    def commit(self, root: ET.Element) -> None:
        """Persist the page document."""
        ...

    def close(self) -> None:
        ...


def _parse(source: str) -> Tuple[ET.Element, str]:
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise DocumentConnectionError(f"Page document is not well-formed: {e}") from e
    return root, split_tag(root.tag)[0]


def _serialize(root: ET.Element) -> str:
    namespace = split_tag(root.tag)[0]
    if namespace:
        ET.register_namespace(NAMESPACE_PREFIX, namespace)
    return ET.tostring(root, encoding="unicode")


class XmlFileConnection:
    """Reads and writes a page document stored as an XML file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.is_open = False

    def open(self) -> Tuple[ET.Element, str]:
        if not self.path.exists():
            raise DocumentConnectionError(f"Page file not found: {self.path}")
        try:
            source = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentConnectionError(f"Could not read page file {self.path}: {e}") from e
        root, namespace = _parse(source)
        self.is_open = True
        logger.debug(f"Opened page {self.path} (namespace {namespace!r})")
        return root, namespace

    def commit(self, root: ET.Element) -> None:
        if not self.is_open:
            raise CommitError("Cannot commit a page that was not opened")
        try:
            self.path.write_text(
                '<?xml version="1.0" encoding="utf-8"?>\n' + _serialize(root),
                encoding="utf-8",
            )
        except OSError as e:
            raise CommitError(f"Could not write page file {self.path}: {e}") from e
        logger.info(f"Committed page {self.path}")

    def close(self) -> None:
        self.is_open = False


class MemoryConnection:
    """Keeps a page document as an XML string in memory."""

    def __init__(self, source: str):
        self.source = source
        self.commits = 0
        self.is_open = False

    def open(self) -> Tuple[ET.Element, str]:
        root, namespace = _parse(self.source)
        self.is_open = True
        return root, namespace

    def commit(self, root: ET.Element) -> None:
        if not self.is_open:
            raise CommitError("Cannot commit a page that was not opened")
        self.source = _serialize(root)
        self.commits += 1

    def close(self) -> None:
        self.is_open = False


@contextmanager
def session(connection: DocumentConnection) -> Iterator[Page]:
    """
    Open the page for one command and release the connection on every exit path.

    Nothing is committed here; the command commits explicitly once all of
    its changes are in place.
    """
    root, _ = connection.open()
    try:
        yield Page.from_root(root)
    finally:
        connection.close()


def get_current_outline(connection: DocumentConnection) -> Optional[Outline]:
    """
    Get the outline currently selected on the page behind the connection.

    Returns None when the page cannot be opened or nothing is selected.
    """
    try:
        with session(connection) as page:
            return find_selected_outline(page.element, page.ns)
    except DocumentConnectionError as e:
        logger.warning(f"Could not look up the current outline: {e}")
        return None
