"""
Process-wide page namespace context.

Node views whose namespace is implied rather than passed explicitly read
it from here, so it must be set before such views are constructed.
"""

from __future__ import annotations

from typing import Optional, Tuple


# OneNote 2013 page schema
DEFAULT_NAMESPACE = "http://schemas.microsoft.com/office/onenote/2013/onenote"


class PageNamespace:
    """Holds the namespace of the page currently being edited."""

    _value: Optional[str] = None

    @classmethod
    def set(cls, namespace: str) -> None:
        cls._value = namespace

    @classmethod
    def get(cls) -> str:
        """Get the current namespace, raising if none has been set."""
        if cls._value is None:
            raise RuntimeError("PageNamespace must be set before creating page nodes")
        return cls._value

    @classmethod
    def reset(cls) -> None:
        cls._value = None


def qualify(namespace: str, local_name: str) -> str:
    """Build an ElementTree qualified tag name."""
    if not namespace:
        return local_name
    return f"{{{namespace}}}{local_name}"


def split_tag(tag: str) -> Tuple[str, str]:
    """Split a qualified tag into (namespace, local_name)."""
    if tag.startswith("{"):
        namespace, _, local_name = tag[1:].partition("}")
        return namespace, local_name
    return "", tag
