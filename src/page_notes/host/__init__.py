"""
Host collaborators: document connections and notification sinks.
"""

from .connection import (
    DocumentConnection,
    MemoryConnection,
    XmlFileConnection,
    get_current_outline,
    session,
)
from .notifier import ConsoleNotifier, Notifier

__all__ = [
    "DocumentConnection",
    "MemoryConnection",
    "XmlFileConnection",
    "get_current_outline",
    "session",
    "ConsoleNotifier",
    "Notifier",
]
