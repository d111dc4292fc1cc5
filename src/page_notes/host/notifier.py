"""
User-facing notification sink.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from rich.console import Console


class Notifier(Protocol):
    """Reports failures to the user and writes diagnostics."""

    def display(self, message: str) -> None:
        ...

    def write(self, line: str) -> None:
        ...


class ConsoleNotifier:
    """Shows messages on a rich console and writes diagnostics to the log."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.logger = logging.getLogger("page_notes")

    def display(self, message: str) -> None:
        self.logger.warning(message)
        self.console.print(f"[red]{message}[/red]")

    def write(self, line: str) -> None:
        self.logger.info(line)
