"""Pytest configuration and shared fixtures."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pytest

from page_notes import config as config_module
from page_notes.config import ConfigManager, NotesConfig
from page_notes.core.namespace import DEFAULT_NAMESPACE, PageNamespace

NS = DEFAULT_NAMESPACE


class RecordingNotifier:
    """Collects user messages and diagnostics instead of printing them."""

    def __init__(self):
        self.displayed: List[str] = []
        self.written: List[str] = []

    def display(self, message: str) -> None:
        self.displayed.append(message)

    def write(self, line: str) -> None:
        self.written.append(line)


def outline_xml(
    position: Optional[Tuple[int, int]] = None,
    size: Optional[Tuple[int, int]] = None,
    texts: Sequence[Tuple[str, Optional[str]]] = (),
    selected: Optional[str] = None,
) -> str:
    """Build the XML of one outline; texts are (text, selected) pairs."""
    parts = []
    if position is not None:
        parts.append(f'<one:Position x="{position[0]}.0" y="{position[1]}.0" z="0"/>')
    if size is not None:
        parts.append(f'<one:Size width="{size[0]}.0" height="{size[1]}.0"/>')
    blocks = []
    for text, text_selected in texts:
        attr = f' selected="{text_selected}"' if text_selected else ""
        blocks.append(f"<one:OE><one:T{attr}>{text}</one:T></one:OE>")
    parts.append(f"<one:OEChildren>{''.join(blocks)}</one:OEChildren>")
    attr = f' selected="{selected}"' if selected else ""
    return f"<one:Outline{attr}>{''.join(parts)}</one:Outline>"


def page_xml(*outlines: str, title_selected: bool = False) -> str:
    attr = ' selected="all"' if title_selected else ""
    title = f"<one:Title><one:OE><one:T{attr}>Chapter one</one:T></one:OE></one:Title>"
    return f'<one:Page xmlns:one="{NS}" name="Chapter one">{title}{"".join(outlines)}</one:Page>'


@pytest.fixture(autouse=True)
def page_namespace():
    """Every test starts with the default page namespace set."""
    PageNamespace.set(NS)
    yield NS
    PageNamespace.reset()


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path):
    """Avoid loading the user's config file and environment in tests."""
    for key in (
        "PAGE_NOTES_OFFSET",
        "PAGE_NOTES_PLACEHOLDER",
        "PAGE_NOTES_QUOTE",
        "PAGE_NOTES_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config_module, "_config_manager", ConfigManager(tmp_path / "config"))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def notes_config() -> NotesConfig:
    return NotesConfig()


@pytest.fixture
def reference_page() -> str:
    """A page whose selected outline sits at (100,50) sized 200x40."""
    return page_xml(
        outline_xml(
            position=(100, 50),
            size=(200, 40),
            texts=[("hello", "all"), ("world", None)],
            selected="partial",
        )
    )
