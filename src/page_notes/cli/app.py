"""
Main CLI application for page-notes.

Provides a Typer-based command-line interface for adding notes to page
documents stored as XML files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..commands.add_note import AddNoteCommand, CommandStatus, NoteType
from ..config import get_config_manager, load_config
from ..errors import DocumentConnectionError
from ..host.connection import XmlFileConnection, get_current_outline, session
from ..host.notifier import ConsoleNotifier

# Initialize Typer app
app = typer.Typer(
    name="page-notes",
    help="Add editing notes and sidenotes to page documents",
    add_completion=False,
    rich_markup_mode="rich"
)

# Global console for rich output
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default from config)"),
) -> None:
    """
    Configure logging for every command.
    """
    level = (log_level or load_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _check_page_file(page_file: Path) -> None:
    if not page_file.exists():
        console.print(f"[red]Error: File not found: {page_file}[/red]")
        raise typer.Exit(1)


@app.command("add-note")
def add_note(
    page_file: Path = typer.Argument(..., help="Path to the page XML document"),
    note_type: NoteType = typer.Option(NoteType.SIDENOTE, "--type", "-t", help="Kind of note to add"),
    quote: Optional[bool] = typer.Option(None, "--quote/--no-quote", help="Quote the selected text"),
) -> None:
    """
    Add a note beside the selected outline.

    The note goes into an existing outline at the note position when there
    is one, otherwise a new outline is created to the right.
    """
    _check_page_file(page_file)

    command = AddNoteCommand(
        XmlFileConnection(page_file),
        notifier=ConsoleNotifier(console),
    )
    result = command.execute(note_type, quote=quote)

    if result.success:
        where = "new outline" if result.data.get("created") else "existing outline"
        console.print(f"[green]{result.message}[/green] ({where} at {result.data['x']},{result.data['y']})")
        return

    if result.status == CommandStatus.NOT_IMPLEMENTED:
        console.print(f"[yellow]{result.error}[/yellow]")
    else:
        console.print(f"[red]Error: {result.error}[/red]")
    raise typer.Exit(1)


@app.command()
def show(
    page_file: Path = typer.Argument(..., help="Path to the page XML document"),
) -> None:
    """
    List the outlines on a page with their layout.
    """
    _check_page_file(page_file)

    try:
        with session(XmlFileConnection(page_file)) as page:
            outlines = page.outlines()

            table = Table(title=f"Outlines in {page_file.name}", show_header=True)
            table.add_column("#", style="cyan")
            table.add_column("Position", style="green")
            table.add_column("Size", style="green")
            table.add_column("Paragraphs", style="white")
            table.add_column("Selected", style="yellow")

            for index, outline in enumerate(outlines):
                position, size = outline.position, outline.size
                table.add_row(
                    str(index),
                    f"{position.x},{position.y}",
                    f"{size.width}x{size.height}",
                    str(len(outline.paragraphs())),
                    "yes" if outline.is_selected else "",
                )
    except DocumentConnectionError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(table)


@app.command()
def selected(
    page_file: Path = typer.Argument(..., help="Path to the page XML document"),
) -> None:
    """
    Show the text selected in the current outline.
    """
    _check_page_file(page_file)

    outline = get_current_outline(XmlFileConnection(page_file))
    if outline is None:
        console.print("[yellow]No outline is selected[/yellow]")
        return

    text = outline.get_selected_text()
    if not text:
        console.print("[yellow]The selected outline has no selected text[/yellow]")
        return

    console.print(Panel(text, title="Selected text", border_style="blue"))


@app.command()
def config(
    show_config: bool = typer.Option(False, "--show", help="Show current configuration"),
    create_default: bool = typer.Option(False, "--create-default", help="Create default config file"),
) -> None:
    """
    Manage page-notes configuration.
    """
    config_manager = get_config_manager()

    if create_default:
        path = config_manager.create_default_config()
        console.print(f"[green]Created default configuration at {path}[/green]")
        return

    if show_config:
        current = load_config()
        table = Table(title="Configuration", show_header=False)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Config File", str(config_manager.config_file))
        table.add_row("Horizontal Offset", str(current.horizontal_offset))
        table.add_row("Placeholder", current.placeholder)
        table.add_row("Quote", "Yes" if current.quote else "No")
        table.add_row("Log Level", current.log_level)
        for key, label in current.labels.items():
            table.add_row(f"Label: {key}", label)
        console.print(table)
        return

    console.print("Use [cyan]page-notes config --show[/cyan] to see full configuration")
    console.print("Use [cyan]page-notes config --create-default[/cyan] to create a default config file")


if __name__ == "__main__":
    app()
