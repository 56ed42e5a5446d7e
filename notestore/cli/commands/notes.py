"""
Note Commands.

Create, list, inspect and delete notes from the command line.
Each command runs one repository operation inside its own session scope.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from notestore.core.database import dispose_engine, session_scope
from notestore.core.exceptions import NotFoundError, StorageError
from notestore.models import Note, Tag
from notestore.repositories.note import NoteRepository

app = typer.Typer(help="Note commands")
console = Console()

T = TypeVar("T")


def _run(operation: Callable[[NoteRepository], Awaitable[T]]) -> T:
    """Run a repository operation in a fresh session scope."""

    async def _runner() -> T:
        try:
            async with session_scope() as session:
                return await operation(NoteRepository(session))
        finally:
            await dispose_engine()

    try:
        return asyncio.run(_runner())
    except NotFoundError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    except StorageError as e:
        console.print(f"[red]Database error: {e}[/red]")
        raise typer.Exit(1)


def _notes_table(notes: list[Note], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("Tags", style="magenta")
    table.add_column("Updated", style="dim")

    for note in notes:
        table.add_row(
            str(note.id),
            note.title,
            ", ".join(note.tag_names),
            note.updated_at.isoformat(timespec="seconds"),
        )
    return table


@app.command()
def add(
    content: str = typer.Argument(..., help="Note body"),
    title: str = typer.Option("", "--title", "-t", help="Note title"),
    tags: Optional[list[str]] = typer.Option(None, "--tag", help="Tag name (repeatable)"),
) -> None:
    """
    Create a note.

    Examples:
        notestore notes add "buy milk" --title groceries --tag home --tag todo
    """
    note = Note(
        title=title,
        content=content,
        tags=[Tag(name=name) for name in tags or []],
    )
    created = _run(lambda repo: repo.create_note(note))
    console.print(f"[green]Created note {created.id}[/green]")


@app.command("list")
def list_notes(
    page: int = typer.Option(1, "--page", "-p", help="1-based page number"),
    page_size: int = typer.Option(10, "--page-size", "-n", help="Rows per page (max 100)"),
) -> None:
    """
    List live notes one page at a time.

    Examples:
        notestore notes list --page 2 --page-size 20
    """
    notes = _run(lambda repo: repo.get_notes_with_pagination(page, page_size))
    console.print(_notes_table(notes, f"Notes (page {max(page, 1)})"))


@app.command()
def show(
    note_id: int = typer.Argument(..., help="Note id"),
) -> None:
    """
    Show one note with its tags.

    Examples:
        notestore notes show 42
    """
    note = _run(lambda repo: repo.require_note_by_id(note_id))
    console.print(Panel(
        f"{note.content}\n\n[dim]tags: {', '.join(note.tag_names) or '-'}[/dim]",
        title=f"#{note.id} {note.title}",
    ))


@app.command()
def tag(
    name: str = typer.Argument(..., help="Tag name"),
    page: int = typer.Option(1, "--page", "-p", help="1-based page number"),
    page_size: int = typer.Option(10, "--page-size", "-n", help="Rows per page (max 100)"),
) -> None:
    """
    List live notes carrying a tag.

    Examples:
        notestore notes tag work
    """
    notes = _run(lambda repo: repo.get_notes_by_tag(name, page, page_size))
    console.print(_notes_table(notes, f"Notes tagged '{name}'"))


@app.command()
def tags() -> None:
    """
    List every tag.

    Examples:
        notestore notes tags
    """
    all_tags = _run(lambda repo: repo.get_all_tags())
    if not all_tags:
        console.print("[dim]No tags[/dim]")
        return
    for item in all_tags:
        console.print(f"  {item.name}")


@app.command()
def delete(
    note_id: int = typer.Argument(..., help="Note id"),
) -> None:
    """
    Soft-delete a note.

    Examples:
        notestore notes delete 42
    """
    marked = _run(lambda repo: repo.delete_note_by_id(note_id))
    if not marked:
        console.print(f"[yellow]No live note {note_id}[/yellow]")
        raise typer.Exit(1)
    console.print(f"[green]Deleted note {note_id}[/green]")
