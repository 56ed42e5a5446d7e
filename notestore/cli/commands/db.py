"""
Database Commands.

Commands for bootstrapping and clearing the notes database.
"""

import asyncio

import typer
from rich.console import Console

from notestore.core.database import create_schema, dispose_engine, session_scope
from notestore.core.exceptions import StorageError
from notestore.repositories.note import NoteRepository

app = typer.Typer(help="Database commands")
console = Console()


@app.command()
def init() -> None:
    """
    Create the notes, tags and note_tags tables if they do not exist.

    Examples:
        notestore db init
    """
    try:
        asyncio.run(_init())
    except StorageError as e:
        console.print(f"[red]Database error: {e}[/red]")
        raise typer.Exit(1)
    console.print("[green]Schema ready[/green]")


async def _init() -> None:
    try:
        await create_schema()
    finally:
        await dispose_engine()


@app.command()
def purge(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    Physically delete every note and tag, including soft-deleted notes.

    Examples:
        notestore db purge --yes
    """
    if not yes:
        typer.confirm("Delete ALL notes and tags permanently?", abort=True)
    try:
        asyncio.run(_purge())
    except StorageError as e:
        console.print(f"[red]Database error: {e}[/red]")
        raise typer.Exit(1)
    console.print("[green]All notes and tags removed[/green]")


async def _purge() -> None:
    try:
        async with session_scope() as session:
            await NoteRepository(session).delete_all_notes()
    finally:
        await dispose_engine()
