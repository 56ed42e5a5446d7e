"""
notestore CLI.

Operator command-line interface built with Typer for type-safe commands
and Rich for formatted output.

Usage:
    notestore --help
    notestore db init
    notestore notes add "hello" --tag greeting
    notestore notes list --page 1 --page-size 20
    notestore notes tag greeting
    notestore --debug notes show 1
"""

import typer
from rich.console import Console

from notestore.cli.commands import db_app, notes_app
from notestore.core.config import find_project_root
from notestore.core.logging import setup_logging

app = typer.Typer(
    name="notestore",
    help="Notes database CLI - schema bootstrap, note and tag queries.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(db_app, name="db")
app.add_typer(notes_app, name="notes")


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    notestore CLI.

    Must be run from inside a project containing .project_root and
    config/settings/.
    """
    try:
        find_project_root()
    except RuntimeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
