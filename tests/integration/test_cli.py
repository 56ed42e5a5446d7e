"""
Integration tests for the notestore CLI.

Commands run end to end against a SQLite file selected through
DATABASE_URL.
"""

import logging

import pytest
from typer.testing import CliRunner

from notestore.cli import app

pytestmark = pytest.mark.integration

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_root_handlers():
    """The CLI callback reconfigures logging; put the test handlers back."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def initialized(database_file):
    """Database file with the schema created."""
    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0, result.stdout
    return database_file


class TestMainApp:
    """Tests for main app options."""

    def test_help(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Notes database CLI" in result.stdout

    def test_notes_help(self) -> None:
        result = runner.invoke(app, ["notes", "--help"])
        assert result.exit_code == 0
        assert "Note commands" in result.stdout


class TestDbCommands:
    """Tests for database commands."""

    def test_init_creates_database_file(self, database_file) -> None:
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0
        assert "Schema ready" in result.stdout
        assert database_file.exists()

    def test_purge_requires_confirmation(self, initialized) -> None:
        runner.invoke(app, ["notes", "add", "hello"])

        result = runner.invoke(app, ["db", "purge"], input="n\n")

        assert result.exit_code == 1
        shown = runner.invoke(app, ["notes", "show", "1"])
        assert "hello" in shown.stdout

    def test_purge_removes_tags(self, initialized) -> None:
        runner.invoke(app, ["notes", "add", "hello", "--tag", "greeting"])

        result = runner.invoke(app, ["db", "purge", "--yes"])

        assert result.exit_code == 0
        tags = runner.invoke(app, ["notes", "tags"])
        assert "No tags" in tags.stdout


class TestNoteCommands:
    """Tests for note commands."""

    def test_add_then_show(self, initialized) -> None:
        added = runner.invoke(
            app, ["notes", "add", "buy milk", "--title", "groceries", "--tag", "home"]
        )
        assert added.exit_code == 0
        assert "Created note 1" in added.stdout

        shown = runner.invoke(app, ["notes", "show", "1"])
        assert shown.exit_code == 0
        assert "buy milk" in shown.stdout
        assert "home" in shown.stdout

    def test_show_missing_note_fails(self, initialized) -> None:
        result = runner.invoke(app, ["notes", "show", "42"])

        assert result.exit_code == 1
        assert "Note 42 not found" in result.stdout

    def test_tag_lists_matching_notes(self, initialized) -> None:
        runner.invoke(app, ["notes", "add", "one", "--title", "first", "--tag", "x"])
        runner.invoke(app, ["notes", "add", "two", "--title", "second", "--tag", "y"])

        result = runner.invoke(app, ["notes", "tag", "x"])

        assert result.exit_code == 0
        assert "first" in result.stdout
        assert "second" not in result.stdout

    def test_delete_hides_note(self, initialized) -> None:
        runner.invoke(app, ["notes", "add", "temp"])

        deleted = runner.invoke(app, ["notes", "delete", "1"])
        assert deleted.exit_code == 0

        again = runner.invoke(app, ["notes", "delete", "1"])
        assert again.exit_code == 1
        assert "No live note 1" in again.stdout

        shown = runner.invoke(app, ["notes", "show", "1"])
        assert shown.exit_code == 1

    def test_storage_error_is_reported(self, database_file) -> None:
        result = runner.invoke(app, ["notes", "list"])

        assert result.exit_code == 1
        assert "Database error" in result.stdout
