"""Tests for CLI helper functions."""
import pytest
import typer
from rich.console import Console

from ignite.cli_support import change_working_dir, handle_cli_error, print_success
from ignite.core.errors import BuildError


def test_handle_cli_error_prints_and_exits():
    console = Console(record=True, width=200)

    with pytest.raises(typer.Exit) as exc_info:
        handle_cli_error(BuildError("/tmp/x", "failed to create file"), console, exit_code=3)

    assert exc_info.value.exit_code == 3
    assert "Error: failed to create file: /tmp/x" in console.export_text()


def test_print_success():
    console = Console(record=True, width=200)
    print_success(console, "Project initialized successfully!")
    assert "✓ Project initialized successfully!" in console.export_text()


def test_change_working_dir_creates_target(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "a" / "b"

    assert change_working_dir(target) == target.resolve()
    assert change_working_dir(None) == target.resolve()
