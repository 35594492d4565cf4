"""Shared utilities for the ignite CLI."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console


def change_working_dir(path: Optional[Path]) -> Path:
    """Change into ``path`` (created if missing) and return the new cwd."""
    if path is None:
        return Path.cwd()
    path.mkdir(parents=True, exist_ok=True)
    os.chdir(path)
    return Path.cwd()


def handle_cli_error(e: Exception, console: Console, verbose: bool = False, exit_code: int = 1) -> None:
    """Print ``e`` as a one-line error (traceback too when verbose) and exit."""
    console.print(f"[red]Error:[/red] {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Green check line, used once the project is ready."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    console.print(f"[cyan]{prefix}[/cyan] {message}")
