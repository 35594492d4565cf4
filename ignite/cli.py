#!/usr/bin/env python3
"""ignite CLI - bootstrap Go service projects."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ignite.cli_support import change_working_dir, handle_cli_error, print_info, print_success
from ignite.config.collector import collect_from_flags, collect_interactive
from ignite.core.config import IgniteSettings
from ignite.core.errors import IgniteError, ValidationError
from ignite.core.logger import get_logger, setup_logging
from ignite.scaffold.core import ScaffoldManager
from ignite.services.command_runner import CommandRunner

app = typer.Typer(name="ignite", add_completion=False)

console = Console()
logger = get_logger(__name__)


@app.command()
def init(
    project_name: str = typer.Argument(..., help="Name of the project to initialize"),
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Path to create project (defaults to current directory)"
    ),
    database: Optional[str] = typer.Option(
        None, "--database", "-d", help="Database type (one of: postgres, mysql)"
    ),
    controller: Optional[str] = typer.Option(
        None, "--controller", "-c", help="Controller type (one of: grpc, http)"
    ),
    with_workflow: bool = typer.Option(
        False, "--withWorkflow", help="Include a GitHub Actions workflow"
    ),
    with_dockerfile: bool = typer.Option(False, "--withDockerfile", help="Include a Dockerfile"),
    interactive: bool = typer.Option(False, "--interactive", help="Interactive mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Log file (default: .logs, or IGNITE_LOG_FILE)"
    ),
):
    """ignite initializes a new project.

    Usage examples:

        ignite my_project
        ignite my_project --interactive
        ignite my_project -d postgres -c http -p ./path/to/project

    Supported databases: postgres, mysql.
    Supported controllers: grpc, http.
    """
    if bool(database) != bool(controller):
        raise typer.BadParameter(
            "--database and --controller must be supplied together",
            param_hint="'--database' / '--controller'",
        )

    config = None
    if not interactive and database:
        # Validated before the log sink is opened
        try:
            config = collect_from_flags(
                path=path,
                database=database.lower(),
                controller=controller.lower(),
                with_workflow=with_workflow,
                with_dockerfile=with_dockerfile,
                verbose=verbose,
            )
        except ValidationError as e:
            handle_cli_error(e, console, verbose=verbose)

    settings = IgniteSettings.from_env()
    setup_logging(log_file or settings.log_file, verbose=verbose)

    try:
        if config is None:
            config = collect_interactive(path=path, verbose=verbose, console=console)

        project_path = change_working_dir(path)
        logger.info(f"Initializing project {project_name}")
        if verbose:
            print_info(console, f"Scaffolding into {project_path}")

        manager = ScaffoldManager(
            template_dir=settings.templates_dir,
            runner=CommandRunner(mock=settings.mock),
        )
        manager.scaffold_project(config.model_copy(update={"path": project_path}))
    except (IgniteError, OSError) as e:
        logger.error(f"Error: {e}")
        handle_cli_error(e, console, verbose=verbose)

    print_success(console, "Project initialized successfully!")


def main():
    app()


if __name__ == "__main__":
    main()
