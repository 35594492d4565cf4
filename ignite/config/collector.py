"""Collect a ProjectConfig interactively or from command-line flags."""
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from ignite.config.project import (
    SUPPORTED_CONTROLLERS,
    SUPPORTED_DATABASES,
    ProjectConfig,
    ensure_supported,
)
from ignite.core.logger import get_logger

logger = get_logger(__name__)

AFFIRMATIVE_ANSWERS = ("yes", "y")


def ask_choice(label: str, choices, console: Optional[Console] = None) -> str:
    """Prompt until the answer is one of ``choices``."""
    return Prompt.ask(label, choices=list(choices), console=console)


def ask_yes_no(label: str, console: Optional[Console] = None) -> bool:
    """Only an exact "yes" or "y" counts as affirmative."""
    answer = Prompt.ask(label, default="", show_default=False, console=console)
    return answer in AFFIRMATIVE_ANSWERS


def collect_interactive(
    path: Optional[Path] = None,
    verbose: bool = False,
    console: Optional[Console] = None,
) -> ProjectConfig:
    """Ask the user for every scaffolding choice."""
    logger.info("Running in interactive mode.")

    database_type = ask_choice("Choose a database type", SUPPORTED_DATABASES, console)
    logger.info(f"Database: {database_type}")

    controller_type = ask_choice("Choose a controller type", SUPPORTED_CONTROLLERS, console)
    logger.info(f"Controller: {controller_type}")

    with_workflow = ask_yes_no(
        "Do you want to include a GitHub Actions workflow? (yes/no)", console
    )
    logger.info(f"Workflow: {with_workflow}")

    with_dockerfile = ask_yes_no("Do you want to include a Dockerfile? (yes/no)", console)
    logger.info(f"Dockerfile: {with_dockerfile}")

    return ProjectConfig(
        path=path,
        database_type=database_type,
        controller_type=controller_type,
        with_workflow=with_workflow,
        with_dockerfile=with_dockerfile,
        verbose=verbose,
    )


def collect_from_flags(
    path: Optional[Path] = None,
    database: Optional[str] = None,
    controller: Optional[str] = None,
    with_workflow: bool = False,
    with_dockerfile: bool = False,
    verbose: bool = False,
) -> ProjectConfig:
    """Validate flag values and build a ProjectConfig.

    Values are compared case-sensitively; callers normalize case first.

    Raises:
        ValidationError: If the database or controller is not supported
    """
    database_type = ensure_supported("database type", database or "", SUPPORTED_DATABASES)
    controller_type = ensure_supported(
        "controller type", controller or "", SUPPORTED_CONTROLLERS
    )

    return ProjectConfig(
        path=path,
        database_type=database_type,
        controller_type=controller_type,
        with_workflow=with_workflow,
        with_dockerfile=with_dockerfile,
        verbose=verbose,
    )
