"""Run external tools (go, git) in the scaffolded project."""
import os
import subprocess
from pathlib import Path
from typing import Optional, Union

from ignite.core.errors import ExternalCommandError
from ignite.core.logger import get_logger

logger = get_logger(__name__)


class CommandRunner:
    """Passes commands through to the system, or only logs them in mock mode."""

    def __init__(self, mock: Optional[bool] = None):
        if mock is None:
            mock = os.environ.get("IGNITE_MOCK") == "1"
        self.mock = mock

    def run(self, name: str, *args: str, cwd: Optional[Union[str, Path]] = None) -> None:
        """Run ``name`` with ``args``, streaming its output to the terminal.

        Raises:
            ExternalCommandError: If the command is missing or exits non-zero
        """
        cmd = [name, *args]

        if self.mock:
            logger.info(f"MOCK: Would run {' '.join(cmd)}")
            return

        logger.debug(f"Running {' '.join(cmd)} in {cwd or os.getcwd()}")
        try:
            subprocess.run(cmd, cwd=cwd, check=True)
        except FileNotFoundError as e:
            logger.error(f"Command not found: {name}")
            raise ExternalCommandError(cmd) from e
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed with status {e.returncode}: {' '.join(cmd)}")
            raise ExternalCommandError(cmd, e.returncode) from e

    def init_go_module(self, module_name: str, cwd: Optional[Union[str, Path]] = None) -> None:
        logger.info("Initializing go module...")
        self.run("go", "mod", "init", module_name, cwd=cwd)

    def init_git_repository(self, cwd: Optional[Union[str, Path]] = None) -> None:
        logger.info("Initializing git repository...")
        self.run("git", "init", cwd=cwd)
