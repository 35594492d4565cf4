"""Unified logging for ignite with file sink and optional console mirror."""
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

DEFAULT_LOG_FILE = ".logs"
ROOT_LOGGER = "ignite"

# Handlers installed by setup_logging(), replaced on each call
_installed_handlers: List[logging.Handler] = []


def setup_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Send ignite logs to a file, mirroring them to the console when verbose.

    Args:
        log_file: Path to the log sink (defaults to .logs in the current directory)
        verbose: Also print every log record on the console

    Returns:
        Resolved path of the log file
    """
    root_logger = logging.getLogger(ROOT_LOGGER)

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    target_log_file = Path(log_file or DEFAULT_LOG_FILE).resolve()
    target_log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(target_log_file, mode="a")
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    _installed_handlers.append(file_handler)

    if verbose:
        console_handler = RichHandler(console=console, show_path=False)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _installed_handlers.append(console_handler)

    for handler in _installed_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    return target_log_file


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the ignite hierarchy.

    Output goes wherever setup_logging() pointed the root ``ignite`` logger.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
