"""ignite runtime settings."""
import os
from dataclasses import dataclass, field
from pathlib import Path

from ignite.core.logger import DEFAULT_LOG_FILE

PACKAGED_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


@dataclass
class IgniteSettings:
    """Runtime settings for ignite.

    Attributes:
        log_file: Log sink, relative paths resolve against the invocation directory
        templates_dir: Directory holding skeleton.yml and the *.txt template assets
        mock: Log external commands instead of running them
    """

    log_file: str = DEFAULT_LOG_FILE
    templates_dir: Path = field(default_factory=lambda: PACKAGED_TEMPLATES_DIR)
    mock: bool = False

    @classmethod
    def from_env(cls) -> "IgniteSettings":
        """Create settings from environment variables.

        Environment variables:
            IGNITE_LOG_FILE: Log file path
            IGNITE_TEMPLATES_DIR: Template assets directory
            IGNITE_MOCK: Set to 1 to skip external commands
        """
        templates_dir = os.getenv("IGNITE_TEMPLATES_DIR")
        return cls(
            log_file=os.getenv("IGNITE_LOG_FILE", DEFAULT_LOG_FILE),
            templates_dir=Path(templates_dir) if templates_dir else PACKAGED_TEMPLATES_DIR,
            mock=os.getenv("IGNITE_MOCK") == "1",
        )
