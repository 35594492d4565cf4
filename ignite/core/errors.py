"""Error types raised by ignite operations."""
from typing import Iterable, Optional, Sequence


class IgniteError(Exception):
    """Base class for all ignite failures."""
    pass


class ValidationError(IgniteError):
    """Raised when a configuration value is not in its supported set."""

    def __init__(self, field: str, value: str, supported: Iterable[str]):
        self.field = field
        self.value = value
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported {field} '{value}'. "
            f"Supported types are: ({', '.join(self.supported)})"
        )


class BuildError(IgniteError):
    """Raised when the project tree cannot be materialized."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class ExternalCommandError(IgniteError):
    """Raised when an external command exits non-zero or cannot start."""

    def __init__(self, command: Sequence[str], returncode: Optional[int] = None):
        self.command = list(command)
        self.returncode = returncode
        rendered = " ".join(self.command)
        if returncode is None:
            super().__init__(f"failed to run '{rendered}'")
        else:
            super().__init__(f"'{rendered}' exited with status {returncode}")
