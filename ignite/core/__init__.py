"""Core infrastructure shared by ignite modules."""
from ignite.core.errors import BuildError, ExternalCommandError, IgniteError, ValidationError

__all__ = [
    "IgniteError",
    "ValidationError",
    "BuildError",
    "ExternalCommandError",
]
