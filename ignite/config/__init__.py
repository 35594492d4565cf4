"""Project configuration collection."""
from ignite.config.collector import collect_from_flags, collect_interactive
from ignite.config.project import (
    SUPPORTED_CONTROLLERS,
    SUPPORTED_DATABASES,
    ProjectConfig,
)

__all__ = [
    "ProjectConfig",
    "SUPPORTED_DATABASES",
    "SUPPORTED_CONTROLLERS",
    "collect_interactive",
    "collect_from_flags",
]
