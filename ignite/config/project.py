"""Project configuration collected before scaffolding."""
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ignite.core.errors import ValidationError

SUPPORTED_DATABASES = ("postgres", "mysql")
SUPPORTED_CONTROLLERS = ("grpc", "http")

GRPC_CONTROLLER = "grpc"


def ensure_supported(field: str, value: str, supported: Iterable[str]) -> str:
    """Return ``value`` if empty or an exact member of ``supported``.

    Raises:
        ValidationError: If the value is not supported
    """
    supported = tuple(supported)
    if value and value not in supported:
        raise ValidationError(field, value, supported)
    return value


class ProjectConfig(BaseModel):
    """Validated, immutable scaffolding choices."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    path: Optional[Path] = None
    database_type: str = ""
    controller_type: str = ""
    with_workflow: bool = False
    with_dockerfile: bool = False
    verbose: bool = False

    @field_validator('database_type')
    @classmethod
    def validate_database_type(cls, v: str) -> str:
        return ensure_supported("database type", v, SUPPORTED_DATABASES)

    @field_validator('controller_type')
    @classmethod
    def validate_controller_type(cls, v: str) -> str:
        return ensure_supported("controller type", v, SUPPORTED_CONTROLLERS)

    @property
    def uses_grpc(self) -> bool:
        return self.controller_type == GRPC_CONTROLLER
