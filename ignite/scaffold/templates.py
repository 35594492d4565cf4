"""Template engine for scaffolded file content."""
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError

from ignite.core.config import PACKAGED_TEMPLATES_DIR
from ignite.core.errors import BuildError
from ignite.core.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Data handed to every template render."""
    database_type: str = ""
    use_sql_package: bool = False

    @classmethod
    def for_database(cls, database_type: str) -> "RenderContext":
        """Only postgres projects use the pgx SQL package."""
        return cls(database_type=database_type, use_sql_package=database_type == "postgres")

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


class TemplateEngine:
    """Loads template assets from a directory and renders them with Jinja2."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = Path(template_dir) if template_dir else PACKAGED_TEMPLATES_DIR
        self.jinja_env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render_template(self, asset_name: str, context: RenderContext) -> str:
        """Render ``asset_name`` from the template directory.

        Raises:
            BuildError: If the asset is missing or fails to render
        """
        template_path = self.template_dir / asset_name
        if not template_path.is_file():
            raise BuildError(template_path, "template asset not found")

        logger.debug(f"Rendering template {template_path}")
        try:
            template = self.jinja_env.from_string(template_path.read_text(encoding="utf-8"))
            return template.render(**context.as_dict())
        except TemplateError as e:
            raise BuildError(template_path, f"failed to render template ({e})") from e
