"""Core scaffolding workflow for Go service projects."""
from pathlib import Path
from typing import Optional

from ignite.config.project import ProjectConfig
from ignite.core.logger import get_logger
from ignite.scaffold.builder import TreeBuilder
from ignite.scaffold.descriptor import build_descriptor
from ignite.scaffold.templates import RenderContext, TemplateEngine
from ignite.services.command_runner import CommandRunner

logger = get_logger(__name__)


class ScaffoldManager:
    """Builds the project tree, then initializes the Go module and git repository."""

    def __init__(
        self,
        template_dir: Optional[Path] = None,
        builder: Optional[TreeBuilder] = None,
        runner: Optional[CommandRunner] = None,
    ):
        self.template_dir = template_dir
        self.builder = builder or TreeBuilder(engine=TemplateEngine(template_dir))
        self.runner = runner or CommandRunner()

    def scaffold_project(self, config: ProjectConfig) -> Path:
        """Scaffold a project as described by ``config``.

        Args:
            config: Validated project configuration; a missing path means the
                current working directory

        Returns:
            Path of the scaffolded project

        Raises:
            BuildError: If the tree cannot be created
            ExternalCommandError: If go or git initialization fails
        """
        project_path = Path(config.path or Path.cwd()).resolve()

        self.create_project_structure(config, project_path)
        self.initialize_modules(project_path)

        logger.info("Project initialized successfully!")
        return project_path

    def create_project_structure(self, config: ProjectConfig, project_path: Path) -> None:
        descriptor = build_descriptor(config, self.template_dir)
        context = RenderContext.for_database(config.database_type)
        self.builder.materialize(descriptor, project_path, context)

    def initialize_modules(self, project_path: Path) -> None:
        """Module name is the project directory's base name."""
        self.runner.init_go_module(project_path.name, cwd=project_path)
        self.runner.init_git_repository(cwd=project_path)
