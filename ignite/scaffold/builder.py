"""Materialize structure descriptors onto the filesystem."""
import threading
from pathlib import Path
from typing import Optional, Union

from ignite.core.errors import BuildError
from ignite.core.logger import get_logger
from ignite.scaffold.descriptor import Directory, EmptyDirectory, FileLiteral
from ignite.scaffold.registry import TemplateRegistry, default_registry
from ignite.scaffold.templates import RenderContext, TemplateEngine

logger = get_logger(__name__)


class TreeBuilder:
    """Walks a descriptor and creates its directories and files.

    Every filesystem mutation of a build happens under one lock; recursion
    into subdirectories does not hold it. The first failure aborts the
    build, and entries created before it are left in place.
    """

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        engine: Optional[TemplateEngine] = None,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.engine = engine or TemplateEngine()

    def materialize(
        self,
        descriptor: Directory,
        base_path: Union[str, Path],
        context: Optional[RenderContext] = None,
    ) -> None:
        """Create everything in ``descriptor`` under ``base_path``.

        Raises:
            BuildError: On the first filesystem, structure or template failure
        """
        lock = threading.Lock()
        base_path = Path(base_path)
        logger.info(f"Creating base directory: {base_path}")
        with lock:
            self._make_directory(base_path)
        self._build(descriptor, base_path, context or RenderContext(), lock)

    def _build(
        self,
        directory: Directory,
        base_path: Path,
        context: RenderContext,
        lock: threading.Lock,
    ) -> None:
        for name, node in directory.children.items():
            full_path = base_path / name

            if isinstance(node, Directory):
                logger.info(f"Creating directory: {full_path}")
                with lock:
                    self._make_directory(full_path)
                self._build(node, full_path, context, lock)
            elif isinstance(node, EmptyDirectory):
                logger.info(f"Creating empty directory: {full_path}")
                with lock:
                    self._make_directory(full_path)
            elif isinstance(node, FileLiteral):
                logger.info(f"Creating file: {full_path}")
                content = self._file_content(name, node, context)
                with lock:
                    self._write_file(full_path, content)
            else:
                raise BuildError(full_path, "invalid structure")

    def _file_content(self, name: str, node: FileLiteral, context: RenderContext) -> str:
        """Registry entries override the descriptor's literal."""
        spec = self.registry.lookup(name)
        if spec is None:
            return node.content
        if spec.is_template:
            return self.engine.render_template(spec.asset_name, context)
        return spec.content

    @staticmethod
    def _make_directory(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BuildError(path, f"failed to create directory ({e.strerror or e})") from e

    @staticmethod
    def _write_file(path: Path, content: str) -> None:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise BuildError(path, f"failed to create file ({e.strerror or e})") from e


def materialize(
    descriptor: Directory,
    base_path: Union[str, Path],
    context: Optional[RenderContext] = None,
    registry: Optional[TemplateRegistry] = None,
    engine: Optional[TemplateEngine] = None,
) -> None:
    """Shortcut for ``TreeBuilder(registry, engine).materialize(...)``."""
    TreeBuilder(registry, engine).materialize(descriptor, base_path, context)
