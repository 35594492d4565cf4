"""Structure descriptors: declarative trees of directories and files.

A descriptor is built from three node kinds:

- ``Directory`` holds named children and is walked recursively
- ``EmptyDirectory`` is created without contents
- ``FileLiteral`` is a file with literal content (possibly empty)

The raw form used by ``skeleton.yml`` maps onto these: a mapping is a
directory, ``null`` an empty directory and a string a file.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ignite.config.project import ProjectConfig
from ignite.core.config import PACKAGED_TEMPLATES_DIR
from ignite.core.errors import BuildError
from ignite.core.logger import get_logger

logger = get_logger(__name__)

SKELETON_FILE = "skeleton.yml"

DATABASE_SUBDIRECTORIES = ("generated", "migrations", "queries", "mock")
GRPC_SUBDIRECTORIES = ("generated", "proto")


@dataclass
class Directory:
    children: Dict[str, "Node"] = field(default_factory=dict)


@dataclass(frozen=True)
class EmptyDirectory:
    pass


@dataclass(frozen=True)
class FileLiteral:
    content: str = ""


Node = Union[Directory, EmptyDirectory, FileLiteral]


def empty_directories(*names: str) -> Directory:
    """Directory containing one empty subdirectory per name."""
    return Directory({name: EmptyDirectory() for name in names})


def from_raw(raw: Any, path: str = ".") -> Node:
    """Convert a raw mapping (e.g. parsed YAML) into descriptor nodes.

    Raises:
        BuildError: If a value is not a mapping, None or a string
    """
    if raw is None:
        return EmptyDirectory()
    if isinstance(raw, str):
        return FileLiteral(raw)
    if isinstance(raw, dict):
        children = {}
        for name, value in raw.items():
            children[str(name)] = from_raw(value, f"{path}/{name}")
        return Directory(children)
    raise BuildError(path, f"invalid structure (unsupported {type(raw).__name__} value)")


def to_raw(node: Node) -> Any:
    """Inverse of from_raw, handy for dumping a descriptor as YAML."""
    if isinstance(node, Directory):
        return {name: to_raw(child) for name, child in node.children.items()}
    if isinstance(node, EmptyDirectory):
        return None
    return node.content


def load_skeleton(templates_dir: Optional[Path] = None) -> Directory:
    """Load the default project skeleton from ``skeleton.yml``.

    Raises:
        BuildError: If the skeleton is missing or not a mapping
    """
    skeleton_path = Path(templates_dir or PACKAGED_TEMPLATES_DIR) / SKELETON_FILE
    if not skeleton_path.is_file():
        raise BuildError(skeleton_path, "skeleton not found")

    with open(skeleton_path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BuildError(skeleton_path, f"invalid skeleton YAML ({e})") from e

    root = from_raw(raw or {}, str(skeleton_path))
    if not isinstance(root, Directory):
        raise BuildError(skeleton_path, "skeleton must be a mapping")
    return root


def build_descriptor(config: ProjectConfig, templates_dir: Optional[Path] = None) -> Directory:
    """Derive the project tree for ``config`` from the default skeleton.

    Raises:
        BuildError: If the skeleton has no ``internal`` directory to extend
    """
    structure = load_skeleton(templates_dir)

    if config.database_type:
        internal = structure.children.get("internal")
        if not isinstance(internal, Directory):
            raise BuildError("internal", "failed to access internal directory in project structure")
        internal.children[config.database_type] = empty_directories(*DATABASE_SUBDIRECTORIES)
        logger.debug(f"Added database layout for {config.database_type}")

    if config.uses_grpc:
        structure.children["gapi"] = empty_directories(*GRPC_SUBDIRECTORIES)

    if config.with_workflow:
        structure.children[".github"] = Directory({
            "workflows": Directory({"ci.yml": FileLiteral()}),
        })

    if config.with_dockerfile:
        structure.children["Dockerfile"] = FileLiteral()

    return structure
