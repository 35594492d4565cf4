"""Project tree scaffolding: descriptors, templates and the tree builder."""

from .builder import TreeBuilder, materialize
from .core import ScaffoldManager
from .descriptor import Directory, EmptyDirectory, FileLiteral, build_descriptor
from .registry import TemplateRegistry, default_registry
from .templates import RenderContext, TemplateEngine

__all__ = [
    "ScaffoldManager",
    "TreeBuilder",
    "materialize",
    "Directory",
    "EmptyDirectory",
    "FileLiteral",
    "build_descriptor",
    "TemplateRegistry",
    "default_registry",
    "RenderContext",
    "TemplateEngine",
]
