"""Code generation: render layer, module/project builders, component and project plugins."""

from .module_builder import ModuleBuilder
from .project_builder import ProjectBuilder

__all__ = ["ModuleBuilder", "ProjectBuilder"]
