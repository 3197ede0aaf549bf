"""Core plugin abstractions for the generation pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Optional, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from pagegen.codegen.module_builder import ModuleBuilder
    from pagegen.codegen.project_builder import ProjectBuilder
    from pagegen.ir.spec import Page
    from pagegen.metadata.registry import MetadataRegistry

PHASE_PRE = "pre"
PHASE_POST = "post"


@runtime_checkable
class ComponentPlugin(Protocol):
    """Writes one page's code into a module builder."""

    name: str

    def run(self, page: "Page", module_builder: "ModuleBuilder", registry: "MetadataRegistry") -> None:
        """Contribute imports, statements, styles or markup for ``page``."""


@runtime_checkable
class ProjectPlugin(Protocol):
    """Adds project-level files; ordered by ``phase`` then ascending ``weight``."""

    name: str
    phase: str
    weight: int

    def run(self, builder: "ProjectBuilder") -> Optional[Union[Any, Awaitable[Any]]]:
        """Add files through ``builder.add_file``. May be a coroutine."""


def ordered_project_plugins(plugins, phase: str):
    """Plugins of ``phase`` sorted by weight; ties keep declaration order."""
    return sorted((plugin for plugin in plugins if plugin.phase == phase), key=lambda plugin: plugin.weight)


__all__ = ["ComponentPlugin", "ProjectPlugin", "PHASE_PRE", "PHASE_POST", "ordered_project_plugins"]
