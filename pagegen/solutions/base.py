"""Solutions: named bundles of template, plugins, postprocessors and publisher."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol, Sequence, runtime_checkable

from pagegen.codegen.plugins.base import ComponentPlugin, ProjectPlugin
from pagegen.codegen.project_builder import PostProcessor
from pagegen.errors import UnsupportedSolutionError
from pagegen.ir.spec import GeneratedFile
from pagegen.publishers import MemoryPublisher, Publisher

logger = logging.getLogger(__name__)


@runtime_checkable
class ProjectTemplate(Protocol):
    """Static files copied into every project of a solution."""

    name: str

    def static_files(self, project_name: str) -> List[GeneratedFile]:
        """Return the template files for ``project_name``."""


@dataclass
class Solution:
    """
    A target stack for code export.

    ``component_plugins`` write page modules; ``project_plugins`` add
    project files in their phase; ``emit_pages`` is False for stacks that
    only scaffold an empty project.
    """

    name: str
    description: str = ""
    template: Optional[ProjectTemplate] = None
    component_plugins: Sequence[ComponentPlugin] = ()
    project_plugins: Sequence[ProjectPlugin] = ()
    post_processors: Sequence[PostProcessor] = ()
    publisher: Publisher = field(default_factory=MemoryPublisher)
    emit_pages: bool = True


SolutionFactory = Callable[[], Solution]


class SolutionRegistry:
    """Explicit name -> solution map."""

    def __init__(self, solutions: Optional[Sequence[Solution]] = None) -> None:
        self._solutions: Dict[str, Solution] = {}
        for solution in solutions or ():
            self.register(solution)

    def register(self, solution: Solution) -> None:
        if solution.name in self._solutions:
            logger.debug("Replacing registered solution %s", solution.name)
        self._solutions[solution.name] = solution

    def get(self, name: str) -> Solution:
        try:
            return self._solutions[name]
        except KeyError:
            available = ", ".join(self.names()) or "none"
            raise UnsupportedSolutionError(
                f"Unsupported solution: {name}. Available solutions: {available}",
                hint="Run `pagegen solutions` to list them.",
            ) from None

    def names(self) -> List[str]:
        return list(self._solutions)

    def __contains__(self, name: object) -> bool:
        return name in self._solutions


__all__ = ["ProjectTemplate", "Solution", "SolutionFactory", "SolutionRegistry"]
