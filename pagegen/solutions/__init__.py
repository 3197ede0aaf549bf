"""Built-in solutions and the solution registry."""

from __future__ import annotations

from typing import Optional

from pagegen.postprocessors import FormattingOptions

from .base import ProjectTemplate, Solution, SolutionRegistry
from .react_vite import react_vite_solution
from .vue_vite import VueViteTemplate, vue_vite_solution

DEFAULT_SOLUTION = "react-vite"


def default_solution_registry(formatting: Optional[FormattingOptions] = None) -> SolutionRegistry:
    """A new registry holding ``react-vite`` and ``vue-vite``."""
    return SolutionRegistry([react_vite_solution(formatting), vue_vite_solution()])


__all__ = [
    "DEFAULT_SOLUTION",
    "ProjectTemplate",
    "Solution",
    "SolutionRegistry",
    "VueViteTemplate",
    "default_solution_registry",
    "react_vite_solution",
    "vue_vite_solution",
]
