"""IR -> IR rewrites applied between parsing and code generation."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from pagegen.ir.spec import Project
from pagegen.metadata import MetadataRegistry

from .state_lifter import StateLifter

logger = logging.getLogger(__name__)

Preprocessor = Callable[[Project], Project]
PreprocessorFactory = Callable[[MetadataRegistry], Preprocessor]

# Applied in this order.
DEFAULT_PREPROCESSORS: Sequence[PreprocessorFactory] = (StateLifter,)


def run_preprocessors(
    project: Project,
    registry: MetadataRegistry,
    preprocessors: Optional[Sequence[PreprocessorFactory]] = None,
) -> Project:
    """Run each preprocessor over the whole project and return the result."""
    for factory in preprocessors if preprocessors is not None else DEFAULT_PREPROCESSORS:
        preprocessor = factory(registry)
        logger.debug("Running preprocessor %s", getattr(preprocessor, "name", factory))
        project = preprocessor(project)
    return project


__all__ = ["DEFAULT_PREPROCESSORS", "Preprocessor", "StateLifter", "run_preprocessors"]
