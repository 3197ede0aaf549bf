"""File postprocessors run after all plugins."""

from pagegen.codegen.project_builder import PostProcessor

from .formatter import FormattedResult, FormattingOptions, FormattingPostProcessor, SourceFormatter

__all__ = [
    "FormattedResult",
    "FormattingOptions",
    "FormattingPostProcessor",
    "PostProcessor",
    "SourceFormatter",
]
