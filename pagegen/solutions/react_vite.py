"""React 18 + Vite 5 + TypeScript single-page app."""

from __future__ import annotations

from typing import Optional

from pagegen.codegen.plugins import ActionHandlerRegistry, CssModulePlugin, JsxPlugin
from pagegen.codegen.project import react_vite_project_plugins
from pagegen.postprocessors import FormattingOptions, FormattingPostProcessor
from pagegen.publishers import ZipPublisher

from .base import Solution

NAME = "react-vite"


def react_vite_solution(
    formatting: Optional[FormattingOptions] = None,
    action_handlers: Optional[ActionHandlerRegistry] = None,
) -> Solution:
    formatting = formatting or FormattingOptions()
    return Solution(
        name=NAME,
        description="React 18 + Vite 5 + TypeScript single-page app with Ant Design",
        component_plugins=[
            CssModulePlugin(),
            JsxPlugin(action_handlers=action_handlers, width=formatting.max_line_length),
        ],
        project_plugins=react_vite_project_plugins(),
        post_processors=[FormattingPostProcessor(formatting)],
        publisher=ZipPublisher(),
    )


__all__ = ["NAME", "react_vite_solution"]
