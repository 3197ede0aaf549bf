"""Router plugin: one route per IR page."""

from __future__ import annotations

from typing import Dict, List

from pagegen.codegen.plugins.base import PHASE_POST
from pagegen.codegen.project_builder import ProjectBuilder
from pagegen.codegen.render import js_string, pascal_case
from pagegen.ir.spec import FileType, Page

from .config import generated_file
from .templates import render_template

INDEX_PAGE = "index"


def page_component_name(page: Page) -> str:
    return pascal_case(page.file_name)


def page_directory(page: Page) -> str:
    return f"src/pages/{page_component_name(page)}"


def page_route_path(page: Page) -> str:
    return "/" if page.file_name == INDEX_PAGE else f"/{page.file_name}"


class RouterPlugin:
    name = "react-router"
    phase = PHASE_POST
    weight = 30

    def run(self, builder: ProjectBuilder) -> None:
        routes: List[Dict[str, str]] = [
            {"component": page_component_name(page), "path_literal": js_string(page_route_path(page))}
            for page in builder.project.pages
        ]
        content = render_template("react/router.tsx", routes=routes)
        builder.add_file(generated_file("src/router/index.tsx", content, FileType.TSX))


__all__ = ["RouterPlugin", "page_component_name", "page_directory", "page_route_path"]
