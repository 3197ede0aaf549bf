"""Post-phase scaffolding: global stylesheet, runtime components, entry files."""

from __future__ import annotations

from pagegen.codegen.plugins.base import PHASE_POST
from pagegen.codegen.project_builder import ProjectBuilder
from pagegen.ir.spec import FileType

from .config import generated_file
from .templates import static_file


class GlobalStylePlugin:
    name = "global-style"
    phase = PHASE_POST
    weight = 10

    def run(self, builder: ProjectBuilder) -> None:
        builder.add_file(generated_file("src/global.scss", static_file("react/global.scss"), FileType.SCSS))


class ComponentsPlugin:
    """Runtime ``Page`` wrapper and ``PageHeader`` plus their barrel file."""

    name = "project-components"
    phase = PHASE_POST
    weight = 20

    def run(self, builder: ProjectBuilder) -> None:
        for file_name in ("Page.tsx", "PageHeader.tsx"):
            content = static_file(f"react/components/{file_name}")
            builder.add_file(generated_file(f"src/components/{file_name}", content, FileType.TSX))
        index = static_file("react/components/index.ts")
        builder.add_file(generated_file("src/components/index.ts", index, FileType.TS))


class EntryPlugin:
    name = "react-entry"
    phase = PHASE_POST
    weight = 40

    def run(self, builder: ProjectBuilder) -> None:
        builder.add_file(generated_file("src/App.tsx", static_file("react/App.tsx"), FileType.TSX))
        builder.add_file(generated_file("src/main.tsx", static_file("react/main.tsx"), FileType.TSX))


__all__ = ["ComponentsPlugin", "EntryPlugin", "GlobalStylePlugin"]
