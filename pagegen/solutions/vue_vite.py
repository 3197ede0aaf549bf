"""Vue 3 + Vite skeleton: scaffolds an empty project, no page generation yet."""

from __future__ import annotations

from typing import List

from pagegen.codegen.project import dump_json, generated_file, render_template, static_file
from pagegen.codegen.project.manifest import package_name
from pagegen.ir.spec import FileType, GeneratedFile
from pagegen.publishers import ZipPublisher

from .base import Solution

NAME = "vue-vite"


class VueViteTemplate:
    name = NAME

    def static_files(self, project_name: str) -> List[GeneratedFile]:
        manifest = {
            "name": package_name(project_name),
            "private": True,
            "version": "0.0.0",
            "type": "module",
            "scripts": {
                "dev": "vite",
                "build": "vue-tsc && vite build",
                "preview": "vite preview",
            },
            "dependencies": {"vue": "^3.4.0"},
            "devDependencies": {
                "@vitejs/plugin-vue": "^5.0.0",
                "typescript": "^5.2.2",
                "vite": "^5.2.0",
                "vue-tsc": "^2.0.0",
            },
        }
        return [
            generated_file("package.json", dump_json(manifest), FileType.JSON),
            generated_file("index.html", render_template("vue/index.html", title=project_name), FileType.HTML),
            generated_file("src/main.ts", static_file("vue/main.ts"), FileType.TS),
            generated_file("src/App.vue", render_template("vue/App.vue", title=project_name), FileType.VUE),
            generated_file(".gitignore", static_file("common/.gitignore"), FileType.OTHER),
        ]


def vue_vite_solution() -> Solution:
    return Solution(
        name=NAME,
        description="Vue 3 + Vite 5 + TypeScript app (skeleton)",
        template=VueViteTemplate(),
        publisher=ZipPublisher(),
        emit_pages=False,
    )


__all__ = ["NAME", "VueViteTemplate", "vue_vite_solution"]
