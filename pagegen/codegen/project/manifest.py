"""Build manifest plugin (``package.json``); runs last to see every dependency."""

from __future__ import annotations

import re
from typing import Dict

from pagegen.codegen.plugins.base import PHASE_POST
from pagegen.codegen.project_builder import ProjectBuilder
from pagegen.ir.spec import FileType

from .config import generated_file
from .templates import dump_json

CORE_DEPENDENCIES: Dict[str, str] = {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "react-router-dom": "^6.23.0",
    "@vitejs/plugin-react": "^4.2.1",
    "typescript": "^5.2.2",
    "vite": "^5.2.0",
    "sass": "^1.77.0",
}

DEV_DEPENDENCIES: Dict[str, str] = {
    "@types/react": "^18.2.66",
    "@types/react-dom": "^18.2.22",
    "@typescript-eslint/eslint-plugin": "^7.2.0",
    "@typescript-eslint/parser": "^7.2.0",
    "eslint": "^8.57.0",
    "eslint-plugin-react-hooks": "^4.6.0",
    "eslint-plugin-react-refresh": "^0.4.6",
}

SCRIPTS: Dict[str, str] = {
    "dev": "vite",
    "build": "tsc && vite build",
    "lint": "eslint . --ext ts,tsx --report-unused-disable-directives --max-warnings 0",
    "preview": "vite preview",
}


def package_name(project_name: str) -> str:
    """npm-safe package name derived from the project name."""
    name = re.sub(r"[^a-z0-9._-]+", "-", project_name.lower()).strip("-._")
    return name or "pagegen-app"


class PackageJsonPlugin:
    name = "package-json"
    phase = PHASE_POST
    weight = 100

    def run(self, builder: ProjectBuilder) -> None:
        dependencies = dict(builder.project.dependencies)
        dependencies.update(CORE_DEPENDENCIES)
        manifest = {
            "name": package_name(builder.project_name),
            "private": True,
            "version": "0.0.0",
            "type": "module",
            "scripts": SCRIPTS,
            "dependencies": dict(sorted(dependencies.items())),
            "devDependencies": DEV_DEPENDENCIES,
        }
        builder.add_file(generated_file("package.json", dump_json(manifest), FileType.JSON))


__all__ = ["CORE_DEPENDENCIES", "PackageJsonPlugin", "package_name"]
