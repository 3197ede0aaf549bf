"""Pre-phase project plugins: tool configuration and static scaffold files."""

from __future__ import annotations

from pagegen.codegen.plugins.base import PHASE_PRE
from pagegen.codegen.project_builder import ProjectBuilder
from pagegen.ir.spec import FileType, GeneratedFile

from .templates import dump_json, render_template, static_file

DEV_SERVER_PORT = 3000

TSCONFIG = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": False,
        "noFallthroughCasesInSwitch": True,
        "baseUrl": ".",
        "paths": {"@/*": ["./src/*"]},
    },
    "include": ["src"],
    "references": [{"path": "./tsconfig.node.json"}],
}

TSCONFIG_NODE = {
    "compilerOptions": {
        "composite": True,
        "skipLibCheck": True,
        "module": "ESNext",
        "moduleResolution": "bundler",
        "allowSyntheticDefaultImports": True,
    },
    "include": ["vite.config.ts"],
}


def generated_file(file_path: str, content: str, file_type: FileType) -> GeneratedFile:
    return GeneratedFile(
        file_name=file_path.rsplit("/", 1)[-1],
        file_path=file_path,
        content=content,
        file_type=file_type,
    )


class TsConfigPlugin:
    name = "tsconfig"
    phase = PHASE_PRE
    weight = 10

    def run(self, builder: ProjectBuilder) -> None:
        builder.add_file(generated_file("tsconfig.json", dump_json(TSCONFIG), FileType.JSON))
        builder.add_file(generated_file("tsconfig.node.json", dump_json(TSCONFIG_NODE), FileType.JSON))


class ViteConfigPlugin:
    name = "vite-config"
    phase = PHASE_PRE
    weight = 20

    def __init__(self, port: int = DEV_SERVER_PORT) -> None:
        self.port = port

    def run(self, builder: ProjectBuilder) -> None:
        content = render_template("react/vite.config.ts", port=int(self.port))
        builder.add_file(generated_file("vite.config.ts", content, FileType.TS))


class GitIgnorePlugin:
    name = "gitignore"
    phase = PHASE_PRE
    weight = 30

    def run(self, builder: ProjectBuilder) -> None:
        builder.add_file(generated_file(".gitignore", static_file("common/.gitignore"), FileType.OTHER))


class IndexHtmlPlugin:
    name = "index-html"
    phase = PHASE_PRE
    weight = 40

    def run(self, builder: ProjectBuilder) -> None:
        content = render_template("react/index.html", title=builder.project_name)
        builder.add_file(generated_file("index.html", content, FileType.HTML))


class ViteEnvPlugin:
    name = "vite-env"
    phase = PHASE_PRE
    weight = 50

    def run(self, builder: ProjectBuilder) -> None:
        builder.add_file(generated_file("src/vite-env.d.ts", static_file("react/vite-env.d.ts"), FileType.TS))


__all__ = [
    "GitIgnorePlugin",
    "IndexHtmlPlugin",
    "TsConfigPlugin",
    "ViteConfigPlugin",
    "ViteEnvPlugin",
    "generated_file",
]
