"""Project-level plugins producing scaffold, routing, entry and manifest files."""

from .config import GitIgnorePlugin, IndexHtmlPlugin, TsConfigPlugin, ViteConfigPlugin, ViteEnvPlugin, generated_file
from .manifest import PackageJsonPlugin
from .router import RouterPlugin, page_component_name, page_directory, page_route_path
from .scaffolding import ComponentsPlugin, EntryPlugin, GlobalStylePlugin
from .templates import dump_json, render_template, static_file


def react_vite_project_plugins():
    """Fresh instances of the React + Vite project plugins."""
    return [
        TsConfigPlugin(),
        ViteConfigPlugin(),
        GitIgnorePlugin(),
        IndexHtmlPlugin(),
        ViteEnvPlugin(),
        GlobalStylePlugin(),
        ComponentsPlugin(),
        RouterPlugin(),
        EntryPlugin(),
        PackageJsonPlugin(),
    ]


__all__ = [
    "ComponentsPlugin",
    "EntryPlugin",
    "GitIgnorePlugin",
    "GlobalStylePlugin",
    "IndexHtmlPlugin",
    "PackageJsonPlugin",
    "RouterPlugin",
    "TsConfigPlugin",
    "ViteConfigPlugin",
    "ViteEnvPlugin",
    "dump_json",
    "generated_file",
    "page_component_name",
    "page_directory",
    "page_route_path",
    "react_vite_project_plugins",
    "render_template",
    "static_file",
]
