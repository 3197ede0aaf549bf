"""Tests for the React + Vite project plugins."""

import json

import pytest

from pagegen.codegen import ProjectBuilder
from pagegen.codegen.plugins import PHASE_POST, PHASE_PRE, ordered_project_plugins
from pagegen.codegen.project import (
    PackageJsonPlugin,
    RouterPlugin,
    ViteConfigPlugin,
    page_component_name,
    page_directory,
    page_route_path,
    react_vite_project_plugins,
    render_template,
    static_file,
)
from pagegen.codegen.project.manifest import package_name
from pagegen.codegen.project.templates import TEMPLATES
from pagegen.parser import SchemaParser

from factories import node


@pytest.fixture
def project(registry):
    return SchemaParser(registry).parse(
        [node("Page", id="home"), node("Page", id="users", props={"title": "User List"})]
    )


def _run_all(builder):
    plugins = react_vite_project_plugins()
    for phase in (PHASE_PRE, PHASE_POST):
        for plugin in ordered_project_plugins(plugins, phase):
            plugin.run(builder)


def test_plugins_are_ordered_by_phase_and_weight():
    plugins = react_vite_project_plugins()
    pre = [plugin.name for plugin in ordered_project_plugins(plugins, PHASE_PRE)]
    post = [plugin.name for plugin in ordered_project_plugins(plugins, PHASE_POST)]
    assert pre == ["tsconfig", "vite-config", "gitignore", "index-html", "vite-env"]
    assert post == ["global-style", "project-components", "react-router", "react-entry", "package-json"]


def test_scaffold_files(project):
    builder = ProjectBuilder(project, project_name="Demo <App>")
    _run_all(builder)
    paths = {file.file_path for file in builder.generate_files()}
    assert {
        "tsconfig.json",
        "tsconfig.node.json",
        "vite.config.ts",
        ".gitignore",
        "index.html",
        "src/vite-env.d.ts",
        "src/global.scss",
        "src/components/Page.tsx",
        "src/components/PageHeader.tsx",
        "src/components/index.ts",
        "src/router/index.tsx",
        "src/App.tsx",
        "src/main.tsx",
        "package.json",
    } <= paths
    assert "<title>Demo &lt;App&gt;</title>" in builder.get_file("index.html").content


@pytest.mark.parametrize(
    "path, source",
    [
        ("src/components/PageHeader.tsx", "react/components/PageHeader.tsx"),
        ("src/components/Page.tsx", "react/components/Page.tsx"),
        ("src/vite-env.d.ts", "react/vite-env.d.ts"),
        ("src/global.scss", "react/global.scss"),
        ("src/main.tsx", "react/main.tsx"),
    ],
)
def test_static_files_are_copied_verbatim(project, path, source):
    builder = ProjectBuilder(project)
    _run_all(builder)
    assert builder.get_file(path).content == static_file(source)


def test_page_header_keeps_jsx_style_object(project):
    builder = ProjectBuilder(project)
    _run_all(builder)
    assert "<Title level={3} style={{ margin: 0 }}>" in builder.get_file("src/components/PageHeader.tsx").content


@pytest.mark.parametrize(
    "name, context",
    [
        ("react/index.html", {"title": "Demo"}),
        ("react/vite.config.ts", {"port": 5173}),
        ("react/router.tsx", {"routes": []}),
        ("vue/index.html", {"title": "Demo"}),
        ("vue/App.vue", {"title": "Demo"}),
    ],
)
def test_every_template_renders(name, context):
    assert name in TEMPLATES
    assert render_template(name, **context)


def test_template_table_is_fully_covered():
    assert set(TEMPLATES) == {"react/index.html", "react/vite.config.ts", "react/router.tsx", "vue/index.html", "vue/App.vue"}


def test_router_has_one_route_per_page(project):
    builder = ProjectBuilder(project)
    RouterPlugin().run(builder)
    router = builder.get_file("src/router/index.tsx").content
    assert 'import Index from "../pages/Index/Index";' in router
    assert 'import UserList from "../pages/UserList/UserList";' in router
    assert 'path: "/",' in router
    assert 'path: "/user-list",' in router
    assert "element: <UserList />," in router


def test_page_naming(project):
    home, users = project.pages
    assert (page_component_name(home), page_directory(home), page_route_path(home)) == ("Index", "src/pages/Index", "/")
    assert (page_component_name(users), page_route_path(users)) == ("UserList", "/user-list")


def test_package_json_merges_dependencies(project):
    builder = ProjectBuilder(project, project_name="My Shop")
    builder.add_dependency("dayjs", "^1.11.0")
    PackageJsonPlugin().run(builder)
    manifest = json.loads(builder.get_file("package.json").content)
    assert manifest["name"] == "my-shop"
    assert manifest["dependencies"]["antd"] == "^5.0.0"
    assert manifest["dependencies"]["dayjs"] == "^1.11.0"
    assert manifest["dependencies"]["react"] == "^18.2.0"
    assert list(manifest["dependencies"]) == sorted(manifest["dependencies"])
    assert "@/components/Page" not in manifest["dependencies"]


def test_vite_config_port():
    builder = ProjectBuilder()
    ViteConfigPlugin(port=4321).run(builder)
    assert "port: 4321," in builder.get_file("vite.config.ts").content


def test_package_name():
    assert package_name("My Shop!") == "my-shop"
    assert package_name("***") == "pagegen-app"
