"""Tests for ModuleBuilder import bookkeeping and module assembly."""

from pagegen.codegen import ModuleBuilder
from pagegen.ir import Dependency

BUTTON = Dependency(source="antd", export_name="Button", destructuring=True)
PAGE = Dependency(source="@/components/Page")


def test_add_import_deduplicates():
    builder = ModuleBuilder("Index")
    assert builder.add_import(BUTTON, "Button") == "Button"
    assert builder.add_import(BUTTON, "Button") == "Button"
    module = builder.generate_module()
    assert module.count('from "antd"') == 1
    assert 'import { Button } from "antd";' in module


def test_colliding_local_names_are_aliased():
    builder = ModuleBuilder("Index")
    first = builder.add_import(Dependency(source="antd", export_name="Tag", destructuring=True), "Tag")
    second = builder.add_import(Dependency(source="@/widgets", export_name="Tag", destructuring=True), "Tag")
    assert (first, second) == ("Tag", "Tag_2")
    assert 'import { Tag as Tag_2 } from "@/widgets";' in builder.generate_module()


def test_reserved_names_are_never_imported_as_is():
    builder = ModuleBuilder("Index")
    assert builder.add_import(Dependency(source="./other"), "Index") == "Index_2"
    assert builder.add_import(Dependency(source="legacy", export_name="React", destructuring=True)) == "React_2"


def test_dependency_without_source_is_not_imported():
    builder = ModuleBuilder("Index")
    assert builder.add_import(Dependency(source=""), "div") == "div"
    assert builder.generate_module().startswith('import React from "react";\n\nconst Index')


def test_import_groups_are_ordered():
    builder = ModuleBuilder("Home")
    builder.add_import(PAGE, "Page")
    builder.add_import(BUTTON, "Button")
    builder.add_import(Dependency(source="@ant-design/icons", export_name="SmileOutlined", destructuring=True))
    builder.set_stylesheet("./Home.module.scss")
    builder.add_state("open_3", False)
    module = builder.generate_module()
    header = module.split("\n\nconst Home")[0]
    assert header == (
        'import React, { useState } from "react";\n'
        'import { SmileOutlined } from "@ant-design/icons";\n'
        'import { Button } from "antd";\n'
        "\n"
        'import Page from "@/components/Page";\n'
        "\n"
        'import styles from "./Home.module.scss";'
    )


def test_statements_are_deduplicated():
    builder = ModuleBuilder("Index")
    builder.add_state("open_3", False)
    builder.add_state("open_3", True)
    builder.add_method("handleOpen_3", "const handleOpen_3 = () => {};")
    builder.add_method("handleOpen_3", "const handleOpen_3 = () => { other(); };")
    builder.add_effect("useEffect(() => {}, []);")
    builder.add_effect("useEffect(() => {}, []);")
    module = builder.generate_module()
    assert module.count("useState(") == 1
    assert "useState(false)" in module
    assert module.count("const handleOpen_3") == 1
    assert module.count("useEffect(() => {}, []);") == 1
    assert builder.has_method("handleOpen_3")
    assert builder.unique_name("handleOpen_3") == "handleOpen_3_2"
    assert builder.unique_name("setOpen_3") == "setOpen_3_2"


def test_generate_module_layout():
    builder = ModuleBuilder("Index")
    builder.add_state("open_3", False)
    builder.add_method("handleOpen_3", "const handleOpen_3 = () => {\n  setOpen_3(true);\n};")
    builder.set_markup("<Page />")
    assert builder.generate_module() == (
        'import React, { useState } from "react";\n'
        "\n"
        "const Index: React.FC = () => {\n"
        "  const [open_3, setOpen_3] = useState(false);\n"
        "\n"
        "  const handleOpen_3 = () => {\n"
        "    setOpen_3(true);\n"
        "  };\n"
        "\n"
        "  return (\n"
        "    <Page />\n"
        "  );\n"
        "};\n"
        "\n"
        "export default Index;\n"
    )


def test_css_module():
    builder = ModuleBuilder("Index")
    assert not builder.has_css
    assert builder.generate_css_module() == ""
    builder.add_css_class("node_2", {"width": 100})
    builder.add_css_class("node_3", {"color": "red"})
    assert builder.has_css
    assert builder.generate_css_module() == ".node_2 {\n  width: 100px;\n}\n\n.node_3 {\n  color: red;\n}\n"


def test_css_class_lookup_by_node():
    builder = ModuleBuilder("Index")
    builder.add_css_class("node_2", {"width": 100}, "2")
    builder.add_css_class("shared", {"color": "red"})
    assert builder.css_class_for("2") == "node_2"
    assert builder.css_class_for("3") is None
