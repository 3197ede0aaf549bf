"""Tests for the JSX and CSS module component plugins."""

import logging

import pytest

from pagegen.codegen import ModuleBuilder
from pagegen.codegen.plugins import CssModulePlugin, JsxPlugin
from pagegen.codegen.plugins.jsx import handler_base_name, render_page_method
from pagegen.errors import DiagnosticCode
from pagegen.ir import FunctionBody, StateSetter
from pagegen.parser import SchemaParser
from pagegen.preprocessors import run_preprocessors

from factories import node, page


def generate(registry, schema, module_name="Index"):
    project = run_preprocessors(SchemaParser(registry).parse(schema), registry)
    builder = ModuleBuilder(module_name)
    for plugin in (CssModulePlugin(), JsxPlugin()):
        plugin.run(project.pages[0], builder, registry)
    return builder


@pytest.fixture
def go_schema():
    return [
        {
            "id": 1,
            "name": "Page",
            "children": [
                {
                    "id": 2,
                    "name": "Button",
                    "props": {"text": "Go", "onClick": {"actions": [{"type": "goToLink", "url": "https://x"}]}},
                }
            ],
        }
    ]


class TestJsxPlugin:
    def test_button_go_to_link(self, registry, go_schema):
        module = generate(registry, go_schema).generate_module("Index")
        assert module == (
            'import React from "react";\n'
            'import { Button } from "antd";\n'
            "\n"
            'import Page from "@/components/Page";\n'
            "\n"
            "const Index: React.FC = () => {\n"
            "  const handleClick_2 = () => {\n"
            '    window.open("https://x", "_blank");\n'
            "  };\n"
            "\n"
            "  return (\n"
            "    <Page>\n"
            "      <Button onClick={handleClick_2}>Go</Button>\n"
            "    </Page>\n"
            "  );\n"
            "};\n"
            "\n"
            "export default Index;\n"
        )

    def test_repeated_components_share_one_import(self, registry):
        module = generate(registry, page(node("Button", id=2), node("Button", id=3), node("ListItem", id=4))).generate_module()
        assert module.count('from "antd"') == 1
        assert 'import { Button, List } from "antd";' in module
        assert "<List.Item />" in module

    def test_multiple_actions_give_one_handler(self, registry):
        schema = page(
            node(
                "Button",
                id=2,
                props={
                    "onClick": {
                        "actions": [
                            {"type": "showMessage", "config": {"text": "one"}},
                            {"type": "goToLink", "config": {"url": "/two"}},
                            {"type": "showMessage", "config": {"text": "three"}},
                        ]
                    }
                },
            )
        )
        module = generate(registry, schema).generate_module()
        assert module.count("const handleClick_2") == 1
        body = module.split("const handleClick_2 = () => {")[1].split("};")[0]
        assert body.index('"one"') < body.index('"/two"') < body.index('"three"')
        assert body.count("// showMessage") == 2

    def test_handler_names_do_not_collide(self, registry):
        schema = page(
            node("Button", id="a", props={"onClick": {"actions": [{"type": "goToLink", "url": "/1"}]}}),
            node("Button", id="a", props={"onClick": {"actions": [{"type": "goToLink", "url": "/2"}]}}),
        )
        module = generate(registry, schema).generate_module()
        assert "onClick={handleClick_a}" in module
        assert "onClick={handleClick_a_2}" in module

    def test_unknown_component_renders_placeholder(self, registry):
        module = generate(registry, page(node("FooWidgetNotRegistered", id=9))).generate_module()
        assert '<div data-unknown-component="FooWidgetNotRegistered">' in module
        assert "Unknown Component: FooWidgetNotRegistered" in module

    def test_lifted_modal_state(self, registry):
        schema = page(
            node(
                "Button",
                id=2,
                props={"text": "Open", "onClick": {"actions": [{"type": "componentMethod", "componentId": 3, "method": "open"}]}},
            ),
            node("Modal", id=3, props={"title": "Dialog", "visibleInEditor": True}),
        )
        module = generate(registry, schema).generate_module()
        assert "const [open_3, setOpen_3] = useState(false);" in module
        assert "const handleOpen_3 = () => {\n    setOpen_3(true);\n  };" in module
        assert "handleOpen_3();" in module
        assert "open={open_3}" in module
        assert "onCancel={handleClose_3}" in module
        assert "visibleInEditor" not in module

    def test_typography_picks_tag_from_type(self, registry):
        module = generate(registry, page(node("Typography", id=2, props={"type": "Title", "content": "Hello", "level": 2}))).generate_module()
        assert "<Typography.Title level={2}>Hello</Typography.Title>" in module
        assert 'import { Typography } from "antd";' in module

    @pytest.mark.parametrize(
        "kind",
        [{"type": "JSExpression", "value": "props.kind"}, ["Title"]],
        ids=["expression", "list"],
    )
    def test_typography_non_string_type_renders_text(self, registry, caplog, kind):
        schema = page(node("Typography", id=2, props={"type": kind, "content": "Hello"}))
        with caplog.at_level(logging.WARNING):
            module = generate(registry, schema).generate_module()
        assert "<Typography.Text>Hello</Typography.Text>" in module
        assert "props.kind" not in module
        codes = [getattr(record, "pagegen_code", None) for record in caplog.records]
        assert DiagnosticCode.INVALID_PROP_SHAPE in codes

    def test_icon_imports_selected_icon(self, registry):
        module = generate(registry, page(node("Icon", id=2, props={"icon": "SmileOutlined"}))).generate_module()
        assert 'import { SmileOutlined } from "@ant-design/icons";' in module
        assert "<SmileOutlined />" in module

    def test_table_with_url_fetches_rows(self, registry):
        schema = page(
            node(
                "Table",
                id=5,
                props={"url": "/api/users", "columns": [{"title": "Name", "dataIndex": "name"}]},
            )
        )
        module = generate(registry, schema).generate_module()
        assert 'import React, { useState, useEffect } from "react";' in module
        assert "const [dataSource_5, setDataSource_5] = useState([]);" in module
        assert 'fetch("/api/users")' in module
        assert "dataSource={dataSource_5}" in module

    def test_table_without_url_gets_sample_row(self, registry):
        schema = page(node("Table", id=5, props={"columns": [{"title": "Name", "dataIndex": "name"}]}))
        module = generate(registry, schema).generate_module()
        assert '{"key": "1", "name": "Sample data"}' in module

    def test_expression_props_are_emitted_as_code(self, registry):
        schema = page(node("Input", id=2, props={"value": {"type": "JSExpression", "value": "state.name"}}))
        assert "<Input value={state.name} />" in generate(registry, schema).generate_module()

    def test_slot_props_render_elements(self, registry):
        schema = page(node("Card", id=2, props={"extra": {"type": "JSSlot", "value": [node("Button", id=3, props={"text": "More"})]}}))
        module = generate(registry, schema).generate_module()
        assert "extra={<>" in module
        assert "<Button>More</Button>" in module

    def test_helpers(self):
        assert handler_base_name("onClick", "2") == "handleClick_2"
        assert handler_base_name("onchange", "2") == "handleOnchange_2"
        assert render_page_method("handleOpenChange_4", StateSetter("open_4", from_event=True)) == (
            "const handleOpenChange_4 = (value: boolean) => {\n  setOpen_4(value);\n};"
        )
        assert render_page_method("helper", FunctionBody("function () { return 1; }")) == (
            "const helper = function () { return 1; };"
        )


class TestCssModulePlugin:
    def test_styles_move_into_css_module(self, registry):
        schema = page(node("Card", id=2, styles={"backgroundColor": "#fff", "padding": 8}), node("Button", id=3))
        builder = generate(registry, schema)
        module = builder.generate_module()
        assert 'import styles from "./Index.module.scss";' in module
        assert "<Card className={styles.node_2} />" in module
        assert builder.generate_css_module() == ".node_2 {\n  background-color: #fff;\n  padding: 8px;\n}\n"

    def test_existing_class_name_is_merged(self, registry):
        schema = page(node("Card", id=2, props={"className": "hero"}, styles={"margin": 0}))
        module = generate(registry, schema).generate_module()
        assert 'className={["hero", styles.node_2].join(" ")}' in module

    def test_codegen_leaves_page_styles_in_place(self, registry):
        schema = page(node("Card", id=2, styles={"padding": 8}))
        project = run_preprocessors(SchemaParser(registry).parse(schema), registry)
        target = project.pages[0]
        outputs = []
        for _ in range(2):
            builder = ModuleBuilder("Index")
            for plugin in (CssModulePlugin(), JsxPlugin()):
                plugin.run(target, builder, registry)
            outputs.append((builder.generate_module(), builder.generate_css_module()))
        assert target.root_node.children[0].styles == {"padding": 8}
        assert outputs[0] == outputs[1]
        assert "<Card className={styles.node_2} />" in outputs[1][0]
        assert outputs[1][1] == ".node_2 {\n  padding: 8px;\n}\n"

    def test_no_styles_no_stylesheet(self, registry):
        builder = generate(registry, page(node("Button", id=2)))
        assert not builder.has_css
        assert "styles" not in builder.generate_module()
