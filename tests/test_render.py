"""Tests for the text rendering layer."""

from pagegen.codegen.render import (
    JsxAttribute,
    JsxElement,
    JsxExpression,
    JsxText,
    camel_to_kebab,
    css_value,
    js_literal,
    js_string,
    literal_attribute,
    literal_child,
    pascal_case,
    render_arrow_method,
    render_css_rule,
    render_element,
    render_function_component,
    render_import,
    render_state_hook,
    setter_name,
    to_identifier,
)


class TestNames:
    def test_pascal_case(self):
        assert pascal_case("index") == "Index"
        assert pascal_case("user-list") == "UserList"
        assert pascal_case("about_us") == "AboutUs"
        assert pascal_case("myPage") == "MyPage"
        assert pascal_case("404") == "Page404"
        assert pascal_case("") == "Index"

    def test_to_identifier(self):
        assert to_identifier("handleClick_2") == "handleClick_2"
        assert to_identifier("handleClick_a-b") == "handleClick_a_b"
        assert to_identifier("1abc") == "_1abc"
        assert to_identifier("") == "_"

    def test_setter_name(self):
        assert setter_name("open_3") == "setOpen_3"

    def test_camel_to_kebab(self):
        assert camel_to_kebab("backgroundColor") == "background-color"
        assert camel_to_kebab("--brand-color") == "--brand-color"


class TestValues:
    def test_js_string_escapes_markup(self):
        assert js_string("</script>") == '"\\u003c/script\\u003e"'
        assert js_string('say "hi"') == '"say \\"hi\\""'
        assert js_string("a & b") == '"a \\u0026 b"'

    def test_js_string_escapes_line_separators(self):
        assert js_string("a\u2028b\u2029c") == '"a\\u2028b\\u2029c"'

    def test_js_literal(self):
        assert js_literal({"a": [1, True, None]}) == '{"a": [1, true, null]}'
        assert js_literal("é") == '"é"'

    def test_literal_attribute(self):
        assert literal_attribute("placeholder", "Name").render() == 'placeholder="Name"'
        assert literal_attribute("title", 'a "b"').render() == 'title={"a \\"b\\""}'
        assert literal_attribute("disabled", True).render() == "disabled={true}"
        assert literal_attribute("options", [1, 2]).render() == "options={[1, 2]}"

    def test_literal_child(self):
        assert literal_child("Go") == JsxText("Go")
        assert literal_child("{x}") == JsxExpression('"{x}"')
        assert literal_child(" padded ") == JsxExpression('" padded "')
        assert literal_child(3) == JsxExpression("3")
        assert literal_child(None) is None
        assert literal_child("") is None


class TestElements:
    def test_self_closing(self):
        assert render_element(JsxElement("Input")) == "<Input />"

    def test_inline_text_child(self):
        element = JsxElement("Button", [JsxAttribute("onClick", "handleClick_2", expression=True)], [JsxText("Go")])
        assert render_element(element) == "<Button onClick={handleClick_2}>Go</Button>"

    def test_nested_children_are_indented(self):
        element = JsxElement("Page", children=[JsxElement("Button", children=[JsxText("Go")])])
        assert render_element(element) == "<Page>\n  <Button>Go</Button>\n</Page>"

    def test_long_attribute_list_wraps(self):
        attributes = [JsxAttribute(f"attribute{index}", "value", expression=False) for index in range(6)]
        rendered = render_element(JsxElement("Card", attributes), width=40)
        lines = rendered.splitlines()
        assert lines[0] == "<Card"
        assert lines[1] == '  attribute0="value"'
        assert lines[-1] == "/>"
        assert len(lines) == 8

    def test_fragment(self):
        element = JsxElement("", children=[JsxElement("Button"), JsxElement("Input")])
        assert render_element(element) == "<>\n  <Button />\n  <Input />\n</>"


class TestStatements:
    def test_state_hook(self):
        assert render_state_hook("open_3", False) == "const [open_3, setOpen_3] = useState(false);"

    def test_arrow_method(self):
        assert render_arrow_method("handleClick_2", ['window.open("/a", "_blank");']) == (
            'const handleClick_2 = () => {\n  window.open("/a", "_blank");\n};'
        )
        assert render_arrow_method("noop", []) == "const noop = () => {};"

    def test_import(self):
        assert render_import("antd", None, [("Button", "Button"), ("Input", "Input_2")]) == (
            'import { Button, Input as Input_2 } from "antd";'
        )
        assert render_import("@/components/Page", "Page", []) == 'import Page from "@/components/Page";'
        assert render_import("./global.scss", None, []) == 'import "./global.scss";'

    def test_function_component(self):
        module = render_function_component("Index", [["const a = 1;"], []], "<Page />")
        assert module == (
            "const Index: React.FC = () => {\n"
            "  const a = 1;\n"
            "\n"
            "  return (\n"
            "    <Page />\n"
            "  );\n"
            "};\n"
            "\n"
            "export default Index;\n"
        )


class TestStyles:
    def test_css_value_units(self):
        assert css_value("width", 100) == "100px"
        assert css_value("opacity", 0.5) == "0.5"
        assert css_value("margin", 0) == "0"
        assert css_value("color", "red") == "red"

    def test_css_rule(self):
        assert render_css_rule("node_2", {"backgroundColor": "#fff", "width": 10, "height": None}) == (
            ".node_2 {\n  background-color: #fff;\n  width: 10px;\n}"
        )
