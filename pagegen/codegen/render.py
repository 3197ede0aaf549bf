"""
Text serialization for generated React modules.

All source text produced by the JSX plugin, the module builder and the action
handlers is synthesised here. Traversal and decision logic builds a small
element tree (:class:`JsxElement`, :class:`JsxAttribute`, ...) and statement
descriptions; this module turns them into text.

Escaping contract:
    Every schema-provided value embedded in code is emitted as a JSON
    literal in which ``<``, ``>``, ``&``, U+2028 and U+2029 are written as
    ``\\uXXXX`` escapes, so a value can neither terminate a string nor open
    markup. Plain JSX text and attribute strings are only used when the
    value contains none of the characters that would change their meaning.
    Identifiers (method and state names) are validated or sanitised, never
    interpolated raw.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80
INDENT = "  "

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_NON_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]")

_JS_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_JS_ESCAPE_RE = re.compile("[<>&\u2028\u2029]")

# CSS properties that take bare numbers.
UNITLESS_CSS_PROPERTIES = frozenset(
    {
        "opacity",
        "zIndex",
        "fontWeight",
        "lineHeight",
        "flex",
        "flexGrow",
        "flexShrink",
        "order",
        "zoom",
    }
)


# =============================================================================
# Names
# =============================================================================

def is_identifier(text: Any) -> bool:
    return isinstance(text, str) and bool(IDENTIFIER_RE.match(text))


def to_identifier(text: Any) -> str:
    """Sanitise ``text`` into a valid JavaScript identifier."""
    value = _NON_IDENTIFIER_CHARS.sub("_", str(text))
    if not value:
        return "_"
    if value[0].isdigit():
        value = f"_{value}"
    return value


def pascal_case(text: str) -> str:
    """``user-list`` -> ``UserList``; ``index`` -> ``Index``."""
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", text or "")
    parts = [part for part in re.split(r"[^A-Za-z0-9]+", spaced) if part]
    name = "".join(part[0].upper() + part[1:] for part in parts)
    if not name:
        return "Index"
    if name[0].isdigit():
        name = f"Page{name}"
    return name


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def setter_name(state: str) -> str:
    return f"set{upper_first(state)}"


def camel_to_kebab(name: str) -> str:
    if name.startswith("--"):
        return name
    return re.sub(r"([A-Z])", lambda match: f"-{match.group(1).lower()}", name)


# =============================================================================
# Values
# =============================================================================

def _escape_js(text: str) -> str:
    return _JS_ESCAPE_RE.sub(lambda match: _JS_ESCAPES[match.group(0)], text)


def _unserializable(value: Any) -> Any:
    logger.warning("Value of type %s cannot be emitted as a literal; using null", type(value).__name__)
    return None


def js_string(value: Any) -> str:
    """Emit ``value`` as a double-quoted JavaScript string literal."""
    return _escape_js(json.dumps(str(value), ensure_ascii=False))


def js_literal(value: Any) -> str:
    """Emit a JSON-compatible ``value`` as a JavaScript literal."""
    return _escape_js(json.dumps(value, ensure_ascii=False, default=_unserializable))


# =============================================================================
# JSX element tree
# =============================================================================

@dataclass
class JsxAttribute:
    """``name``, ``name="text"`` or ``name={code}``."""
    name: str
    value: Optional[str] = None
    expression: bool = False

    def render(self) -> str:
        if self.value is None:
            return self.name
        if self.expression:
            return f"{self.name}={{{self.value}}}"
        return f'{self.name}="{self.value}"'


@dataclass
class JsxText:
    text: str


@dataclass
class JsxExpression:
    code: str


@dataclass
class JsxElement:
    tag: str
    attributes: List[JsxAttribute] = field(default_factory=list)
    children: List["JsxChild"] = field(default_factory=list)


JsxChild = Union[JsxElement, JsxText, JsxExpression]


def literal_attribute(name: str, value: Any) -> JsxAttribute:
    """Build the attribute for a literal prop value."""
    if isinstance(value, str) and not any(char in value for char in '"&\n\r{}<>'):
        return JsxAttribute(name, value)
    if isinstance(value, str):
        return JsxAttribute(name, js_string(value), expression=True)
    return JsxAttribute(name, js_literal(value), expression=True)


def literal_child(value: Any) -> Optional[JsxChild]:
    """Build the child for a literal children value (``None`` renders nothing)."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        if value.strip() == value and not any(char in value for char in "{}<>&\n\r"):
            return JsxText(value)
        return JsxExpression(js_string(value))
    return JsxExpression(js_literal(value))


def _render_opening(element: JsxElement, indent: str, width: int, self_closing: bool) -> List[str]:
    attributes = [attribute.render() for attribute in element.attributes]
    end = " />" if self_closing else ">"
    single = f"<{element.tag}{''.join(' ' + attr for attr in attributes)}{end}"
    if len(indent) + len(single) <= width and "\n" not in single:
        return [indent + single]
    lines = [f"{indent}<{element.tag}"]
    for attr in attributes:
        lines.extend(f"{indent}{INDENT}{line}" for line in attr.splitlines())
    lines.append(indent + ("/>" if self_closing else ">"))
    return lines


def _render_inline_child(child: JsxChild) -> str:
    if isinstance(child, JsxText):
        return child.text
    if isinstance(child, JsxExpression):
        return f"{{{child.code}}}"
    raise TypeError("Only text and expression children render inline")


def render_element(element: JsxElement, *, indent: int = 0, width: int = DEFAULT_WIDTH) -> str:
    """
    Render an element tree as JSX.

    Attribute lists stay on one line while the opening tag fits within
    ``width`` columns; otherwise each attribute gets its own line. A lone
    text or expression child is kept inline when the whole element fits.
    """
    return "\n".join(_render_lines(element, INDENT * indent, width))


def _render_lines(element: JsxElement, indent: str, width: int) -> List[str]:
    if not element.children:
        return _render_opening(element, indent, width, self_closing=True)

    opening = _render_opening(element, indent, width, self_closing=False)
    closing = f"</{element.tag}>"
    if len(element.children) == 1 and not isinstance(element.children[0], JsxElement):
        inline = _render_inline_child(element.children[0])
        if len(opening) == 1:
            candidate = f"{opening[0]}{inline}{closing}"
            if len(candidate) <= width:
                return [candidate]

    lines = list(opening)
    child_indent = indent + INDENT
    for child in element.children:
        if isinstance(child, JsxElement):
            lines.extend(_render_lines(child, child_indent, width))
        else:
            lines.append(child_indent + _render_inline_child(child))
    lines.append(indent + closing)
    return lines


# =============================================================================
# Statements
# =============================================================================

def indent_block(text: str, level: int = 1) -> str:
    prefix = INDENT * level
    return "\n".join(prefix + line if line else line for line in text.splitlines())


def render_state_hook(name: str, initial: Any) -> str:
    return f"const [{name}, {setter_name(name)}] = useState({js_literal(initial)});"


def render_state_setter_call(state: str, value: Any) -> str:
    return f"{setter_name(state)}({js_literal(value)});"


def render_arrow_method(name: str, statements: Sequence[str], params: str = "") -> str:
    body = "\n".join(indent_block(statement) for statement in statements)
    if not body:
        return f"const {name} = ({params}) => {{}};"
    return f"const {name} = ({params}) => {{\n{body}\n}};"


def render_function_const(name: str, source: str) -> str:
    return f"const {name} = {source.strip().rstrip(';')};"


def render_fetch_effect(url: str, setter: str) -> str:
    return "\n".join(
        [
            "useEffect(() => {",
            f"  fetch({js_string(url)})",
            "    .then((response) => response.json())",
            f"    .then((data) => {setter}(data))",
            "    .catch((error) => console.error(error));",
            "}, []);",
        ]
    )


def render_import(source: str, default: Optional[str], named: Iterable[Tuple[str, str]]) -> str:
    """``import Default, { A, B as C } from "source";``"""
    specifiers: List[str] = []
    if default:
        specifiers.append(default)
    named_parts = [export if export == local else f"{export} as {local}" for export, local in named]
    if named_parts:
        specifiers.append("{ " + ", ".join(named_parts) + " }")
    if not specifiers:
        return f"import {js_string(source)};"
    return f"import {', '.join(specifiers)} from {js_string(source)};"


def render_function_component(name: str, sections: Sequence[Sequence[str]], markup: str) -> str:
    """Assemble a React function component with a default export."""
    body_parts: List[str] = []
    for section in sections:
        if section:
            body_parts.append("\n\n".join(indent_block(statement) for statement in section))
    markup_block = indent_block(markup, 2) if markup else f"{INDENT * 2}null"
    body_parts.append(f"{INDENT}return (\n{markup_block}\n{INDENT});")
    body = "\n\n".join(body_parts)
    return f"const {name}: React.FC = () => {{\n{body}\n}};\n\nexport default {name};\n"


# =============================================================================
# Stylesheets
# =============================================================================

def css_value(prop: str, value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)) and prop not in UNITLESS_CSS_PROPERTIES and value != 0:
        return f"{value}px"
    return str(value)


def render_css_rule(class_name: str, styles: Mapping[str, Any]) -> str:
    declarations = [
        f"{INDENT}{camel_to_kebab(prop)}: {css_value(prop, value)};"
        for prop, value in styles.items()
        if value is not None and value != ""
    ]
    return f".{class_name} {{\n" + "\n".join(declarations) + "\n}"


__all__ = [
    "DEFAULT_WIDTH",
    "JsxAttribute",
    "JsxElement",
    "JsxExpression",
    "JsxText",
    "JsxChild",
    "camel_to_kebab",
    "css_value",
    "indent_block",
    "is_identifier",
    "js_literal",
    "js_string",
    "literal_attribute",
    "literal_child",
    "pascal_case",
    "render_arrow_method",
    "render_css_rule",
    "render_element",
    "render_fetch_effect",
    "render_function_component",
    "render_function_const",
    "render_import",
    "render_state_hook",
    "render_state_setter_call",
    "setter_name",
    "to_identifier",
    "upper_first",
]
