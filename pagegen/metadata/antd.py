"""
Default component catalogue: the editor's materials mapped onto Ant Design.

:func:`build_default_registry` returns a fresh :class:`MetadataRegistry`
holding every built-in component, its codegen hooks, and the parse-time
transformers, mappers and prop mappers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from pagegen.codegen import render
from pagegen.errors import DiagnosticCode
from pagegen.ir.spec import Dependency, Literal, Node, VariableRef

from .registry import (
    CodeGenMeta,
    ComponentMetadata,
    ComponentMethod,
    MetadataRegistry,
    PropMap,
    StateBinding,
    default_transform_props,
    strip_props,
)

if TYPE_CHECKING:
    from pagegen.codegen.module_builder import ModuleBuilder
    from pagegen.ir.schema import SchemaNode
    from pagegen.parser.schema_parser import ParserContext

logger = logging.getLogger(__name__)

ANTD_VERSION = "^5.0.0"
ICONS_PACKAGE = "@ant-design/icons"
DEFAULT_ICON = "QuestionCircleOutlined"
SAMPLE_CELL_VALUE = "Sample data"

TYPOGRAPHY_TAGS = {
    "Text": "Typography.Text",
    "Title": "Typography.Title",
    "Paragraph": "Typography.Paragraph",
    "Link": "Typography.Link",
}


def _antd(export_name: Optional[str] = None, sub_name: Optional[str] = None) -> Dependency:
    return Dependency(
        source="antd",
        export_name=export_name,
        sub_name=sub_name,
        destructuring=True,
        version=ANTD_VERSION,
    )


def _open_close_methods(close_event: str, *, ok_event: Optional[str] = None) -> Tuple[ComponentMethod, ...]:
    methods = [
        ComponentMethod("open", StateBinding("open", True)),
        ComponentMethod(
            "close",
            StateBinding("open", False),
            close_event,
            event_passes_value=close_event == "onOpenChange",
        ),
    ]
    if ok_event:
        methods.append(ComponentMethod("handleOk", StateBinding("open", False), ok_event))
    return tuple(methods)


def default_components() -> Dict[str, ComponentMetadata]:
    """Schema component name -> metadata for the built-in materials."""
    plain = [
        "List",
        "Typography",
        "Form",
        "Button",
        "Input",
        "InputNumber",
        "Select",
        "Image",
        "Slider",
        "Switch",
        "Pagination",
    ]
    containers = ["Space", "Avatar", "Card", "Table", "Upload", "Breadcrumb", "Menu", "Steps", "Tabs"]

    components: Dict[str, ComponentMetadata] = {
        "Page": ComponentMetadata(
            "Page",
            Dependency(source="@/components/Page"),
            is_container=True,
        ),
        "Grid": ComponentMetadata("Row", _antd("Row"), is_container=True),
        "GridColumn": ComponentMetadata("Col", _antd("Col"), is_container=True),
        "ListItem": ComponentMetadata("List.Item", _antd("List", "Item"), is_container=True),
        "FormItem": ComponentMetadata("Form.Item", _antd("Form", "Item"), is_container=True),
        "Modal": ComponentMetadata(
            "Modal",
            _antd(),
            is_container=True,
            methods=_open_close_methods("onCancel", ok_event="onOk"),
        ),
        "Container": ComponentMetadata("div", Dependency(source=""), is_container=True),
        "TableColumn": ComponentMetadata("Table.Column", _antd("Table", "Column")),
        "Tooltip": ComponentMetadata(
            "Tooltip", _antd(), is_container=True, methods=_open_close_methods("onOpenChange")
        ),
        "Radio": ComponentMetadata("Radio.Group", _antd("Radio", "Group"), is_container=True),
        "Dropdown": ComponentMetadata(
            "Dropdown", _antd(), is_container=True, methods=_open_close_methods("onOpenChange")
        ),
        "PageHeader": ComponentMetadata(
            "PageHeader",
            Dependency(source="@/components", export_name="PageHeader", destructuring=True),
        ),
        "TabPane": ComponentMetadata("Tabs.TabPane", _antd("Tabs", "TabPane"), is_container=True),
        "Icon": ComponentMetadata(
            DEFAULT_ICON,
            Dependency(source=ICONS_PACKAGE, destructuring=True, version=ANTD_VERSION),
        ),
    }
    for name in plain:
        components.setdefault(name, ComponentMetadata(name, _antd()))
    for name in containers:
        components.setdefault(name, ComponentMetadata(name, _antd(), is_container=True))
    components["List"].is_container = True
    components["Form"].is_container = True
    return components


# =============================================================================
# Tag names and prop transforms
# =============================================================================

def _literal_value(value: Any) -> Any:
    if isinstance(value, Literal):
        return value.value
    return None


def _fixed_tag(tag: str):
    return lambda props: tag


def _promote_to_children(transformed: PropMap, key: str) -> None:
    value = transformed.pop(key, None)
    if value is None or "children" in transformed:
        return
    if isinstance(value, Literal) and value.value in (None, ""):
        return
    transformed["children"] = value


def _typography_tag(props: PropMap) -> str:
    raw = props.get("type")
    kind = _literal_value(raw)
    if kind is None:
        if raw is not None and not isinstance(raw, Literal):
            logger.warning(
                "Typography type must be a literal string, got %s; rendering Typography.Text",
                type(raw).__name__,
                extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
            )
        return TYPOGRAPHY_TAGS["Text"]
    if not isinstance(kind, str):
        logger.warning(
            "Typography type must be a string, got %r; rendering Typography.Text",
            kind,
            extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
        )
        return TYPOGRAPHY_TAGS["Text"]
    return TYPOGRAPHY_TAGS.get(kind or "Text", "Typography")


def _typography_props(props: PropMap, node: Node) -> PropMap:
    transformed = default_transform_props(strip_props(props, "type"))
    _promote_to_children(transformed, "content")
    return transformed


def _button_props(props: PropMap, node: Node) -> PropMap:
    transformed = default_transform_props(props)
    _promote_to_children(transformed, "text")
    return transformed


def _modal_props(props: PropMap, node: Node) -> PropMap:
    return default_transform_props(strip_props(props, "visibleInEditor"))


def _form_item_props(props: PropMap, node: Node) -> PropMap:
    # ``name`` is the form field binding here, not an editor artefact.
    transformed = default_transform_props(props)
    if "name" in props:
        value = props["name"]
        transformed["name"] = value if not isinstance(value, (str, int, float)) else Literal(value)
    return transformed


def _dropdown_props(props: PropMap, node: Node) -> PropMap:
    transformed = default_transform_props(props)
    _promote_to_children(transformed, "buttonText")
    trigger = transformed.get("trigger")
    if isinstance(trigger, Literal) and trigger.value is not None and not isinstance(trigger.value, list):
        transformed["trigger"] = Literal([trigger.value])
    return transformed


def _keyed_props(*extra_stripped: str):
    def transform(props: PropMap, node: Node) -> PropMap:
        transformed = default_transform_props(strip_props(props, *extra_stripped))
        if "key" not in transformed:
            transformed["key"] = Literal(str(node.id))
        return transformed

    return transform


def _icon_tag(props: PropMap) -> str:
    icon = _literal_value(props.get("icon"))
    return icon if render.is_identifier(icon) else DEFAULT_ICON


def _icon_props(props: PropMap, node: Node) -> PropMap:
    return default_transform_props(strip_props(props, "type", "icon"))


def sample_data_source(columns: Iterable[Any]) -> List[Dict[str, Any]]:
    """One mock row keyed by each column's ``dataIndex``."""
    row: Dict[str, Any] = {"key": "1"}
    for column in columns:
        if isinstance(column, dict) and column.get("dataIndex") is not None:
            row[str(column["dataIndex"])] = SAMPLE_CELL_VALUE
    return [row]


def _table_props(props: PropMap, node: Node) -> PropMap:
    transformed = default_transform_props(strip_props(props, "url"))
    columns = transformed.get("columns")
    if isinstance(columns, Literal) and isinstance(columns.value, list) and "dataSource" not in transformed:
        transformed["dataSource"] = Literal(sample_data_source(columns.value))
    return transformed


def _table_logic(props: PropMap, node: Node, module_builder: "ModuleBuilder") -> Optional[PropMap]:
    """Fetch rows from a literal ``url`` into page state bound to ``dataSource``."""
    url = _literal_value(props.get("url"))
    if not isinstance(url, str) or not url.strip() or "dataSource" in props:
        return None
    state = render.to_identifier(f"dataSource_{node.id}")
    module_builder.add_state(state, [])
    module_builder.add_effect(render.render_fetch_effect(url, render.setter_name(state)))
    return {"dataSource": VariableRef(state)}


# =============================================================================
# Parse-time hooks
# =============================================================================

def _children_promoting_mapper(prop: str):
    def mapper(node: Node, schema_node: "SchemaNode") -> None:
        if prop not in node.props:
            return
        value = node.props.pop(prop)
        if schema_node.children or "children" in node.props:
            logger.warning(
                "%s node %s has both children and %r; dropping %r",
                schema_node.name,
                node.id,
                prop,
                prop,
                extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
            )
            return
        if isinstance(value, Literal) and value.value in (None, ""):
            return
        node.props["children"] = value

    return mapper


def _string_key_mapper(prop: str):
    def mapper(value: Any, key: str, schema_node: "SchemaNode") -> Optional[Literal]:
        if key == prop and isinstance(value, (int, float)) and not isinstance(value, bool):
            return Literal(str(value))
        return None

    return mapper


def _icon_transformer(schema_node: "SchemaNode", ctx: "ParserContext") -> Node:
    """Build an icon node whose tag and import are the selected icon."""
    icon = schema_node.props.get("icon")
    name = icon if render.is_identifier(icon) else DEFAULT_ICON
    dependency = Dependency(source=ICONS_PACKAGE, export_name=name, destructuring=True, version=ANTD_VERSION)
    ctx.add_dependency(dependency)
    node = ctx.build_node(schema_node, name, dependency)
    node.props["icon"] = Literal(name)
    return node


# =============================================================================
# Registry assembly
# =============================================================================

def default_codegen() -> Dict[str, CodeGenMeta]:
    return {
        "Button": CodeGenMeta(_fixed_tag("Button"), _button_props),
        "Modal": CodeGenMeta(_fixed_tag("Modal"), _modal_props),
        "Typography": CodeGenMeta(_typography_tag, _typography_props),
        "List": CodeGenMeta(_fixed_tag("List")),
        "ListItem": CodeGenMeta(_fixed_tag("List.Item")),
        "Form": CodeGenMeta(_fixed_tag("Form")),
        "FormItem": CodeGenMeta(_fixed_tag("Form.Item"), _form_item_props),
        "Dropdown": CodeGenMeta(_fixed_tag("Dropdown"), _dropdown_props),
        "TabPane": CodeGenMeta(_fixed_tag("Tabs.TabPane"), _keyed_props()),
        "PageHeader": CodeGenMeta(_fixed_tag("PageHeader")),
        "Icon": CodeGenMeta(_icon_tag, _icon_props),
        "Table": CodeGenMeta(_fixed_tag("Table"), _table_props, _table_logic),
        "TableColumn": CodeGenMeta(_fixed_tag("Table.Column"), _keyed_props("type")),
    }


def build_default_registry() -> MetadataRegistry:
    """Return a new registry populated with the built-in components."""
    return MetadataRegistry(
        default_components(),
        codegen=default_codegen(),
        node_transformers={"Icon": _icon_transformer},
        node_mappers={
            "Button": _children_promoting_mapper("text"),
            "Typography": _children_promoting_mapper("content"),
        },
        prop_mappers={
            "FormItem": _string_key_mapper("name"),
            "TabPane": _string_key_mapper("key"),
        },
    )


__all__ = [
    "ANTD_VERSION",
    "DEFAULT_ICON",
    "build_default_registry",
    "default_codegen",
    "default_components",
    "sample_data_source",
]
