"""
JSX plugin: render a page's IR tree as a React function component body.

Decisions (tag, props, handlers, class names) are made here; all text goes
through :mod:`pagegen.codegen.render`.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pagegen.codegen import render
from pagegen.codegen.module_builder import ModuleBuilder
from pagegen.codegen.render import JsxAttribute, JsxChild, JsxElement, JsxExpression
from pagegen.errors import DiagnosticCode
from pagegen.ir.helpers import actions_of, is_slot_list
from pagegen.ir.spec import (
    Action,
    Dependency,
    Expression,
    FunctionBody,
    Literal,
    Node,
    Page,
    PageMethod,
    PropValue,
    StateSetter,
    VariableRef,
)
from pagegen.metadata.registry import MetadataRegistry

from .actions import ActionHandlerRegistry, build_default_action_handlers

logger = logging.getLogger(__name__)

# Columns used by the component wrapper around the returned markup.
MARKUP_INDENT = 4


def handler_base_name(prop: str, node_id: str) -> str:
    """``onClick`` on node 2 -> ``handleClick_2``."""
    event = prop[2:] if prop.startswith("on") and prop[2:3].isupper() else render.upper_first(prop)
    return render.to_identifier(f"handle{event}_{node_id}")


def render_page_method(name: str, method: PageMethod) -> str:
    if isinstance(method, StateSetter):
        if method.from_event:
            return render.render_arrow_method(
                name, [f"{render.setter_name(method.state)}(value);"], params="value: boolean"
            )
        return render.render_arrow_method(name, [render.render_state_setter_call(method.state, method.value)])
    return render.render_function_const(name, method.text)


class JsxPlugin:
    """Builds the markup, hooks and handlers of one page module."""

    name = "react-jsx"

    def __init__(self, action_handlers: Optional[ActionHandlerRegistry] = None, width: int = render.DEFAULT_WIDTH) -> None:
        self.action_handlers = action_handlers or build_default_action_handlers()
        self.width = width

    def run(self, page: Page, module_builder: ModuleBuilder, registry: MetadataRegistry) -> None:
        for state, initial in page.states.items():
            module_builder.add_state(state, initial.value)
        for name, method in page.methods.items():
            module_builder.add_method(name, render_page_method(name, method))

        element = self.build_element(page.root_node, module_builder, registry)
        module_builder.set_markup(render.render_element(element, width=self.width - MARKUP_INDENT))

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def build_element(self, node: Node, module_builder: ModuleBuilder, registry: MetadataRegistry) -> JsxElement:
        meta = registry.get_component_codegen_meta(node.schema_name or node.component_name, node.component_name)
        props = dict(node.props)
        tag = meta.get_tag_name(props)
        transformed = meta.get_transformed_props(props, node)
        if meta.get_logic_fragments is not None:
            overrides = meta.get_logic_fragments(props, node, module_builder)
            if overrides:
                transformed.update(overrides)

        element = JsxElement(self._resolve_tag(tag, node.dependency, module_builder))
        children_prop = transformed.pop("children", None)
        class_prop = transformed.pop("className", None)

        for key, value in transformed.items():
            attribute = self._attribute(key, value, node, module_builder, registry)
            if attribute is not None:
                element.attributes.append(attribute)
        class_attribute = self._class_name(class_prop, node, module_builder)
        if class_attribute is not None:
            element.attributes.append(class_attribute)

        if node.children:
            element.children = [self.build_element(child, module_builder, registry) for child in node.children]
        elif children_prop is not None:
            element.children = self._slot_children(children_prop, node, module_builder, registry)
        return element

    @staticmethod
    def _resolve_tag(tag: str, dependency: Dependency, module_builder: ModuleBuilder) -> str:
        if not dependency.source:
            return tag
        head, dot, rest = tag.partition(".")
        local = module_builder.add_import(dependency, head)
        return f"{local}{dot}{rest}"

    def _slot_children(
        self,
        value: PropValue,
        node: Node,
        module_builder: ModuleBuilder,
        registry: MetadataRegistry,
    ) -> List[JsxChild]:
        if isinstance(value, Literal):
            child = render.literal_child(value.value)
            return [child] if child is not None else []
        if isinstance(value, Node):
            return [self.build_element(value, module_builder, registry)]
        if is_slot_list(value):
            return [self.build_element(item, module_builder, registry) for item in value]
        if isinstance(value, VariableRef):
            return [JsxExpression(value.name)]
        if isinstance(value, (Expression, FunctionBody)):
            return [JsxExpression(value.text.strip())]
        logger.warning(
            "Ignoring children of node %s: unsupported value %s",
            node.id,
            type(value).__name__,
            extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
        )
        return []

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def _attribute(
        self,
        key: str,
        value: PropValue,
        node: Node,
        module_builder: ModuleBuilder,
        registry: MetadataRegistry,
    ) -> Optional[JsxAttribute]:
        if isinstance(value, Literal):
            return render.literal_attribute(key, value.value)
        if isinstance(value, VariableRef):
            return JsxAttribute(key, value.name, expression=True)
        if isinstance(value, (Expression, FunctionBody)):
            return JsxAttribute(key, value.text.strip(), expression=True)
        actions = actions_of(value)
        if actions:
            return JsxAttribute(key, self._handler(key, actions, node, module_builder), expression=True)
        if isinstance(value, Node) or is_slot_list(value):
            return JsxAttribute(key, self._render_slot(value, module_builder, registry), expression=True)
        logger.warning(
            "Dropping prop %r of node %s: unsupported value %s",
            key,
            node.id,
            type(value).__name__,
            extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
        )
        return None

    def _handler(self, key: str, actions: List[Action], node: Node, module_builder: ModuleBuilder) -> str:
        name = module_builder.unique_name(handler_base_name(key, node.id))
        statements = self.action_handlers.render_statements(actions, module_builder)
        module_builder.add_method(name, render.render_arrow_method(name, statements))
        return name

    def _render_slot(self, value: PropValue, module_builder: ModuleBuilder, registry: MetadataRegistry) -> str:
        if isinstance(value, Node):
            element = self.build_element(value, module_builder, registry)
        else:
            element = JsxElement("", children=[self.build_element(item, module_builder, registry) for item in value])
        return render.render_element(element, width=self.width - MARKUP_INDENT)

    @staticmethod
    def _class_name(
        value: Optional[PropValue], node: Node, module_builder: ModuleBuilder
    ) -> Optional[JsxAttribute]:
        css_class = module_builder.css_class_for(node.id) or node.css_class
        if not css_class:
            if value is None:
                return None
            if isinstance(value, Literal):
                return render.literal_attribute("className", value.value)
            if isinstance(value, VariableRef):
                return JsxAttribute("className", value.name, expression=True)
            if isinstance(value, (Expression, FunctionBody)):
                return JsxAttribute("className", value.text.strip(), expression=True)
            return None

        module_class = f"styles.{css_class}"
        if isinstance(value, Literal) and value.value not in (None, ""):
            existing = render.js_string(value.value)
        elif isinstance(value, VariableRef):
            existing = value.name
        elif isinstance(value, Expression):
            existing = value.text.strip()
        else:
            return JsxAttribute("className", module_class, expression=True)
        return JsxAttribute("className", f'[{existing}, {module_class}].join(" ")', expression=True)


__all__ = ["JsxPlugin", "handler_base_name", "render_page_method"]
