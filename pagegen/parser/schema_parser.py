"""
Schema parser: editor schema -> IR project.

The parser is a recursive descent over :class:`~pagegen.ir.schema.SchemaNode`
trees. Component lookups go through the injected
:class:`~pagegen.metadata.registry.MetadataRegistry`; per-page state (the
dependency accumulator and the current tree path) travels in an explicit
:class:`ParserContext`.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from pagegen.codegen.render import pascal_case
from pagegen.errors import DiagnosticCode
from pagegen.ir.schema import SchemaInput, SchemaNode, coerce_schema
from pagegen.ir.spec import (
    NO_DEPENDENCY,
    Action,
    Dependency,
    Expression,
    FunctionBody,
    Literal,
    Node,
    Page,
    Project,
    PropValue,
)
from pagegen.metadata import MetadataRegistry, build_default_registry

logger = logging.getLogger(__name__)

ROOT_COMPONENT = "Page"
INDEX_PAGE = "index"
FALLBACK_TAG = "div"

PathSegment = Union[int, str]


@dataclass
class ParserContext:
    """Traversal state for one page: the tree path and collected dependencies."""

    parser: "SchemaParser"
    path: Tuple[PathSegment, ...] = ()
    dependencies: Dict[Tuple[str, Optional[str]], Dependency] = field(default_factory=dict)

    @property
    def registry(self) -> MetadataRegistry:
        return self.parser.registry

    @property
    def page_dependencies(self) -> List[Dependency]:
        return list(self.dependencies.values())

    def child(self, *segments: PathSegment) -> "ParserContext":
        """Context for a nested node; the dependency map is shared."""
        return dataclasses.replace(self, path=self.path + segments)

    def node_id(self, schema_node: SchemaNode) -> str:
        if schema_node.id is not None and str(schema_node.id) != "":
            return str(schema_node.id)
        return "node_" + "_".join(str(segment) for segment in self.path)

    def add_dependency(self, dependency: Dependency) -> None:
        if dependency.source:
            self.dependencies.setdefault(dependency.key, dependency)

    # Delegates for node transformers.

    def parse_node(self, schema_node: SchemaNode) -> Node:
        return self.parser.parse_node(schema_node, self)

    def parse_prop_value(self, key: str, value: Any, schema_node: SchemaNode) -> PropValue:
        return self.parser.parse_prop_value(key, value, schema_node, self)

    def build_node(self, schema_node: SchemaNode, component_name: str, dependency: Dependency) -> Node:
        return self.parser.build_node(schema_node, component_name, dependency, self)


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def _strip_callables(value: Any, active: Set[int]) -> Any:
    """Drop callables from objects and null them in arrays, as JSON does."""
    if isinstance(value, (dict, list, tuple)):
        marker = id(value)
        if marker in active:
            raise ValueError("Circular reference detected")
        active.add(marker)
        try:
            if isinstance(value, dict):
                return {key: _strip_callables(item, active) for key, item in value.items() if not callable(item)}
            return [None if callable(item) else _strip_callables(item, active) for item in value]
        finally:
            active.discard(marker)
    return value


def json_copy(value: Any) -> Any:
    """Deep copy ``value`` through a JSON round trip."""
    return json.loads(json.dumps(_strip_callables(value, set()), ensure_ascii=False, allow_nan=False))


class SchemaParser:
    """
    Transform a schema (ordered list of nodes) into an IR :class:`Project`.

    Example:
        >>> parser = SchemaParser()
        >>> project = parser.parse([{"id": "1", "name": "Page", "props": {}}])
        >>> project.pages[0].file_name
        'index'
    """

    def __init__(self, registry: Optional[MetadataRegistry] = None) -> None:
        self.registry = registry or build_default_registry()

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def parse(self, schema: Optional[SchemaInput]) -> Project:
        nodes = coerce_schema(schema)
        project = Project(dependencies=self.registry.project_dependencies())
        if not nodes:
            logger.warning("Schema is empty; no pages generated")
            return project

        roots = [node for node in nodes if node.name == ROOT_COMPONENT]
        if not roots:
            logger.warning("No %s root in schema; using the first node %r", ROOT_COMPONENT, nodes[0].name)
            roots = nodes[:1]

        used_names: Set[str] = set()
        for index, root in enumerate(roots):
            ctx = ParserContext(self, path=(index,))
            root_node = self.parse_node(root, ctx)
            file_name = self._page_file_name(root, index, used_names)
            title = root.props.get("title")
            project.pages.append(
                Page(
                    id=root_node.id,
                    file_name=file_name,
                    root_node=root_node,
                    dependencies=ctx.page_dependencies,
                    title=title if isinstance(title, str) else None,
                )
            )
        return project

    @staticmethod
    def _page_file_name(root: SchemaNode, index: int, used: Set[str]) -> str:
        if index == 0:
            base = INDEX_PAGE
        else:
            file_name = root.props.get("fileName")
            title = root.props.get("title")
            if isinstance(file_name, str) and _slug(file_name):
                base = _slug(file_name)
            elif isinstance(title, str) and _slug(title):
                base = _slug(title)
            else:
                base = f"page_{index}"
        # Page modules are named after the PascalCase file name, so compare on that.
        name = base
        counter = 2
        while pascal_case(name) in used:
            name = f"{base}_{counter}"
            counter += 1
        used.add(pascal_case(name))
        return name

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def parse_node(self, schema_node: SchemaNode, ctx: ParserContext) -> Node:
        transformer = self.registry.get_node_transformer(schema_node.name)
        if transformer is not None:
            result = transformer(schema_node, ctx)
            if result is not None:
                return result

        metadata = self.registry.get_component_metadata(schema_node.name)
        if metadata is None:
            return self._fallback_node(schema_node, ctx)

        dependency = metadata.dependency
        if dependency.destructuring and not dependency.export_name:
            dependency = dataclasses.replace(dependency, export_name=metadata.component_name.split(".")[0])
        ctx.add_dependency(dependency)
        node = self.build_node(schema_node, metadata.component_name, dependency, ctx)

        mapper = self.registry.get_node_mapper(schema_node.name)
        if mapper is not None:
            mapper(node, schema_node)
        return node

    def build_node(
        self,
        schema_node: SchemaNode,
        component_name: str,
        dependency: Dependency,
        ctx: ParserContext,
    ) -> Node:
        """Default IR construction: classified props, styles and parsed children."""
        node = Node(
            id=ctx.node_id(schema_node),
            component_name=component_name,
            dependency=dependency,
            schema_name=schema_node.name,
            styles=dict(schema_node.styles) if schema_node.styles else None,
        )
        for key, value in schema_node.props.items():
            if key == "toString" and isinstance(value, str) and "[native code]" in value:
                continue
            node.props[key] = self.parse_prop_value(key, value, schema_node, ctx.child(key))
        node.children = self._parse_children(schema_node, ctx)
        return node

    def _parse_children(self, schema_node: SchemaNode, ctx: ParserContext) -> Optional[List[Node]]:
        if not schema_node.children:
            return None
        return [self.parse_node(child, ctx.child(index)) for index, child in enumerate(schema_node.children)]

    def _fallback_node(self, schema_node: SchemaNode, ctx: ParserContext) -> Node:
        logger.error(
            "No component metadata for %r; emitting a placeholder",
            schema_node.name,
            extra={"pagegen_code": DiagnosticCode.UNKNOWN_COMPONENT},
        )
        return Node(
            id=ctx.node_id(schema_node),
            component_name=FALLBACK_TAG,
            dependency=NO_DEPENDENCY,
            schema_name=schema_node.name,
            props={
                "data-unknown-component": Literal(schema_node.name),
                "children": Literal(f"Unknown Component: {schema_node.name}"),
            },
            children=self._parse_children(schema_node, ctx) or [],
        )

    # ------------------------------------------------------------------
    # Props
    # ------------------------------------------------------------------

    def parse_prop_value(self, key: str, value: Any, schema_node: SchemaNode, ctx: ParserContext) -> PropValue:
        """Classify one raw prop value into an IR prop value."""
        mapper = self.registry.get_prop_mapper(schema_node.name)
        if mapper is not None:
            mapped = mapper(value, key, schema_node)
            if mapped is not None:
                return mapped

        if isinstance(value, dict):
            if isinstance(value.get("actions"), list):
                return self._parse_actions(value["actions"], key, schema_node)
            kind = value.get("type")
            if kind in ("JSExpression", "JSFunction"):
                if isinstance(value.get("value"), str):
                    wrapper = Expression if kind == "JSExpression" else FunctionBody
                    return wrapper(value["value"])
                logger.warning(
                    "Prop %r of %s is not a valid %s; treating it as a literal",
                    key,
                    schema_node.name,
                    kind,
                    extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
                )
            elif kind == "JSSlot":
                slot = self._parse_slot(value.get("value"), ctx)
                if slot is not None:
                    return slot
                logger.warning(
                    "Prop %r of %s is not a valid JSSlot; treating it as a literal",
                    key,
                    schema_node.name,
                    extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
                )

        return self._parse_literal(key, value, schema_node)

    def _parse_slot(self, value: Any, ctx: ParserContext) -> Optional[Union[Node, List[Node]]]:
        raw = value if isinstance(value, list) else [value]
        if not raw or not all(isinstance(item, (dict, SchemaNode)) for item in raw):
            return None
        try:
            schema_nodes = coerce_schema(raw)
        except Exception as exc:
            logger.debug("Slot value is not a node list: %s", exc)
            return None
        nodes = [self.parse_node(item, ctx.child(index)) for index, item in enumerate(schema_nodes)]
        return nodes if isinstance(value, list) else nodes[0]

    @staticmethod
    def _parse_action(entry: Any, key: str, schema_node: SchemaNode) -> Optional[Action]:
        if not isinstance(entry, dict) or not isinstance(entry.get("type"), str) or not entry["type"]:
            return None
        config = entry.get("config")
        if config is None:
            config = {name: item for name, item in entry.items() if name != "type"}
        elif not isinstance(config, dict):
            return None
        try:
            return Action(entry["type"], json_copy(config))
        except (TypeError, ValueError) as exc:
            logger.error(
                "Cannot serialise %s action config in %r of %s (id %s): %s",
                entry["type"],
                key,
                schema_node.name,
                schema_node.id,
                exc,
                extra={"pagegen_code": DiagnosticCode.SERIALIZATION_FAILURE},
            )
            return None

    def _parse_actions(self, entries: List[Any], key: str, schema_node: SchemaNode) -> PropValue:
        parsed = (self._parse_action(entry, key, schema_node) for entry in entries)
        actions = [action for action in parsed if action is not None]
        if actions and len(actions) < len(entries):
            logger.warning(
                "Skipped %d invalid action(s) in %r of %s (id %s)",
                len(entries) - len(actions),
                key,
                schema_node.name,
                schema_node.id,
                extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
            )
        if not actions:
            logger.warning(
                "No valid actions in %r of %s (id %s); prop set to null",
                key,
                schema_node.name,
                schema_node.id,
                extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
            )
            return Literal(None)
        return actions[0] if len(actions) == 1 else actions

    def _parse_literal(self, key: str, value: Any, schema_node: SchemaNode) -> Literal:
        if value is None or isinstance(value, (str, int, float, bool)):
            return Literal(value)
        if isinstance(value, (dict, list, tuple)):
            try:
                return Literal(json_copy(value))
            except (TypeError, ValueError) as exc:
                logger.error(
                    "Cannot serialise prop %r of %s (id %s): %s",
                    key,
                    schema_node.name,
                    schema_node.id,
                    exc,
                    extra={"pagegen_code": DiagnosticCode.SERIALIZATION_FAILURE},
                )
                return Literal(None)
        logger.warning(
            "Unrecognised value type %s in prop %r of %s; treating it as a literal",
            type(value).__name__,
            key,
            schema_node.name,
            extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
        )
        return Literal(value)


__all__ = ["ParserContext", "SchemaParser", "json_copy"]
