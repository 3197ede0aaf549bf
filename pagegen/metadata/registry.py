"""
Component metadata registry.

The registry maps schema component names (``Button``, ``ListItem``) to the
target component they become (``Button``, ``List.Item``), the import that
provides it, and optional hooks that customise parsing and code generation.

It is an explicit value object: build one (see
:func:`pagegen.metadata.antd.build_default_registry`) and pass it to the
parser, the preprocessors and the component plugins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Tuple

from pagegen.ir.helpers import is_action_list, is_slot_list
from pagegen.ir.spec import Action, Dependency, Expression, FunctionBody, Literal, Node, PropValue, VariableRef

if TYPE_CHECKING:
    from pagegen.codegen.module_builder import ModuleBuilder
    from pagegen.ir.schema import SchemaNode
    from pagegen.parser.schema_parser import ParserContext

logger = logging.getLogger(__name__)

# Fields the editor stores on props that never reach generated code.
EDITOR_ONLY_PROPS: Tuple[str, ...] = ("desc", "parentId", "id", "name")

PropMap = Dict[str, PropValue]
TagNameFn = Callable[[PropMap], str]
TransformPropsFn = Callable[[PropMap, Node], PropMap]
LogicFragmentsFn = Callable[[PropMap, Node, "ModuleBuilder"], Optional[PropMap]]
NodeTransformer = Callable[["SchemaNode", "ParserContext"], Optional[Node]]
NodeMapper = Callable[[Node, "SchemaNode"], None]
PropMapper = Callable[[Any, str, "SchemaNode"], Optional[PropValue]]


@dataclass(frozen=True)
class StateBinding:
    """The prop a component method drives, and the value it assigns."""
    prop: str
    value: Any


@dataclass(frozen=True)
class ComponentMethod:
    """An imperative method exposed by a component (e.g. ``Modal.open``)."""
    name: str
    state_binding: Optional[StateBinding] = None
    event_binding: Optional[str] = None
    # The bound event passes the next state value as its argument.
    event_passes_value: bool = False


@dataclass
class ComponentMetadata:
    """Static description of one schema component."""
    component_name: str
    dependency: Dependency
    is_container: bool = False
    methods: Tuple[ComponentMethod, ...] = ()

    def find_method(self, name: str) -> Optional[ComponentMethod]:
        for method in self.methods:
            if method.name == name:
                return method
        return None


def strip_props(props: Mapping[str, Any], *names: str) -> PropMap:
    """Copy ``props`` without editor-only fields and the extra ``names``."""
    excluded = set(EDITOR_ONLY_PROPS).union(names)
    return {key: value for key, value in props.items() if key not in excluded}


def default_transform_props(props: Mapping[str, Any], node: Optional[Node] = None) -> PropMap:
    """Strip editor-only fields and wrap any raw value as a :class:`Literal`."""
    transformed: PropMap = {}
    for key, value in strip_props(props).items():
        transformed[key] = value if _is_prop_value(value) else Literal(value)
    return transformed


def _is_prop_value(value: Any) -> bool:
    if isinstance(value, (Literal, VariableRef, Expression, FunctionBody, Action, Node)):
        return True
    return is_action_list(value) or is_slot_list(value)


@dataclass
class CodeGenMeta:
    """Per-component code generation hooks consumed by the JSX plugin."""
    get_tag_name: TagNameFn
    get_transformed_props: TransformPropsFn = default_transform_props
    get_logic_fragments: Optional[LogicFragmentsFn] = None


class MetadataRegistry:
    """
    Registry of component metadata and codegen hooks.

    Hook lookups are checked before the identity behaviour: a registered
    node transformer replaces default node construction, a node mapper
    post-adjusts the default node, and a prop mapper adjusts one prop.
    """

    def __init__(
        self,
        components: Optional[Mapping[str, ComponentMetadata]] = None,
        *,
        codegen: Optional[Mapping[str, CodeGenMeta]] = None,
        node_transformers: Optional[Mapping[str, NodeTransformer]] = None,
        node_mappers: Optional[Mapping[str, NodeMapper]] = None,
        prop_mappers: Optional[Mapping[str, PropMapper]] = None,
    ) -> None:
        self._components: Dict[str, ComponentMetadata] = dict(components or {})
        self._codegen: Dict[str, CodeGenMeta] = dict(codegen or {})
        self._node_transformers: Dict[str, NodeTransformer] = dict(node_transformers or {})
        self._node_mappers: Dict[str, NodeMapper] = dict(node_mappers or {})
        self._prop_mappers: Dict[str, PropMapper] = dict(prop_mappers or {})

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_component(self, name: str, metadata: ComponentMetadata) -> None:
        self._components[name] = metadata

    def register_codegen(self, name: str, meta: CodeGenMeta) -> None:
        self._codegen[name] = meta

    def register_node_transformer(self, name: str, transformer: NodeTransformer) -> None:
        self._node_transformers[name] = transformer

    def register_node_mapper(self, name: str, mapper: NodeMapper) -> None:
        self._node_mappers[name] = mapper

    def register_prop_mapper(self, name: str, mapper: PropMapper) -> None:
        self._prop_mappers[name] = mapper

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def component_names(self) -> List[str]:
        return list(self._components)

    def get_component_metadata(self, name: str) -> Optional[ComponentMetadata]:
        return self._components.get(name)

    def get_node_transformer(self, name: str) -> Optional[NodeTransformer]:
        return self._node_transformers.get(name)

    def get_node_mapper(self, name: str) -> Optional[NodeMapper]:
        return self._node_mappers.get(name)

    def get_prop_mapper(self, name: str) -> Optional[PropMapper]:
        return self._prop_mappers.get(name)

    def get_component_codegen_meta(self, name: str, default_tag: Optional[str] = None) -> CodeGenMeta:
        """
        Resolve the codegen hooks for a schema component name.

        Unregistered components get identity transforms and the tag the
        registry declares for them; unknown names use ``default_tag`` (the
        IR node's resolved tag) or the name itself.
        """
        meta = self._codegen.get(name)
        if meta is not None:
            return meta
        component = self._components.get(name)
        if component is not None:
            default_tag = component.component_name
        default_tag = default_tag or name
        return CodeGenMeta(get_tag_name=lambda props: default_tag)

    # ------------------------------------------------------------------
    # Dependency aggregation
    # ------------------------------------------------------------------

    def all_dependencies(self) -> List[Dependency]:
        """Unique dependencies declared by every registered component."""
        unique: Dict[Tuple[str, str], Dependency] = {}
        for meta in self._components.values():
            key = (meta.dependency.source, meta.dependency.export_name or meta.component_name)
            unique.setdefault(key, meta.dependency)
        return list(unique.values())

    def project_dependencies(self) -> Dict[str, str]:
        """
        Installable npm packages (with versions) for the build manifest.

        Relative and ``@/`` aliased sources are skipped, as are dependencies
        without a version. React is always present, and the antd icon
        package accompanies antd.
        """
        dependencies: Dict[str, str] = {}
        for dependency in self.all_dependencies():
            if dependency.is_npm_package and dependency.version:
                dependencies[dependency.source] = dependency.version
        dependencies["react"] = "^18.0.0"
        dependencies["react-dom"] = "^18.0.0"
        if "antd" in dependencies:
            dependencies["@ant-design/icons"] = "^5.0.0"
        return dependencies


__all__ = [
    "EDITOR_ONLY_PROPS",
    "StateBinding",
    "ComponentMethod",
    "ComponentMetadata",
    "CodeGenMeta",
    "MetadataRegistry",
    "NodeTransformer",
    "NodeMapper",
    "PropMapper",
    "strip_props",
    "default_transform_props",
]
