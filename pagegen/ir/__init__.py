"""Intermediate representation for the generation pipeline."""

from .spec import (
    Action,
    Dependency,
    Expression,
    FileType,
    FunctionBody,
    GeneratedFile,
    Literal,
    NO_DEPENDENCY,
    Node,
    Page,
    PageMethod,
    Project,
    PropValue,
    StateSetter,
    VariableRef,
)
from .helpers import actions_of, build_node_map, is_action_list, is_slot_list, iter_slot_nodes, walk
from .schema import SchemaInput, SchemaNode, coerce_schema

__all__ = [
    "Action",
    "Dependency",
    "Expression",
    "FileType",
    "FunctionBody",
    "GeneratedFile",
    "Literal",
    "NO_DEPENDENCY",
    "Node",
    "Page",
    "PageMethod",
    "Project",
    "PropValue",
    "StateSetter",
    "VariableRef",
    "actions_of",
    "build_node_map",
    "is_action_list",
    "is_slot_list",
    "iter_slot_nodes",
    "walk",
    "SchemaInput",
    "SchemaNode",
    "coerce_schema",
]
