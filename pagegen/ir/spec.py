"""
Intermediate representation (IR) for schema-to-source generation.

The IR sits between the editor schema and the emitted source files. Types
here are deliberately free of any target-framework concepts: the parser
builds them, preprocessors rewrite them, and component plugins read them.

Design Principles:
------------------
1. **Tagged prop values**: every prop value is exactly one of the variant
   dataclasses below (or a list of actions / nodes), never a bare dict.
2. **Deterministic**: ids come from the schema or the tree path, never from
   counters or clocks.
3. **Mutable until codegen**: preprocessors may rewrite pages in place.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


# =============================================================================
# Enumerations
# =============================================================================

class FileType(str, Enum):
    """Closed set of generated file types; drives formatter selection."""
    TSX = "tsx"
    TS = "ts"
    JSON = "json"
    SCSS = "scss"
    CSS = "css"
    HTML = "html"
    VUE = "vue"
    OTHER = "other"

    @property
    def category(self) -> str:
        if self in (FileType.TSX, FileType.TS, FileType.VUE):
            return "source"
        if self in (FileType.SCSS, FileType.CSS):
            return "stylesheet"
        if self is FileType.JSON:
            return "manifest"
        if self is FileType.HTML:
            return "markup"
        return "other"


# =============================================================================
# Dependencies
# =============================================================================

@dataclass(frozen=True)
class Dependency:
    """An import required by a generated module."""
    source: str
    export_name: Optional[str] = None
    sub_name: Optional[str] = None
    destructuring: bool = False
    version: Optional[str] = None

    @property
    def key(self) -> Tuple[str, Optional[str]]:
        return (self.source, self.export_name)

    @property
    def is_npm_package(self) -> bool:
        """True for installable packages (not relative or ``@/`` aliased paths)."""
        return bool(self.source) and not self.source.startswith((".", "@/"))


NO_DEPENDENCY = Dependency(source="")


# =============================================================================
# Prop values
# =============================================================================

@dataclass
class Literal:
    """A static value copied verbatim into the output."""
    value: Any = None


@dataclass
class VariableRef:
    """A read of a named variable in the generated module (e.g. page state)."""
    name: str


@dataclass
class Expression:
    """A raw expression in the target language."""
    text: str


@dataclass
class FunctionBody:
    """A raw function in the target language."""
    text: str


@dataclass
class Action:
    """A declarative event behaviour resolved by the action handler registry."""
    action_type: str
    config: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Node:
    """One component instance in the IR tree."""
    id: str
    component_name: str
    dependency: Dependency = NO_DEPENDENCY
    props: Dict[str, "PropValue"] = field(default_factory=dict)
    schema_name: str = ""
    children: Optional[List["Node"]] = None
    styles: Optional[Dict[str, Any]] = None
    css_class: Optional[str] = None


PropValue = Union[Literal, VariableRef, Expression, FunctionBody, Action, List[Action], Node, List[Node]]


# =============================================================================
# Pages and projects
# =============================================================================

@dataclass
class StateSetter:
    """
    A generated page method that assigns ``value`` to page state ``state``.

    With ``from_event`` the method takes the value from its first argument
    instead (e.g. an ``onOpenChange(open)`` callback).
    """
    state: str
    value: Any = None
    from_event: bool = False


PageMethod = Union[FunctionBody, StateSetter]


@dataclass
class Page:
    """One routed page; created per schema root during parse."""
    id: str
    file_name: str
    root_node: Node
    dependencies: List[Dependency] = field(default_factory=list)
    states: Dict[str, Literal] = field(default_factory=dict)
    methods: Dict[str, PageMethod] = field(default_factory=dict)
    title: Optional[str] = None


@dataclass
class Project:
    """All pages of one export plus the npm dependency manifest."""
    pages: List[Page] = field(default_factory=list)
    dependencies: Dict[str, str] = field(default_factory=dict)


# =============================================================================
# Output
# =============================================================================

@dataclass(frozen=True)
class GeneratedFile:
    """One output file, addressed by its project-relative path."""
    file_name: str
    file_path: str
    content: str
    file_type: FileType = FileType.OTHER

    def with_content(self, content: str) -> "GeneratedFile":
        return dataclasses.replace(self, content=content)


__all__ = [
    "FileType",
    "Dependency",
    "NO_DEPENDENCY",
    "Literal",
    "VariableRef",
    "Expression",
    "FunctionBody",
    "Action",
    "Node",
    "PropValue",
    "StateSetter",
    "PageMethod",
    "Page",
    "Project",
    "GeneratedFile",
]
