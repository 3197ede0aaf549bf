"""Per-file generation state: imports, state, effects, methods, CSS and markup."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from pagegen.ir.spec import Dependency

from . import render

logger = logging.getLogger(__name__)

_DEFAULT_KEY = "default"


@dataclass
class _ImportEntry:
    source: str
    default: Optional[str] = None
    named: Dict[str, str] = field(default_factory=dict)


def _import_group(source: str) -> int:
    if source.endswith((".scss", ".css")):
        return 2
    if source.startswith((".", "@/")):
        return 1
    return 0


class ModuleBuilder:
    """
    Accumulates everything one generated module needs.

    Component plugins write into the builder while walking a page; the
    page assembly step then asks for the module text and the companion
    CSS module.
    """

    def __init__(self, module_name: str = "Index") -> None:
        self.module_name = module_name
        self._imports: Dict[str, _ImportEntry] = {}
        self._resolved: Dict[Tuple[str, str], str] = {}
        self._reserved: Set[str] = {"React", "useState", "useEffect", "styles", module_name}
        self._states: Dict[str, str] = {}
        self._effects: List[str] = []
        self._methods: Dict[str, str] = {}
        self._css_classes: Dict[str, Dict[str, Any]] = {}
        self._node_classes: Dict[str, str] = {}
        self._markup = ""
        self.stylesheet: Optional[str] = None

    # ------------------------------------------------------------------
    # Names and imports
    # ------------------------------------------------------------------

    def unique_name(self, base: str) -> str:
        """Reserve and return ``base`` or the first free ``base_<n>``."""
        name = render.to_identifier(base)
        candidate = name
        counter = 2
        while candidate in self._reserved:
            candidate = f"{name}_{counter}"
            counter += 1
        self._reserved.add(candidate)
        return candidate

    def add_import(self, dependency: Dependency, local_name: Optional[str] = None) -> str:
        """
        Register ``dependency`` and return the local name to reference it by.

        Destructured imports are keyed by ``(source, export_name)``, default
        imports by source. A local name already taken by a different import
        is renamed; named imports then use ``{ Export as Local }``.
        """
        desired = render.to_identifier(local_name or dependency.export_name or "Component")
        if not dependency.source:
            return desired

        export = (dependency.export_name or desired) if dependency.destructuring else _DEFAULT_KEY
        key = (dependency.source, export)
        existing = self._resolved.get(key)
        if existing is not None:
            return existing

        local = self.unique_name(desired)
        if local != desired:
            logger.debug("Import name %s already taken; using %s for %s", desired, local, dependency.source)
        entry = self._imports.setdefault(dependency.source, _ImportEntry(dependency.source))
        if dependency.destructuring:
            entry.named[export] = local
        elif entry.default is None:
            entry.default = local
        self._resolved[key] = local
        return local

    def set_stylesheet(self, source: str) -> str:
        """Import the companion CSS module as ``styles``."""
        self.stylesheet = source
        return "styles"

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def add_state(self, name: str, initial: Any) -> None:
        if name in self._states:
            return
        self._reserved.update({name, render.setter_name(name)})
        self._states[name] = render.render_state_hook(name, initial)

    def add_method(self, name: str, code: str) -> None:
        if name in self._methods:
            return
        self._reserved.add(name)
        self._methods[name] = code

    def add_effect(self, code: str) -> None:
        if code not in self._effects:
            self._effects.append(code)

    def has_method(self, name: str) -> bool:
        return name in self._methods

    # ------------------------------------------------------------------
    # Styles
    # ------------------------------------------------------------------

    def add_css_class(self, class_name: str, styles: Mapping[str, Any], node_id: Optional[str] = None) -> None:
        self._css_classes[class_name] = dict(styles)
        if node_id is not None:
            self._node_classes[node_id] = class_name

    def css_class_for(self, node_id: str) -> Optional[str]:
        """Class registered for node ``node_id`` in this module, if any."""
        return self._node_classes.get(node_id)

    @property
    def has_css(self) -> bool:
        return bool(self._css_classes)

    def generate_css_module(self) -> str:
        rules = [render.render_css_rule(name, styles) for name, styles in self._css_classes.items()]
        return "\n\n".join(rules) + "\n" if rules else ""

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def set_markup(self, markup: str) -> None:
        self._markup = markup

    def _render_imports(self) -> str:
        hooks = [("useState", "useState")] if self._states else []
        if self._effects:
            hooks.append(("useEffect", "useEffect"))
        lines = [render.render_import("react", "React", hooks)]

        groups: List[List[str]] = [[], [], []]
        for source in sorted(self._imports):
            entry = self._imports[source]
            groups[_import_group(source)].append(
                render.render_import(source, entry.default, sorted(entry.named.items()))
            )
        if self.stylesheet:
            groups[2].append(render.render_import(self.stylesheet, "styles", []))

        lines.extend(groups[0])
        blocks = ["\n".join(lines)]
        blocks.extend("\n".join(group) for group in groups[1:] if group)
        return "\n\n".join(blocks)

    def generate_module(self, name: Optional[str] = None) -> str:
        """Return the full module text for component ``name``."""
        component = render.to_identifier(name or self.module_name)
        sections = [list(self._states.values()), list(self._effects), list(self._methods.values())]
        body = render.render_function_component(component, sections, self._markup)
        return f"{self._render_imports()}\n\n{body}"


__all__ = ["ModuleBuilder"]
