"""
State lifting: turn ``componentMethod`` actions into page state and methods.

A ``componentMethod`` action asks another component on the page to run one
of its imperative methods (``Modal.open``). The lifter rewrites that into
plain data the code generator understands:

* page state ``<prop>_<id>`` holding the bound prop (initially ``False``),
* a page method ``handle<Method>_<id>`` assigning the bound value,
* the target prop bound to the state, and every closing method with an
  event binding (``onCancel``, ``onOk``) bound to its own method,
* the original action replaced by ``callMethod`` on the new method.
"""

from __future__ import annotations

import logging
from typing import Dict

from pagegen.codegen.render import to_identifier, upper_first
from pagegen.errors import DiagnosticCode
from pagegen.ir.helpers import actions_of, build_node_map, walk
from pagegen.ir.spec import Action, Literal, Node, Page, Project, StateSetter, VariableRef
from pagegen.metadata import ComponentMetadata, MetadataRegistry

logger = logging.getLogger(__name__)

COMPONENT_METHOD = "componentMethod"
CALL_METHOD = "callMethod"
METHOD_PREFIX = "this.methods."


def method_name(method: str, node_id: str) -> str:
    base = method if method.startswith("handle") else f"handle{upper_first(method)}"
    return to_identifier(f"{base}_{node_id}")


def state_name(prop: str, node_id: str) -> str:
    return to_identifier(f"{prop}_{node_id}")


class StateLifter:
    """Project preprocessor lifting component methods into page state."""

    name = "state-lifter"

    def __init__(self, registry: MetadataRegistry) -> None:
        self.registry = registry

    def __call__(self, project: Project) -> Project:
        for page in project.pages:
            self.lift_page(page)
        return project

    def lift_page(self, page: Page) -> Page:
        node_map = build_node_map(page.root_node)
        for node in list(walk(page.root_node)):
            for key, value in list(node.props.items()):
                actions = actions_of(value)
                if not any(action.action_type == COMPONENT_METHOD for action in actions):
                    continue
                lifted = [self._lift(action, page, node_map) for action in actions]
                node.props[key] = lifted[0] if len(lifted) == 1 else lifted
        return page

    def _lift(self, action: Action, page: Page, node_map: Dict[str, Node]) -> Action:
        if action.action_type != COMPONENT_METHOD:
            return action

        target_id = action.config.get("componentId")
        method = action.config.get("method")
        if target_id is None or not method:
            return self._unresolved(action, "action lacks componentId or method")

        target = node_map.get(str(target_id))
        if target is None:
            return self._unresolved(action, f"no node with id {target_id!r}")

        metadata = self.registry.get_component_metadata(target.schema_name)
        method_meta = metadata.find_method(str(method)) if metadata else None
        if metadata is None or method_meta is None or method_meta.state_binding is None:
            return self._unresolved(
                action,
                f"{target.schema_name or target.component_name} has no state-bound method {method!r}",
            )

        binding = method_meta.state_binding
        state = state_name(binding.prop, target.id)
        handler = method_name(method_meta.name, target.id)

        page.states.setdefault(state, Literal(False))
        page.methods[handler] = StateSetter(state, binding.value)
        target.props[binding.prop] = VariableRef(state)
        self._bind_closing_events(page, target, metadata, binding.prop, state)

        logger.debug("Lifted %s.%s into state %s", target.id, method_meta.name, state)
        return Action(CALL_METHOD, {"methodName": f"{METHOD_PREFIX}{handler}"})

    @staticmethod
    def _bind_closing_events(
        page: Page,
        target: Node,
        metadata: ComponentMetadata,
        prop: str,
        state: str,
    ) -> None:
        for candidate in metadata.methods:
            binding = candidate.state_binding
            if binding is None or binding.prop != prop or binding.value is not False or not candidate.event_binding:
                continue
            if candidate.event_passes_value:
                handler = method_name(candidate.event_binding[2:] or candidate.name, target.id)
                page.methods.setdefault(handler, StateSetter(state, from_event=True))
            else:
                handler = method_name(candidate.name, target.id)
                page.methods.setdefault(handler, StateSetter(state, False))
            target.props[candidate.event_binding] = VariableRef(handler)

    @staticmethod
    def _unresolved(action: Action, reason: str) -> Action:
        logger.warning(
            "Cannot lift component method: %s",
            reason,
            extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
        )
        return action


__all__ = ["StateLifter", "method_name", "state_name"]
