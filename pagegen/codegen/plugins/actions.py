"""
Action handlers: turn declarative :class:`~pagegen.ir.spec.Action` values
into statements of a generated event handler.

Every value taken from the action config reaches the output through
:func:`pagegen.codegen.render.js_string` or :func:`~pagegen.codegen.render.js_literal`,
and method references must be plain identifiers.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from pagegen.codegen import render
from pagegen.codegen.module_builder import ModuleBuilder
from pagegen.errors import DiagnosticCode
from pagegen.ir.spec import Action, Dependency

logger = logging.getLogger(__name__)

ActionHandler = Callable[[Action, ModuleBuilder], str]

MESSAGE_LEVELS = ("success", "error", "info", "warning", "loading")
METHOD_PREFIX = "this.methods."
MESSAGE_DEPENDENCY = Dependency(source="antd", export_name="message", destructuring=True, version="^5.0.0")


def go_to_link(action: Action, module_builder: ModuleBuilder) -> str:
    return f'window.open({render.js_string(action.config.get("url") or "")}, "_blank");'


def show_message(action: Action, module_builder: ModuleBuilder) -> str:
    local = module_builder.add_import(MESSAGE_DEPENDENCY, "message")
    level = action.config.get("type")
    if level not in MESSAGE_LEVELS:
        if level is not None:
            logger.warning("Unsupported message level %r; using info", level)
        level = "info"
    return f"{local}.{level}({render.js_string(action.config.get('text') or '')});"


def call_method(action: Action, module_builder: ModuleBuilder) -> str:
    name = action.config.get("methodName")
    if isinstance(name, str) and name.startswith(METHOD_PREFIX):
        name = name[len(METHOD_PREFIX):]
    if not render.is_identifier(name):
        logger.warning(
            "callMethod target %r is not an identifier",
            name,
            extra={"pagegen_code": DiagnosticCode.INVALID_PROP_SHAPE},
        )
        return f"console.warn({render.js_string(f'Invalid method reference: {name}')});"
    return f"{name}();"


def component_method_placeholder(action: Action, module_builder: ModuleBuilder) -> str:
    target = action.config.get("componentId")
    method = action.config.get("method")
    return f"console.warn({render.js_string(f'Unresolved component method: {target}.{method}')});"


def default_handler(action: Action, module_builder: ModuleBuilder) -> str:
    return f"console.log({render.js_string(f'Action triggered: {action.action_type}')}, {render.js_literal(action.config)});"


class ActionHandlerRegistry:
    """Maps ``action_type`` to a handler; unknown types use the default handler."""

    def __init__(
        self,
        handlers: Optional[Dict[str, ActionHandler]] = None,
        default: ActionHandler = default_handler,
    ) -> None:
        self._handlers: Dict[str, ActionHandler] = dict(handlers or {})
        self.default = default

    def register(self, action_type: str, handler: ActionHandler) -> None:
        self._handlers[action_type] = handler

    def get(self, action_type: str) -> ActionHandler:
        return self._handlers.get(action_type, self.default)

    def types(self) -> List[str]:
        return list(self._handlers)

    def render_statement(self, action: Action, module_builder: ModuleBuilder) -> str:
        return self.get(action.action_type)(action, module_builder)

    def render_statements(self, actions: Sequence[Action], module_builder: ModuleBuilder) -> List[str]:
        """
        Statements for one event, in array order.

        With several actions each statement is preceded by a
        ``// <actionType>`` comment line.
        """
        if len(actions) == 1:
            return [self.render_statement(actions[0], module_builder)]
        statements: List[str] = []
        for action in actions:
            label = render.to_identifier(action.action_type)
            statements.append(f"// {label}\n{self.render_statement(action, module_builder)}")
        return statements


def build_default_action_handlers() -> ActionHandlerRegistry:
    return ActionHandlerRegistry(
        {
            "goToLink": go_to_link,
            "showMessage": show_message,
            "callMethod": call_method,
            "componentMethod": component_method_placeholder,
        }
    )


__all__ = [
    "ActionHandler",
    "ActionHandlerRegistry",
    "MESSAGE_LEVELS",
    "build_default_action_handlers",
    "call_method",
    "component_method_placeholder",
    "default_handler",
    "go_to_link",
    "show_message",
]
