"""Component-level plugins and the action handler registry."""

from .actions import ActionHandler, ActionHandlerRegistry, build_default_action_handlers
from .base import PHASE_POST, PHASE_PRE, ComponentPlugin, ProjectPlugin, ordered_project_plugins
from .css import CssModulePlugin
from .jsx import JsxPlugin

__all__ = [
    "ActionHandler",
    "ActionHandlerRegistry",
    "ComponentPlugin",
    "CssModulePlugin",
    "JsxPlugin",
    "PHASE_POST",
    "PHASE_PRE",
    "ProjectPlugin",
    "build_default_action_handlers",
    "ordered_project_plugins",
]
