"""Component metadata: the registry value object and the default catalogue."""

from .antd import build_default_registry
from .registry import (
    EDITOR_ONLY_PROPS,
    CodeGenMeta,
    ComponentMetadata,
    ComponentMethod,
    MetadataRegistry,
    StateBinding,
    default_transform_props,
    strip_props,
)

__all__ = [
    "EDITOR_ONLY_PROPS",
    "CodeGenMeta",
    "ComponentMetadata",
    "ComponentMethod",
    "MetadataRegistry",
    "StateBinding",
    "build_default_registry",
    "default_transform_props",
    "strip_props",
]
