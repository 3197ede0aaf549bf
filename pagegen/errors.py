"""Unified error model for pagegen."""

from __future__ import annotations

from typing import Optional


class DiagnosticCode:
    """Codes attached to non-fatal diagnostics in log records."""

    UNKNOWN_COMPONENT = "UNKNOWN_COMPONENT"
    INVALID_PROP_SHAPE = "INVALID_PROP_SHAPE"
    SERIALIZATION_FAILURE = "SERIALIZATION_FAILURE"
    PLUGIN_FAILURE = "PLUGIN_FAILURE"
    PIPELINE_FAILURE = "PIPELINE_FAILURE"


class PageGenError(Exception):
    """Base class for all errors surfaced by the generation pipeline."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        if self.code:
            components[-1] = f"{components[-1]} ({self.code})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class SchemaValidationError(PageGenError):
    """Raised when the input schema does not have the expected node shape."""

    code = "SCHEMA_INVALID"


class UnsupportedSolutionError(PageGenError):
    """Raised when an export names a solution that is not registered."""

    code = DiagnosticCode.PIPELINE_FAILURE


class PluginError(PageGenError):
    """Raised when a component or project plugin cannot complete."""

    code = DiagnosticCode.PLUGIN_FAILURE

    def __init__(self, message: str, *, plugin_name: str = "", **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.plugin_name = plugin_name


class PublishError(PageGenError):
    """Raised when a publisher cannot deliver the generated files."""

    code = "PUBLISH_FAILED"


class ConfigError(PageGenError):
    """Raised when the workspace configuration file is invalid."""

    code = "CONFIG_INVALID"


__all__ = [
    "DiagnosticCode",
    "PageGenError",
    "SchemaValidationError",
    "UnsupportedSolutionError",
    "PluginError",
    "PublishError",
    "ConfigError",
]
