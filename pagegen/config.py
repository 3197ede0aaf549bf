"""Workspace configuration support for the pagegen CLI."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from pagegen.errors import ConfigError
from pagegen.postprocessors import FormattingOptions

CONFIG_FILE_NAMES = ("pagegen.toml", ".pagegenrc")


@dataclass
class WorkspaceDefaults:
    """Export settings applied when the command line does not override them."""

    solution: str = "react-vite"
    project_name: str = "pagegen-app"
    out_dir: Path = Path("build")
    publish: Optional[str] = None
    log_level: Optional[str] = None


@dataclass
class FormattingConfig:
    indent_size: int = 2
    max_line_length: int = 80
    max_empty_lines: int = 1

    def to_options(self) -> FormattingOptions:
        return FormattingOptions(
            indent_size=self.indent_size,
            max_line_length=self.max_line_length,
            max_empty_lines=self.max_empty_lines,
        )


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    defaults: WorkspaceDefaults = field(default_factory=WorkspaceDefaults)
    formatting: FormattingConfig = field(default_factory=FormattingConfig)
    path: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(section).__name__}")
    return section


def _positive_int(section: Dict[str, Any], key: str, default: int) -> int:
    raw = section.get(key, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"formatting.{key} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"formatting.{key} must not be negative, got {value}")
    return value


def _parse_defaults(data: Dict[str, Any], root: Path) -> WorkspaceDefaults:
    defaults_section = _section(data, "defaults")
    out_dir = Path(defaults_section.get("out_dir") or WorkspaceDefaults.out_dir)
    if not out_dir.is_absolute():
        out_dir = (root / out_dir).resolve()
    publish = defaults_section.get("publish")
    log_level = defaults_section.get("log_level")
    return WorkspaceDefaults(
        solution=str(defaults_section.get("solution") or WorkspaceDefaults.solution),
        project_name=str(defaults_section.get("project_name") or WorkspaceDefaults.project_name),
        out_dir=out_dir,
        publish=str(publish) if publish else None,
        log_level=str(log_level) if log_level else None,
    )


def _parse_formatting(data: Dict[str, Any]) -> FormattingConfig:
    formatting_section = _section(data, "formatting")
    return FormattingConfig(
        indent_size=_positive_int(formatting_section, "indent_size", FormattingConfig.indent_size),
        max_line_length=_positive_int(formatting_section, "max_line_length", FormattingConfig.max_line_length),
        max_empty_lines=_positive_int(formatting_section, "max_empty_lines", FormattingConfig.max_empty_lines),
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    """
    Read ``pagegen.toml`` (TOML) or ``.pagegenrc`` (JSON) from ``root``.

    Missing files yield built-in defaults; unreadable or malformed files
    raise :class:`ConfigError`.
    """
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        if explicit is not None:
            raise ConfigError(f"Config file not found: {explicit}")
        return WorkspaceConfig(root=root, defaults=_parse_defaults({}, root))

    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Could not read {config_path.name}: {exc}", hint="Check the file syntax.") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a table of settings")

    return WorkspaceConfig(
        root=root,
        defaults=_parse_defaults(data, root),
        formatting=_parse_formatting(data),
        path=config_path,
        raw=data,
    )


__all__ = [
    "CONFIG_FILE_NAMES",
    "FormattingConfig",
    "WorkspaceConfig",
    "WorkspaceDefaults",
    "load_workspace_config",
    "locate_config_file",
]
