"""
Subcommand implementations.

Each ``cmd_*`` receives the parsed :class:`argparse.Namespace` with a
``cli_context`` attribute holding the workspace configuration.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

from pagegen.config import WorkspaceConfig
from pagegen.errors import SchemaValidationError
from pagegen.exporter import ExportOptions, ExportResult, export_source_code_sync
from pagegen.metadata import build_default_registry
from pagegen.solutions import SolutionRegistry, default_solution_registry

from .output import handle_cli_exception, print_error, print_success, print_table

logger = logging.getLogger(__name__)

SCHEMA_KEYS = ("schema", "componentsTree")


@dataclass
class CLIContext:
    workspace_root: Path
    config: WorkspaceConfig

    def solution_registry(self) -> SolutionRegistry:
        return default_solution_registry(self.config.formatting.to_options())


def load_schema_file(path: Path) -> List[Any]:
    """
    Read a schema JSON file.

    The file holds either the node list itself or an object with the list
    under ``schema`` or ``componentsTree``.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SchemaValidationError(f"Cannot read schema file {path}: {exc.strerror or exc}") from exc
    except ValueError as exc:
        raise SchemaValidationError(f"Schema file {path} is not valid JSON: {exc}") from exc
    if isinstance(data, dict):
        for key in SCHEMA_KEYS:
            if isinstance(data.get(key), list):
                return data[key]
        raise SchemaValidationError(
            f"Schema file {path} has no node list",
            hint=f"Store the nodes as a top-level array or under one of: {', '.join(SCHEMA_KEYS)}.",
        )
    return data


def _write_archive(result: ExportResult, out_dir: Path, project_name: str) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    target = out_dir / f"{project_name}.zip"
    target.write_bytes(result.publish_result.blob)
    return target


def cmd_export(args: argparse.Namespace) -> None:
    """Handle ``pagegen export``: generate a project from a schema file."""
    context: CLIContext = args.cli_context
    defaults = context.config.defaults
    try:
        schema = load_schema_file(Path(args.schema))
    except SchemaValidationError as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    out_dir = Path(args.out).resolve() if args.out else defaults.out_dir
    project_name = args.project_name or defaults.project_name
    options = ExportOptions(
        solution=args.solution or defaults.solution,
        publish=args.publish or defaults.publish,
        project_name=project_name,
        out_dir=out_dir,
        solutions=context.solution_registry(),
    )
    result = export_source_code_sync(schema, options)
    if not result.success:
        print_error(result.message or "Export failed")
        sys.exit(1)

    published = result.publish_result
    if published is not None and published.type == "blob":
        archive = _write_archive(result, out_dir, project_name)
        print_success(f"Wrote {archive} ({len(result.files)} files)")
    elif published is not None and published.type == "disk":
        print_success(f"Wrote {len(result.files)} files to {published.path}")
    else:
        for file in result.files:
            print(file.file_path)
        print_success(result.message or "Export completed")


def cmd_solutions(args: argparse.Namespace) -> None:
    """Handle ``pagegen solutions``: list registered solutions."""
    registry = args.cli_context.solution_registry()
    print_table((name, registry.get(name).description) for name in registry.names())


def cmd_components(args: argparse.Namespace) -> None:
    """Handle ``pagegen components``: list known schema components."""
    registry = build_default_registry()
    rows = []
    for name in registry.component_names():
        metadata = registry.get_component_metadata(name)
        dependency = metadata.dependency
        source = dependency.source or "-"
        rows.append((name, metadata.component_name, source))
    print_table(rows)


__all__ = ["CLIContext", "cmd_components", "cmd_export", "cmd_solutions", "load_schema_file"]
