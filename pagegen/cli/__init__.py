"""
pagegen CLI entry point.

Subcommands:
    export      generate a project from a schema JSON file
    solutions   list available solutions
    components  list components known to the default registry
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from pagegen import __version__
from pagegen.config import load_workspace_config
from pagegen.errors import ConfigError
from pagegen.exporter import PUBLISH_TARGETS
from pagegen.observability.logging import configure_logging

from .commands import CLIContext, cmd_components, cmd_export, cmd_solutions
from .output import handle_cli_exception

LOG_LEVEL_ENV = "PAGEGEN_LOG_LEVEL"


def _configure_runtime_logging(args, default_level: Optional[str] = None) -> None:
    """Configure the ``pagegen`` logger from flags, environment, or config."""
    if getattr(args, "verbose", False) and not getattr(args, "log_level", None):
        log_level = "debug"
    else:
        log_level = getattr(args, "log_level", None) or os.getenv(LOG_LEVEL_ENV) or default_level or "warning"
    configure_logging(log_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate front-end projects from page builder schemas",
        prog="pagegen",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to a pagegen.toml or .pagegenrc configuration file")
    parser.add_argument(
        "--workspace",
        default=None,
        help="Workspace root directory (defaults to current working directory)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "warning", "error"],
        default=None,
        help=f"Set logging level (or set {LOG_LEVEL_ENV})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging and full tracebacks on errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    export_parser = subparsers.add_parser("export", help="Generate a project from a schema JSON file")
    export_parser.add_argument("schema", help="Path to the schema JSON file")
    export_parser.add_argument("--solution", "-s", default=None, help="Solution name (default: react-vite)")
    export_parser.add_argument(
        "--publish",
        choices=list(PUBLISH_TARGETS),
        default=None,
        help="Publish target (default: the solution's publisher)",
    )
    export_parser.add_argument("--out", "-o", default=None, help="Output directory for archives and files")
    export_parser.add_argument("--project-name", default=None, help="Project folder and package name")
    export_parser.set_defaults(func=cmd_export)

    solutions_parser = subparsers.add_parser("solutions", help="List available solutions")
    solutions_parser.set_defaults(func=cmd_solutions)

    components_parser = subparsers.add_parser("components", help="List known schema components")
    components_parser.set_defaults(func=cmd_components)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Examples:
        >>> main(['export', 'schema.json', '--publish', 'disk', '--out', 'build'])  # doctest: +SKIP
        >>> main(['solutions'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        sys.exit(1)

    workspace_root = Path(args.workspace).resolve() if args.workspace else Path.cwd()
    config_path = Path(args.config).resolve() if args.config else None
    try:
        config = load_workspace_config(workspace_root, config_path)
    except ConfigError as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    _configure_runtime_logging(args, config.defaults.log_level)
    args.cli_context = CLIContext(workspace_root=workspace_root, config=config)
    args.func(args)


__all__ = ["build_parser", "main"]
