"""
Export entry point: schema in, generated project out.

``export_source_code`` drives one export through the fixed stage order

    parse -> preprocess -> template -> pre plugins -> pages
          -> post plugins -> postprocessors -> publish

and never raises: every failure becomes ``ExportResult(success=False)``.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from pagegen.codegen.plugins.base import PHASE_POST, PHASE_PRE, ordered_project_plugins
from pagegen.codegen.project import generated_file, page_component_name, page_directory
from pagegen.codegen.project_builder import ProjectBuilder, resolve
from pagegen.errors import DiagnosticCode, PageGenError, PublishError
from pagegen.ir.schema import SchemaInput
from pagegen.ir.spec import FileType, GeneratedFile, Page
from pagegen.metadata import MetadataRegistry, build_default_registry
from pagegen.observability.logging import log_pipeline_event
from pagegen.parser import SchemaParser
from pagegen.preprocessors import run_preprocessors
from pagegen.publishers import (
    DEFAULT_PROJECT_NAME,
    DiskPublisher,
    MemoryPublisher,
    PublishOptions,
    PublishResult,
    Publisher,
    ZipPublisher,
)
from pagegen.solutions import DEFAULT_SOLUTION, Solution, SolutionRegistry, default_solution_registry

logger = logging.getLogger(__name__)

PUBLISH_TARGETS = ("memory", "zip", "disk")


@dataclass
class ExportOptions:
    """
    Configuration for one export.

    ``publish`` of ``None`` uses the solution's own publisher; ``metadata``
    and ``solutions`` default to fresh built-in registries.
    """

    solution: Union[str, Solution] = DEFAULT_SOLUTION
    publish: Optional[str] = None
    project_name: str = DEFAULT_PROJECT_NAME
    out_dir: Union[str, Path] = "."
    metadata: Optional[MetadataRegistry] = None
    solutions: Optional[SolutionRegistry] = None


@dataclass
class ExportResult:
    success: bool
    files: List[GeneratedFile] = field(default_factory=list)
    message: Optional[str] = None
    publish_result: Optional[PublishResult] = None


def _resolve_solution(options: ExportOptions) -> Solution:
    if isinstance(options.solution, Solution):
        return options.solution
    registry = options.solutions or default_solution_registry()
    return registry.get(options.solution)


def _resolve_publisher(options: ExportOptions, solution: Solution) -> Publisher:
    target = options.publish
    if target is None:
        return solution.publisher
    if target == "memory":
        return MemoryPublisher()
    if target == "zip":
        return ZipPublisher()
    if target == "disk":
        return DiskPublisher(options.out_dir)
    raise PublishError(
        f"Unknown publish target {target!r}",
        hint=f"Choose one of: {', '.join(PUBLISH_TARGETS)}.",
    )


def _page_files(page: Page, solution: Solution, builder: ProjectBuilder, registry: MetadataRegistry) -> List[GeneratedFile]:
    component_name = page_component_name(page)
    module_builder = builder.create_module_builder(component_name)
    for plugin in solution.component_plugins:
        plugin.run(page, module_builder, registry)

    directory = page_directory(page)
    files = [
        generated_file(
            f"{directory}/{component_name}.tsx",
            module_builder.generate_module(component_name),
            FileType.TSX,
        )
    ]
    if module_builder.has_css:
        files.append(
            generated_file(
                f"{directory}/{component_name}.module.scss",
                module_builder.generate_css_module(),
                FileType.SCSS,
            )
        )
    return files


async def _run_export(schema: Optional[SchemaInput], options: ExportOptions) -> ExportResult:
    solution = _resolve_solution(options)
    publisher = _resolve_publisher(options, solution)
    registry = options.metadata or build_default_registry()

    project = SchemaParser(registry).parse(schema)
    log_pipeline_event("parse", solution=solution.name, pages=len(project.pages))

    project = run_preprocessors(project, registry)
    log_pipeline_event("preprocess", level=logging.DEBUG)

    builder = ProjectBuilder(project, project_name=options.project_name)
    if solution.template is not None:
        for file in solution.template.static_files(options.project_name):
            builder.add_file(file)

    for plugin in ordered_project_plugins(solution.project_plugins, PHASE_PRE):
        logger.debug("Running project plugin %s", plugin.name)
        await resolve(plugin.run(builder))

    if solution.emit_pages:
        for page in project.pages:
            for file in _page_files(page, solution, builder, registry):
                builder.add_file(file)
            logger.debug("Generated page %s", page.file_name)
    log_pipeline_event("pages", count=len(project.pages) if solution.emit_pages else 0)

    for plugin in ordered_project_plugins(solution.project_plugins, PHASE_POST):
        logger.debug("Running project plugin %s", plugin.name)
        await resolve(plugin.run(builder))

    await builder.apply_post_processors(solution.post_processors)

    files = builder.generate_files()
    publish_result = await publisher.publish(files, PublishOptions(project_name=options.project_name))
    log_pipeline_event("publish", publisher=getattr(publisher, "name", type(publisher).__name__), files=len(files))

    return ExportResult(
        success=True,
        files=files,
        message=f"Generated {len(files)} files with {solution.name}",
        publish_result=publish_result,
    )


async def export_source_code(schema: Optional[SchemaInput], options: Optional[ExportOptions] = None) -> ExportResult:
    """
    Generate a complete project from ``schema``.

    Args:
        schema: Ordered list of editor nodes (dicts or ``SchemaNode`` models)
        options: Solution, publish target and project settings

    Returns:
        ``ExportResult``; ``success`` is False (with no files) if any stage raised
    """
    options = options or ExportOptions()
    try:
        return await _run_export(schema, options)
    except PageGenError as exc:
        logger.error("Export failed: %s", exc.format(), extra={"pagegen_code": DiagnosticCode.PIPELINE_FAILURE})
        return ExportResult(success=False, message=exc.format())
    except Exception as exc:
        logger.exception("Export failed", extra={"pagegen_code": DiagnosticCode.PIPELINE_FAILURE})
        return ExportResult(success=False, message=f"Export failed: {exc}")


def export_source_code_sync(schema: Optional[SchemaInput], options: Optional[ExportOptions] = None) -> ExportResult:
    """Blocking wrapper around :func:`export_source_code` for scripts and the CLI."""
    return asyncio.run(export_source_code(schema, options))


__all__ = [
    "ExportOptions",
    "ExportResult",
    "PUBLISH_TARGETS",
    "export_source_code",
    "export_source_code_sync",
]
