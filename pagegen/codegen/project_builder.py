"""Project-level file map shared by every plugin of one export."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Union

from pagegen.errors import DiagnosticCode
from pagegen.ir.spec import GeneratedFile, Project

from .module_builder import ModuleBuilder

logger = logging.getLogger(__name__)

PostProcessor = Callable[[GeneratedFile], Union[GeneratedFile, Awaitable[GeneratedFile]]]


async def resolve(result: Any) -> Any:
    """Await ``result`` when a hook returned an awaitable."""
    if inspect.isawaitable(result):
        return await result
    return result


class ProjectBuilder:
    """
    Holds the IR project and the ordered ``file_path -> GeneratedFile`` map.

    Files keep their insertion order; re-adding a path replaces the earlier
    file in place and logs a warning.
    """

    def __init__(self, project: Optional[Project] = None, project_name: str = "pagegen-app") -> None:
        self.project = project or Project()
        self.project_name = project_name
        self._files: Dict[str, GeneratedFile] = {}

    def add_file(self, file: GeneratedFile) -> None:
        if file.file_path in self._files:
            logger.warning("File %s generated twice; keeping the latest version", file.file_path)
        self._files[file.file_path] = file

    def get_file(self, file_path: str) -> Optional[GeneratedFile]:
        return self._files.get(file_path)

    def generate_files(self) -> List[GeneratedFile]:
        return list(self._files.values())

    def add_dependency(self, package: str, version: str) -> None:
        self.project.dependencies[package] = version

    def create_module_builder(self, module_name: str = "Index") -> ModuleBuilder:
        return ModuleBuilder(module_name)

    async def apply_post_processors(self, processors: Iterable[PostProcessor]) -> None:
        """
        Run ``processors`` over every file, in registration order.

        A processor that raises leaves that file's content untouched; the
        failure is logged and the remaining files and processors still run.
        """
        for processor in processors:
            name = getattr(processor, "name", None) or getattr(processor, "__name__", type(processor).__name__)
            for path, file in list(self._files.items()):
                try:
                    updated = await resolve(processor(file))
                except Exception as exc:
                    logger.warning(
                        "Postprocessor %s failed on %s: %s",
                        name,
                        path,
                        exc,
                        extra={"pagegen_code": DiagnosticCode.PLUGIN_FAILURE},
                    )
                    continue
                if isinstance(updated, GeneratedFile):
                    self._files[path] = updated


__all__ = ["PostProcessor", "ProjectBuilder", "resolve"]
