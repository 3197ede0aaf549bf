"""Publisher contract and shared helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from pagegen.errors import PublishError
from pagegen.ir.spec import GeneratedFile

DEFAULT_PROJECT_NAME = "pagegen-app"


@dataclass
class PublishOptions:
    project_name: str = DEFAULT_PROJECT_NAME


@dataclass
class PublishResult:
    """What a publisher produced: an archive blob, a directory, or the file list."""

    type: str
    blob: Optional[bytes] = None
    path: Optional[str] = None
    files: List[GeneratedFile] = field(default_factory=list)


@runtime_checkable
class Publisher(Protocol):
    name: str

    async def publish(self, files: Sequence[GeneratedFile], options: PublishOptions) -> PublishResult:
        """Deliver ``files``."""


def checked_project_name(name: str) -> str:
    """Reject project names that are not a single path segment."""
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise PublishError(
            f"Invalid project name {name!r}",
            hint="Use a plain folder name such as 'my-app'.",
        )
    return name


def checked_relative_path(file_path: str) -> PurePosixPath:
    """Reject absolute paths and paths escaping the project folder."""
    path = PurePosixPath(file_path)
    if path.is_absolute() or ".." in path.parts or not path.parts:
        raise PublishError(f"Refusing to publish file outside the project: {file_path!r}")
    return path


__all__ = [
    "DEFAULT_PROJECT_NAME",
    "PublishOptions",
    "PublishResult",
    "Publisher",
    "checked_project_name",
    "checked_relative_path",
]
