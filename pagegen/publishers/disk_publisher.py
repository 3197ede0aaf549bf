"""Publisher writing the project tree to a directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union

from pagegen.errors import PublishError
from pagegen.ir.spec import GeneratedFile

from .base import PublishOptions, PublishResult, checked_project_name, checked_relative_path

logger = logging.getLogger(__name__)


class DiskPublisher:
    """Writes ``<out_dir>/<project_name>/<file_path>`` for every file."""

    name = "disk"

    def __init__(self, out_dir: Union[str, Path] = ".") -> None:
        self.out_dir = Path(out_dir)

    async def publish(self, files: Sequence[GeneratedFile], options: PublishOptions) -> PublishResult:
        root = (self.out_dir / checked_project_name(options.project_name)).resolve()
        try:
            for file in files:
                target = root.joinpath(*checked_relative_path(file.file_path).parts)
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(file.content, encoding="utf-8")
        except OSError as exc:
            raise PublishError(f"Failed to write project to {root}: {exc}") from exc
        logger.info("Wrote %d file(s) to %s", len(files), root)
        return PublishResult(type="disk", path=str(root), files=list(files))


__all__ = ["DiskPublisher"]
