"""ZIP archive publisher with reproducible output."""

from __future__ import annotations

import io
import logging
import zipfile
from typing import Sequence

from pagegen.ir.spec import GeneratedFile

from .base import PublishOptions, PublishResult, checked_project_name, checked_relative_path

logger = logging.getLogger(__name__)

# Earliest timestamp the ZIP format can store.
FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)
FILE_MODE = 0o100644
COMPRESS_LEVEL = 9


def build_archive(files: Sequence[GeneratedFile], project_name: str) -> bytes:
    """Pack ``files`` under a ``project_name/`` folder; equal inputs give equal bytes."""
    root = checked_project_name(project_name)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=COMPRESS_LEVEL) as archive:
        for file in files:
            relative = checked_relative_path(file.file_path)
            info = zipfile.ZipInfo(f"{root}/{relative.as_posix()}", date_time=FIXED_DATE_TIME)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = FILE_MODE << 16
            info.create_system = 3
            archive.writestr(info, file.content.encode("utf-8"), compresslevel=COMPRESS_LEVEL)
    return buffer.getvalue()


class ZipPublisher:
    name = "zip"

    async def publish(self, files: Sequence[GeneratedFile], options: PublishOptions) -> PublishResult:
        logger.info("Packing %d file(s) into %s.zip", len(files), options.project_name)
        blob = build_archive(files, options.project_name)
        logger.debug("Archive size: %d bytes", len(blob))
        return PublishResult(type="blob", blob=blob, files=list(files))


__all__ = ["ZipPublisher", "build_archive"]
