"""Delivery of generated files: ZIP archive, directory, or in memory."""

from .base import DEFAULT_PROJECT_NAME, PublishOptions, PublishResult, Publisher
from .disk_publisher import DiskPublisher
from .memory import MemoryPublisher
from .zip_publisher import ZipPublisher, build_archive

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "DiskPublisher",
    "MemoryPublisher",
    "PublishOptions",
    "PublishResult",
    "Publisher",
    "ZipPublisher",
    "build_archive",
]
