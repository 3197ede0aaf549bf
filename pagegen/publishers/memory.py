"""Publisher returning the generated files unchanged."""

from __future__ import annotations

from typing import Sequence

from pagegen.ir.spec import GeneratedFile

from .base import PublishOptions, PublishResult


class MemoryPublisher:
    name = "memory"

    async def publish(self, files: Sequence[GeneratedFile], options: PublishOptions) -> PublishResult:
        return PublishResult(type="memory", files=list(files))


__all__ = ["MemoryPublisher"]
