"""Centralised logging helpers for the generation pipeline."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str = "pagegen") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the ``pagegen`` logger at ``level``."""

    numeric_level = LEVELS.get((level or "info").lower(), logging.INFO)
    root = get_logger("pagegen")
    root.setLevel(numeric_level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root.addHandler(handler)
        root.propagate = False
    return root


def log_pipeline_event(
    stage: str,
    *,
    message: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    **data: Any,
) -> None:
    """Emit a structured log entry for one stage of an export."""

    payload: Dict[str, Any] = {"stage": stage}
    payload.update(data)
    target_logger = logger or get_logger("pagegen.pipeline")
    target_logger.log(
        level,
        message or f"Pipeline stage {stage}",
        extra={"pagegen_event": stage, "pagegen_data": payload},
    )


__all__ = ["get_logger", "configure_logging", "log_pipeline_event", "LEVELS", "DEFAULT_FORMAT"]
