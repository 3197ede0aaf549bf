"""Observability helpers (structured logging) for pagegen."""

from .logging import configure_logging, get_logger, log_pipeline_event

__all__ = ["configure_logging", "get_logger", "log_pipeline_event"]
