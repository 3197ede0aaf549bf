"""Schema -> IR parsing."""

from .schema_parser import ParserContext, SchemaParser, json_copy

__all__ = ["ParserContext", "SchemaParser", "json_copy"]
