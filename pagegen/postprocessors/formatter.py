"""Best-effort text formatting for generated files."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from pagegen.errors import DiagnosticCode
from pagegen.ir.spec import FileType, GeneratedFile

logger = logging.getLogger(__name__)

_LEADING_TABS = re.compile(r"^\t+")


@dataclass
class FormattingOptions:
    """Configuration options for generated-file formatting."""

    # Indentation settings
    indent_size: int = 2

    # Line settings
    max_line_length: int = 80
    insert_final_newline: bool = True
    trim_trailing_whitespace: bool = True

    # Block formatting
    max_empty_lines: int = 1


@dataclass
class FormattedResult:
    """Result of formatting one file."""

    formatted_text: str
    is_changed: bool
    errors: List[str] = field(default_factory=list)

    def success(self) -> bool:
        return not self.errors


class SourceFormatter:
    """
    Formatter selected by :class:`FileType` category.

    Manifests are re-serialised as JSON; source modules, markup and
    stylesheets get whitespace normalisation (line endings, leading tabs,
    trailing whitespace, runs of empty lines, final newline). Other file
    types are returned unchanged.
    """

    def __init__(self, options: Optional[FormattingOptions] = None) -> None:
        self.options = options or FormattingOptions()
        self._formatters: Dict[str, Callable[[str], str]] = {
            "manifest": self._format_json,
            "source": self._format_text,
            "markup": self._format_text,
            "stylesheet": self._format_text,
        }

    def supports(self, file_type: FileType) -> bool:
        return file_type.category in self._formatters

    def format(self, text: str, file_type: FileType) -> FormattedResult:
        formatter = self._formatters.get(file_type.category)
        if formatter is None:
            return FormattedResult(formatted_text=text, is_changed=False)
        formatted = formatter(text)
        return FormattedResult(formatted_text=formatted, is_changed=formatted != text)

    def _format_json(self, text: str) -> str:
        data = json.loads(text)
        return json.dumps(data, indent=self.options.indent_size, ensure_ascii=False) + "\n"

    def _format_text(self, text: str) -> str:
        indent = " " * self.options.indent_size
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        lines = [_LEADING_TABS.sub(lambda match: indent * len(match.group(0)), line) for line in lines]

        if self.options.trim_trailing_whitespace:
            lines = [line.rstrip() for line in lines]

        cleaned: List[str] = []
        consecutive_empty = 0
        for line in lines:
            if not line.strip():
                consecutive_empty += 1
                if consecutive_empty > self.options.max_empty_lines or not cleaned:
                    continue
            else:
                consecutive_empty = 0
            cleaned.append(line)

        while cleaned and not cleaned[-1].strip():
            cleaned.pop()
        result = "\n".join(cleaned)
        if self.options.insert_final_newline and result:
            result += "\n"
        return result


class FormattingPostProcessor:
    """Postprocessor applying :class:`SourceFormatter`; failures keep the original file."""

    name = "formatter"

    def __init__(self, options: Optional[FormattingOptions] = None) -> None:
        self.formatter = SourceFormatter(options)

    def __call__(self, file: GeneratedFile) -> GeneratedFile:
        if not self.formatter.supports(file.file_type):
            return file
        try:
            result = self.formatter.format(file.content, file.file_type)
        except Exception as exc:
            logger.warning(
                "Could not format %s: %s",
                file.file_path,
                exc,
                extra={"pagegen_code": DiagnosticCode.PLUGIN_FAILURE},
            )
            return file
        return file.with_content(result.formatted_text) if result.is_changed else file


__all__ = ["FormattedResult", "FormattingOptions", "FormattingPostProcessor", "SourceFormatter"]
