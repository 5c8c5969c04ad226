"""Base formatter classes for CLI output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Supported output formats."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"
    MARKDOWN = "markdown"
    CSV = "csv"


def resolve_output_format(
    json: bool = False,
    csv: bool = False,
    markdown: bool = False,
) -> OutputFormat:
    """Determine output format from command flags, table being the default."""
    if json:
        return OutputFormat.JSON
    if csv:
        return OutputFormat.CSV
    if markdown:
        return OutputFormat.MARKDOWN
    return OutputFormat.TABLE


class OutputFormatter(ABC, Generic[T]):
    """Base class for output formatters."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output. If None, creates new instance.
        """
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> str:
        """Format data for output.

        Args:
            data: Data to format
            format_type: Output format type

        Returns:
            Formatted string
        """
        pass

    def print(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> None:
        """Format and print data to console.

        Screenplay text may contain square brackets, so markup is disabled.
        """
        output = self.format(data, format_type)
        if format_type == OutputFormat.JSON:
            # Pure JSON without ANSI escape codes
            print(output)
        else:
            self.console.print(output, markup=False, highlight=False, soft_wrap=True)
