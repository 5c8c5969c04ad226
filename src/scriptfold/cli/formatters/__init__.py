"""Output formatters for scriptfold CLI."""

from __future__ import annotations

from scriptfold.cli.formatters.base import (
    OutputFormat,
    OutputFormatter,
    resolve_output_format,
)
from scriptfold.cli.formatters.json_formatter import JsonFormatter
from scriptfold.cli.formatters.table_formatter import TableFormatter

__all__ = [
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "TableFormatter",
    "resolve_output_format",
]
