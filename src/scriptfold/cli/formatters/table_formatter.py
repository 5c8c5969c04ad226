"""Table output formatter for CLI."""

import csv
import io
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from scriptfold.cli.formatters.base import OutputFormat, OutputFormatter


class TableFormatter(OutputFormatter[list[dict[str, Any]]]):
    """Formatter for tabular data output."""

    def __init__(
        self,
        console: Console | None = None,
        title: str | None = None,
        width: int = 120,
    ) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output
            title: Optional table title
            width: Render width of rich tables
        """
        super().__init__(console)
        self.title = title
        self.width = width

    def format(
        self, data: list[dict[str, Any]], format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format tabular data.

        Args:
            data: List of dictionaries to format as table
            format_type: Output format type

        Returns:
            Formatted string
        """
        if not data:
            return "No data to display"

        if format_type == OutputFormat.CSV:
            return self._format_csv(data)
        if format_type == OutputFormat.MARKDOWN:
            return self._format_markdown(data)
        return self._format_table(data)

    def _format_table(self, data: list[dict[str, Any]]) -> str:
        """Format as Rich table."""
        columns = list(data[0].keys())

        table = Table(title=self.title, show_header=True, header_style="bold magenta")
        for col in columns:
            table.add_column(col.replace("_", " ").title())

        for row in data:
            # Text cells: screenplay lines must not be read as markup
            table.add_row(*[Text(_cell(row.get(col))) for col in columns])

        string_io = io.StringIO()
        temp_console = Console(file=string_io, width=self.width, force_terminal=False)
        temp_console.print(table)
        return string_io.getvalue()

    def _format_csv(self, data: list[dict[str, Any]]) -> str:
        """Format as CSV."""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=list(data[0].keys()))
        writer.writeheader()
        writer.writerows(data)
        return output.getvalue()

    def _format_markdown(self, data: list[dict[str, Any]]) -> str:
        """Format as Markdown table."""
        columns = list(data[0].keys())
        lines = [
            "| " + " | ".join(columns) + " |",
            "| " + " | ".join(["---"] * len(columns)) + " |",
        ]
        for row in data:
            cells = (_cell(row.get(col)).replace("|", "\\|") for col in columns)
            lines.append("| " + " | ".join(cells) + " |")
        return "\n".join(lines)


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, list | tuple):
        return ", ".join(str(item) for item in value) or "-"
    return str(value)
