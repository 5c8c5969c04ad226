"""Classify command: print the category of every line."""

from pathlib import Path
from typing import Annotated

import typer

from scriptfold.cli.formatters import (
    JsonFormatter,
    OutputFormat,
    TableFormatter,
    resolve_output_format,
)
from scriptfold.cli.utils.error_handler import handle_cli_error
from scriptfold.cli.validators import FileValidator
from scriptfold.config import get_logger, get_settings
from scriptfold.parser import LineCategory, ScriptDocument

logger = get_logger(__name__)


def classify_command(
    file: Annotated[Path, typer.Argument(help="Fountain file to classify")],
    category: Annotated[
        LineCategory | None,
        typer.Option("--category", help="Only show lines of this category"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    csv_output: Annotated[bool, typer.Option("--csv", help="Output as CSV")] = False,
    markdown: Annotated[
        bool, typer.Option("--markdown", help="Output as a Markdown table")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show error details")
    ] = False,
) -> None:
    """Print the category of each line of a screenplay."""
    output_format = resolve_output_format(json_output, csv_output, markdown)

    try:
        path = FileValidator().validate(file)
        settings = get_settings()
        document = ScriptDocument.from_file(
            path, drop_empty_regions=settings.drop_empty_regions
        )
    except Exception as e:
        handle_cli_error(e, verbose=verbose, json_output=json_output)
        return

    rows = [
        {
            "line": line.index,
            "category": line.category.value,
            "token": line.category.token,
            "text": line.text,
        }
        for line in document.outline.lines
        if category is None or line.category is category
    ]
    logger.debug("Classified screenplay", path=str(path), lines=len(rows))

    if output_format == OutputFormat.JSON:
        JsonFormatter().print(rows, OutputFormat.JSON)
    else:
        TableFormatter(title=path.name).print(rows, output_format)
