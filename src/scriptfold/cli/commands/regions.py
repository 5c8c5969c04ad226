"""Regions command: print the foldable scene and dialogue block ranges."""

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
from scriptfold.parser import RegionKind, ScriptDocument

logger = get_logger(__name__)


def regions_command(
    file: Annotated[Path, typer.Argument(help="Fountain file to fold")],
    kind: Annotated[
        RegionKind | None,
        typer.Option("--kind", "-k", help="Only show regions of this kind"),
    ] = None,
    keep_empty: Annotated[
        bool | None,
        typer.Option(
            "--keep-empty/--drop-empty",
            help=(
                "Keep or drop regions whose start is not before their end "
                "(default: the drop_empty_regions setting)"
            ),
        ),
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
    """Print the folding regions of a screenplay in the order they close."""
    output_format = resolve_output_format(json_output, csv_output, markdown)

    try:
        path = FileValidator().validate(file)
        settings = get_settings()
        if keep_empty is None:
            drop_empty = settings.drop_empty_regions
        else:
            drop_empty = not keep_empty
        document = ScriptDocument.from_file(path, drop_empty_regions=drop_empty)
    except Exception as e:
        handle_cli_error(e, verbose=verbose, json_output=json_output)
        return

    outline = document.outline
    regions = outline.regions if kind is None else outline.regions_of(kind)
    logger.debug(
        "Built folding regions",
        path=str(path),
        regions=len(regions),
        drop_empty=drop_empty,
    )

    if output_format == OutputFormat.JSON:
        JsonFormatter().print(
            {
                "file": str(path),
                "line_count": outline.line_count,
                "regions": [region.to_dict() for region in regions],
            },
            OutputFormat.JSON,
        )
        return

    rows = [
        {
            "start": region.start,
            "end": region.end,
            "kind": region.kind.value,
            "first_line": outline.lines[region.start - 1].text
            if 1 <= region.start <= outline.line_count
            else "",
        }
        for region in regions
    ]
    TableFormatter(title=path.name).print(rows, output_format)
