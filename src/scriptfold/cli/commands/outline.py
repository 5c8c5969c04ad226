"""Outline command: summarize scenes and who speaks in them."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptfold.cli.formatters import (
    JsonFormatter,
    OutputFormat,
    TableFormatter,
    resolve_output_format,
)
from scriptfold.cli.utils.error_handler import handle_cli_error
from scriptfold.cli.validators import FileValidator
from scriptfold.config import get_settings
from scriptfold.parser import RegionKind, ScriptDocument

console = Console()


def outline_command(
    file: Annotated[Path, typer.Argument(help="Fountain file to outline")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    csv_output: Annotated[bool, typer.Option("--csv", help="Output as CSV")] = False,
    markdown: Annotated[
        bool, typer.Option("--markdown", help="Output as a Markdown table")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show error details")
    ] = False,
) -> None:
    """Outline a screenplay scene by scene.

    Each scene is listed with its line range, scene type, location, time of
    day and the characters who speak in it.
    """
    output_format = resolve_output_format(json_output, csv_output, markdown)

    try:
        path = FileValidator().validate(file)
        document = ScriptDocument.from_file(
            path, drop_empty_regions=get_settings().drop_empty_regions
        )
    except Exception as e:
        handle_cli_error(e, verbose=verbose, json_output=json_output)
        return

    outline = document.outline
    scenes = outline.scenes()
    dialogue_blocks = len(outline.regions_of(RegionKind.DIALOGUE_BLOCK))

    if output_format == OutputFormat.JSON:
        JsonFormatter().print(
            {
                "file": str(path),
                "line_count": outline.line_count,
                "dialogue_blocks": dialogue_blocks,
                "scenes": [scene.to_dict() for scene in scenes],
            },
            OutputFormat.JSON,
        )
        return

    if not scenes:
        console.print("[yellow]No scenes found.[/yellow]")
        return

    rows = [
        {
            "scene": number,
            "lines": f"{scene.region.start}-{scene.region.end}",
            "type": scene.scene_type or "-",
            "location": scene.location,
            "time": scene.time_of_day,
            "speakers": ", ".join(scene.speakers) or "-",
        }
        for number, scene in enumerate(scenes, start=1)
    ]
    TableFormatter(title=path.name).print(rows, output_format)

    if output_format == OutputFormat.TABLE:
        console.print(
            f"\n[green]{len(scenes)} scene{'s' if len(scenes) != 1 else ''}, "
            f"{dialogue_blocks} dialogue block{'s' if dialogue_blocks != 1 else ''}"
            "[/green]"
        )
