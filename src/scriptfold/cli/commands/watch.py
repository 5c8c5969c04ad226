"""CLI command for scriptfold watch - re-parse Fountain files as they change."""

import time
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from watchdog.observers import Observer

from scriptfold.cli.utils.error_handler import handle_cli_error
from scriptfold.cli.utils.file_watcher import FountainFileHandler
from scriptfold.cli.validators import DirectoryValidator
from scriptfold.config import get_logger, get_settings
from scriptfold.parser import RegionKind, ScriptOutline

logger = get_logger(__name__)
console = Console()


def report_outline(
    status: str,
    path: Path,
    outline: ScriptOutline | None = None,
    error: str | None = None,
) -> None:
    """Print one line per re-parse."""
    name = escape(path.name)
    if status == "parsed" and outline is not None:
        scenes = len(outline.regions_of(RegionKind.SCENE))
        blocks = len(outline.regions_of(RegionKind.DIALOGUE_BLOCK))
        console.print(
            f"[green]✓[/green] {name}: {outline.line_count} lines, "
            f"{scenes} scenes, {blocks} dialogue blocks"
        )
    else:
        console.print(f"[red]✗[/red] {name}: {escape(error or 'unknown error')}")


def watch_command(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="Directory to watch for Fountain file changes (default: current)"
        ),
    ] = None,
    no_recursive: Annotated[
        bool,
        typer.Option("--no-recursive", help="Don't watch subdirectories"),
    ] = False,
    initial_parse: Annotated[
        bool,
        typer.Option(
            "--initial-parse/--no-initial-parse",
            help="Parse existing files before starting to watch",
        ),
    ] = True,
    timeout: Annotated[
        float,
        typer.Option(
            "--timeout",
            "-t",
            help="Maximum watch duration in seconds (0 for unlimited)",
        ),
    ] = 0,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show error details")
    ] = False,
) -> None:
    """Watch for Fountain file changes and re-parse each changed file.

    Every change triggers a full classification and region rebuild of the
    file. Press Ctrl+C to stop watching.
    """
    try:
        watch_path = DirectoryValidator().validate(path or Path.cwd())
    except Exception as e:
        handle_cli_error(e, verbose=verbose)
        return

    settings = get_settings()
    handler = FountainFileHandler(settings, callback=report_outline)

    if initial_parse:
        console.print("[cyan]Parsing existing files...[/cyan]")
        found = handler.parse_existing(watch_path, recursive=not no_recursive)
        console.print(f"[cyan]Parsed {found} file(s)[/cyan]")

    observer = Observer()
    observer.schedule(handler, str(watch_path), recursive=not no_recursive)
    observer.start()
    console.print(
        f"\n[green]Watching for changes in: {escape(str(watch_path))}[/green]"
    )
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")
    logger.info("Watching for changes", path=str(watch_path), timeout=timeout)

    start_time = time.monotonic()
    try:
        while True:
            handler.process_pending(timeout=0.5)
            if timeout > 0 and time.monotonic() - start_time >= timeout:
                console.print(f"\n[yellow]Timeout reached ({timeout}s)[/yellow]")
                break
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopping watch...[/yellow]")
    finally:
        observer.stop()
        observer.join(timeout=5.0)

    console.print("[green]Watch stopped[/green]")
