"""Error handling utilities for CLI commands."""

from __future__ import annotations

import traceback

import typer
from rich.console import Console
from rich.markup import escape

from scriptfold.cli.formatters.json_formatter import JsonFormatter
from scriptfold.config import get_logger
from scriptfold.exceptions import ScriptFoldError

logger = get_logger(__name__)
console = Console(stderr=True)


def handle_cli_error(
    error: Exception,
    verbose: bool = False,
    json_output: bool = False,
    exit_code: int = 1,
) -> None:
    """Handle errors in CLI commands with helpful formatting.

    Args:
        error: The exception that was raised
        verbose: Whether to show detailed error information
        json_output: Print a JSON error document on stdout instead
        exit_code: Exit code to use when exiting
    """
    if json_output:
        print(JsonFormatter().format_error_response(error, exit_code))
        logger.error(
            "Command failed",
            error=str(error),
            error_type=type(error).__name__,
            exit_code=exit_code,
        )
        raise typer.Exit(exit_code)

    if isinstance(error, ScriptFoldError):
        console.print(f"[red]✗ {escape(error.message)}[/red]")

        if error.hint:
            console.print(f"[yellow]→ {escape(error.hint)}[/yellow]")

        if verbose and error.details:
            console.print("\n[dim]Details:[/dim]")
            for key, value in error.details.items():
                console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")

        logger.error(
            "scriptfold error occurred",
            error_type=type(error).__name__,
            message=error.message,
            hint=error.hint,
            details=error.details,
            verbose_mode=verbose,
            exit_code=exit_code,
        )

    elif isinstance(error, FileNotFoundError):
        console.print(f"[red]✗ File not found: {escape(str(error))}[/red]")
        console.print("[yellow]→ Check that the file path is correct[/yellow]")
        logger.error(
            "File not found",
            error=str(error),
            filename=getattr(error, "filename", None),
            error_type="FileNotFoundError",
            exit_code=exit_code,
        )

    elif isinstance(error, KeyboardInterrupt):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        logger.info(
            "Operation interrupted by user",
            error_type="KeyboardInterrupt",
            exit_code=exit_code,
        )

    else:
        console.print(f"[red]✗ Unexpected error: {escape(str(error))}[/red]")

        if verbose:
            console.print("\n[dim]Full traceback:[/dim]")
            console.print(escape(traceback.format_exc()))
        else:
            console.print("[dim]Run with --verbose for full error details[/dim]")

        logger.error(
            "Unexpected error occurred",
            error=str(error),
            error_type=type(error).__name__,
            verbose_mode=verbose,
            exit_code=exit_code,
            exc_info=True,
        )

    raise typer.Exit(exit_code)
