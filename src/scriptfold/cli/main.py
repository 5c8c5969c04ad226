"""Main CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptfold import __version__
from scriptfold.cli.commands import (
    classify_command,
    outline_command,
    regions_command,
    watch_command,
)
from scriptfold.cli.formatters import JsonFormatter, OutputFormat
from scriptfold.cli.utils.error_handler import handle_cli_error
from scriptfold.config import (
    configure_logging,
    get_logger,
    get_settings_for_cli,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptfold",
    help="Classify Fountain screenplay lines and fold scenes and dialogue",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="classify")(classify_command)
app.command(name="regions")(regions_command)
app.command(name="outline")(outline_command)
app.command(name="watch")(watch_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show scriptfold version."""
    version_info = {
        "name": "scriptfold",
        "version": __version__,
        "description": "Structural parser for Fountain screenplays",
    }

    if json_output:
        JsonFormatter().print(version_info, OutputFormat.JSON)
    else:
        console.print(f"scriptfold v{version_info['version']}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="SCRIPTFOLD_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    overrides: dict[str, object] = {}
    if debug:
        overrides = {"log_level": "DEBUG", "debug": True}
    elif verbose:
        overrides = {"log_level": "INFO"}

    if not config and not overrides:
        return

    try:
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
    except Exception as e:
        handle_cli_error(e, verbose=verbose or debug)
        return

    set_settings(settings)
    configure_logging(settings)
    logger.debug(
        "Settings loaded",
        config_file=str(config) if config else None,
        log_level=settings.log_level,
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
