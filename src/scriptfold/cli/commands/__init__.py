"""scriptfold CLI commands."""

from __future__ import annotations

from scriptfold.cli.commands.classify import classify_command
from scriptfold.cli.commands.outline import outline_command
from scriptfold.cli.commands.regions import regions_command
from scriptfold.cli.commands.watch import watch_command

__all__ = [
    "classify_command",
    "outline_command",
    "regions_command",
    "watch_command",
]
