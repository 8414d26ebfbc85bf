"""
CLI command modules for name_validator.

Each command module defines a single Typer-compatible command function.
"""

from name_validator.cli.commands.check import check_command
from name_validator.cli.commands.split import split_command
from name_validator.cli.commands.stats import stats_command

__all__ = [
    "check_command",
    "split_command",
    "stats_command",
]
