from __future__ import annotations

from typing import List

import typer
from rich.console import Console

from name_validator.cli.utils import validations_table, write_json
from name_validator.entities.decomposer import decompose

console = Console()


def check_command(
    names: List[str] = typer.Argument(..., help="One or more names to decompose"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of a table",
    ),
):
    """
    Decompose names given on the command line.
    """
    validations = [decompose(name) for name in names]

    if as_json:
        write_json([v.to_dict() for v in validations], out=None, pretty=True)
        return

    console.print(validations_table(validations))
