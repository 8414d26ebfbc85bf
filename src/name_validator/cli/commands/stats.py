from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from name_validator.cli.utils import build_context, run_pipeline, summary_table

console = Console()


def stats_command(
    csv_file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    column: Optional[str] = typer.Option(
        None,
        "--column",
        "-c",
        help="Column holding full names (auto-detected when omitted)",
    ),
    filter_problems: bool = typer.Option(
        False,
        "--filter",
        help="Report counts after dropping problem rows",
    ),
):
    """
    Show summary statistics for the names in a CSV file.
    """
    ctx = build_context(csv_file, column=column, filter_problems=filter_problems)
    batch = run_pipeline(ctx, export=False)

    console.print(f"Name column: [bold]{batch.name_column}[/bold]")
    console.print(summary_table(batch.summary))
