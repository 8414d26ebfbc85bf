from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress

from name_validator.cli.utils import build_context, run_pipeline, summary_table

console = Console()


def split_command(
    csv_file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    column: Optional[str] = typer.Option(
        None,
        "--column",
        "-c",
        help="Column holding full names (auto-detected when omitted)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Clean CSV (First_Name, Last_Name). Default: <input>_split.<ext>",
    ),
    full_report: Optional[Path] = typer.Option(
        None,
        "--full-report",
        help="Also write every column plus the split fields to this CSV",
    ),
    json_report: Optional[Path] = typer.Option(
        None,
        "--json",
        help="Also write a JSON report (summary, rows, per-name details)",
    ),
    filter_problems: bool = typer.Option(
        False,
        "--filter",
        help="Drop rows with low confidence and security/placeholder/null issues",
    ),
    chunk_size: Optional[int] = typer.Option(
        None,
        "--chunk-size",
        min=1,
        help="Rows per processing slice (default from config)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        min=1,
        help="Worker processes; 1 decomposes in-process (default from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress and debug logging",
    ),
):
    """
    Split the names in a CSV file and write the cleaned output.
    """
    ctx = build_context(
        csv_file,
        column=column,
        out=out,
        full_report=full_report,
        json_report=json_report,
        filter_problems=filter_problems,
        chunk_size=chunk_size,
        workers=workers,
        debug=verbose,
    )

    if verbose:
        with Progress(console=console, transient=True) as progress:
            task = progress.add_task("Processing names", total=None)

            def _advance(done: int, total: int) -> None:
                progress.update(task, completed=done, total=total)

            ctx.progress = _advance
            batch = run_pipeline(ctx)
    else:
        batch = run_pipeline(ctx)

    console.print(summary_table(batch.summary))
    for key, label in (("clean_csv", "Clean CSV"), ("full_report", "Full report"), ("json_report", "JSON report")):
        if key in ctx.stats:
            console.print(f"[green]{label}:[/green] {ctx.stats[key]}")
