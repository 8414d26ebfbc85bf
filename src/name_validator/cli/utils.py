from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from name_validator.batch import ValidationResults
from name_validator.config import get_config
from name_validator.core.context import ValidationContext
from name_validator.core.exceptions import ColumnNotFoundError, PipelineError
from name_validator.core.pipeline import Pipeline
from name_validator.entities.name_validation import NameValidation
from name_validator.exporter import dumps_json
from name_validator.logging import get_logger, set_debug

console = Console()
log = get_logger("cli")

_SUMMARY_ROWS = (
    ("Total rows", "total"),
    ("Processed", "processed"),
    ("Non-Latin names", "non_latin_names"),
    ("Suspicious entries", "suspicious_entries"),
    ("Security issues", "security_issues"),
    ("Null / empty values", "null_values"),
    ("Rows with issues", "issues_found"),
    ("Comma format", "comma_format_names"),
)

_CONFIDENCE_STYLE = {"high": "green", "medium": "yellow", "low": "red"}


def build_context(
    input_path: Path,
    *,
    column: Optional[str] = None,
    out: Optional[Path] = None,
    full_report: Optional[Path] = None,
    json_report: Optional[Path] = None,
    filter_problems: bool = False,
    chunk_size: Optional[int] = None,
    workers: Optional[int] = None,
    debug: bool = False,
) -> ValidationContext:
    cfg = get_config()
    if debug:
        cfg.debug = True
        set_debug(True)

    return ValidationContext(
        config=cfg,
        logger=log,
        input_path=str(input_path),
        output_path=str(out) if out else None,
        full_report_path=str(full_report) if full_report else None,
        json_report_path=str(json_report) if json_report else None,
        name_column=column,
        filter_problems=filter_problems,
        chunk_size=chunk_size,
        workers=workers,
        debug=cfg.debug,
    )


def run_pipeline(ctx: ValidationContext, *, export: bool = True):
    """
    Run the pipeline, turning PipelineError into a CLI exit.

    Exit code 2 when no name column can be determined, 1 otherwise.
    """
    try:
        return Pipeline(ctx).run(export=export)
    except ColumnNotFoundError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)
    except PipelineError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)


def summary_table(summary: ValidationResults, title: str = "Name Validation Summary") -> Table:
    table = Table(title=title)
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    counts = summary.to_dict()
    for label, key in _SUMMARY_ROWS:
        table.add_row(label, str(counts[key]))
    return table


def validations_table(validations: Iterable[NameValidation], title: str = "Names") -> Table:
    table = Table(title=title)
    for header in ("Original", "Honorific", "First", "Middle", "Last", "Suffix", "Script", "Confidence", "Issues"):
        table.add_column(header)

    for v in validations:
        level = v.confidence_level.value
        style = _CONFIDENCE_STYLE.get(level, "")
        table.add_row(
            escape(v.original),
            escape(v.honorific),
            escape(v.first_name),
            escape(v.middle_name),
            escape(v.last_name),
            escape(v.suffix),
            v.script.value,
            f"[{style}]{level}[/{style}]" if style else level,
            escape("\n".join(v.potential_issues)),
        )
    return table


def write_json(data, *, out: Optional[Path], pretty: bool):
    """
    Write JSON to stdout or file.
    """
    payload = dumps_json(data, pretty=pretty)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
