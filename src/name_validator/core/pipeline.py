from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from name_validator.batch import BatchResult, filter_problem_names, is_problem_row, process_rows
from name_validator.core.context import ValidationContext
from name_validator.core.exceptions import ColumnNotFoundError, PipelineError
from name_validator.exporter import (
    export_clean_csv,
    export_full_csv,
    export_json_report,
    split_output_name,
)
from name_validator.loader import detect_name_column, load_csv


class Pipeline:
    """
    Orchestrates load -> decompose -> (filter) -> export.
    No name logic lives here.
    """

    def __init__(self, context: ValidationContext):
        self.ctx = context
        self.log = context.logger

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def resolve_column(self, columns: List[str]) -> str:
        requested = self.ctx.name_column
        if requested:
            if requested not in columns:
                raise ColumnNotFoundError(
                    f"Column {requested!r} not found; available: {', '.join(columns)}"
                )
            return requested

        detected = detect_name_column(columns)
        if detected is None:
            raise ColumnNotFoundError(
                "Could not detect a name column; pass one explicitly. "
                f"Available: {', '.join(columns)}"
            )
        self.log.info(f"Auto-detected name column: {detected}")
        return detected

    def filter(self, batch: BatchResult) -> BatchResult:
        kept_rows, summary = filter_problem_names(batch.rows, batch.summary)
        kept_validations = [
            v for row, v in zip(batch.rows, batch.validations) if not is_problem_row(row)
        ]
        return BatchResult(
            rows=kept_rows,
            validations=kept_validations,
            summary=summary,
            name_column=batch.name_column,
        )

    def default_output_path(self) -> Optional[Path]:
        if not self.ctx.input_path:
            return None
        src = Path(self.ctx.input_path)
        return src.with_name(split_output_name(src.name))

    def export(self, batch: BatchResult) -> None:
        clean_path = self.ctx.output_path or self.default_output_path()
        if clean_path:
            export_clean_csv(batch.rows, clean_path)
            self.ctx.stats["clean_csv"] = str(clean_path)

        if self.ctx.full_report_path:
            export_full_csv(batch.rows, self.ctx.full_report_path)
            self.ctx.stats["full_report"] = str(self.ctx.full_report_path)

        if self.ctx.json_report_path:
            export_json_report(batch, self.ctx.json_report_path)
            self.ctx.stats["json_report"] = str(self.ctx.json_report_path)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def process(self) -> BatchResult:
        """Load and decompose without writing anything."""
        cfg = self.ctx.config
        chunk_size = self.ctx.chunk_size or cfg.chunk_size
        workers = self.ctx.workers or cfg.workers

        rows, columns = load_csv(self.ctx.input_path)
        column = self.resolve_column(columns)

        batch = process_rows(
            rows,
            column,
            chunk_size=chunk_size,
            workers=workers,
            progress=self.ctx.progress,
        )
        if self.ctx.filter_problems:
            batch = self.filter(batch)

        self.ctx.stats.update(batch.summary.to_dict())
        return batch

    def run(self, *, export: bool = True) -> BatchResult:
        self.log.info("Pipeline starting")

        try:
            batch = self.process()
            if export:
                self.export(batch)
            self.log.info("Pipeline completed successfully")
            return batch

        except PipelineError:
            self.log.exception("Pipeline execution failed")
            raise

        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise PipelineError(str(exc)) from exc
