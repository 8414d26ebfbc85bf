"""
aggregate.py
Run the decomposer over a row collection in bounded slices.

Rows are plain mappings of column name -> value. Each row is deep-copied and
enriched with the well-known output columns (First_Name, Last_Name, ...);
the caller's rows are left untouched.
"""

from __future__ import annotations

import copy
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence

from name_validator.batch.process_pool import DecomposerPool
from name_validator.config import DEFAULT_CHUNK_SIZE
from name_validator.entities.decomposer import decompose
from name_validator.entities.name_validation import NameValidation
from name_validator.logging import get_logger

log = get_logger(__name__)

Row = Dict[str, Any]
ProgressCallback = Callable[[int, int], None]


@dataclass
class ValidationResults:
    """Summary counters for one processed batch."""

    total: int = 0
    processed: int = 0
    non_latin_names: int = 0
    suspicious_entries: int = 0
    security_issues: int = 0
    null_values: int = 0
    issues_found: int = 0
    comma_format_names: int = 0

    def record(self, validation: NameValidation) -> None:
        self.processed += 1
        if validation.is_comma_format:
            self.comma_format_names += 1
        if validation.is_non_latin:
            self.non_latin_names += 1
        if validation.is_placeholder:
            self.suspicious_entries += 1
        if validation.is_security_threat:
            self.security_issues += 1
        if validation.is_null:
            self.null_values += 1
        if validation.potential_issues:
            self.issues_found += 1

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class BatchResult:
    rows: List[Row] = field(default_factory=list)
    validations: List[NameValidation] = field(default_factory=list)
    summary: ValidationResults = field(default_factory=ValidationResults)
    name_column: str = ""


def iter_chunks(items: Sequence[Any], chunk_size: int) -> Iterator[Sequence[Any]]:
    """Yield consecutive slices of at most ``chunk_size`` items."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    for start in range(0, len(items), chunk_size):
        yield items[start:start + chunk_size]


def enrich_row(row: Mapping[str, Any], validation: NameValidation) -> Row:
    """Return a copy of ``row`` with the decomposition columns merged in."""
    out = copy.deepcopy(dict(row))
    out.update(validation.to_row_fields())
    return out


def process_rows(
    rows: Sequence[Mapping[str, Any]],
    name_column: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    workers: int = 1,
    progress: Optional[ProgressCallback] = None,
) -> BatchResult:
    """
    Decompose ``row[name_column]`` for every row.

    Rows missing the column are treated as null names. ``workers > 1`` hands
    each slice to a process pool; output order and content are the same as
    the in-process path. ``progress`` is called as (chunks_done, total_chunks)
    after every slice.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    summary = ValidationResults(total=len(rows))
    result = BatchResult(summary=summary, name_column=name_column)

    total_chunks = math.ceil(len(rows) / chunk_size) if rows else 0
    log.info(
        "Processing %d rows on column %r (chunk_size=%d, workers=%d)",
        len(rows), name_column, chunk_size, workers,
    )

    pool = DecomposerPool(max_workers=workers) if workers > 1 else None
    try:
        for index, chunk in enumerate(iter_chunks(rows, chunk_size), start=1):
            names = [row.get(name_column) for row in chunk]
            if pool is not None:
                validations = pool.decompose(names)
            else:
                validations = [decompose(name) for name in names]

            for row, validation in zip(chunk, validations):
                result.rows.append(enrich_row(row, validation))
                result.validations.append(validation)
                summary.record(validation)

            log.debug("Chunk %d/%d done (%d rows)", index, total_chunks, summary.processed)
            if progress is not None:
                progress(index, total_chunks)
    finally:
        if pool is not None:
            pool.close()

    log.info(
        "Processed %d rows: %d with issues, %d non-Latin, %d comma format",
        summary.processed, summary.issues_found, summary.non_latin_names,
        summary.comma_format_names,
    )
    return result
