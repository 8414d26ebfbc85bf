"""
csv_exporter.py
CSV downloads for processed rows.

- clean:       only First_Name / Last_Name
- full report: every column seen, first-seen order

Files are written as UTF-8 with a BOM so spreadsheet tools pick the right
encoding.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence, Union

from name_validator.core.exceptions import ExportError
from name_validator.logging import get_logger

log = get_logger(__name__)

CLEAN_COLUMNS = ("First_Name", "Last_Name")
ENCODING = "utf-8-sig"

PathLike = Union[str, Path]


def split_output_name(filename: PathLike) -> str:
    """'people.csv' -> 'people_split.csv'; no extension -> 'people_split'."""
    p = Path(filename)
    if p.suffix:
        return f"{p.stem}_split{p.suffix}"
    return f"{p.name}_split"


def _collect_columns(rows: Iterable[Mapping[str, Any]]) -> List[str]:
    seen: dict = {}
    for row in rows:
        for key in row.keys():
            seen.setdefault(key, None)
    return list(seen)


def _write_rows(path: Path, columns: Sequence[str], rows: Iterable[Mapping[str, Any]]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=ENCODING, newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(columns), extrasaction="ignore")
            writer.writeheader()
            for row in rows:
                writer.writerow({c: ("" if row.get(c) is None else row.get(c)) for c in columns})
    except OSError as exc:
        raise ExportError(f"Could not write {path}: {exc}") from exc


def export_clean_csv(rows: Sequence[Mapping[str, Any]], output_path: PathLike) -> Path:
    """Write only First_Name / Last_Name."""
    path = Path(output_path)
    _write_rows(path, CLEAN_COLUMNS, rows)
    log.info(f"Clean CSV written: {path} ({len(rows)} rows)")
    return path


def export_full_csv(rows: Sequence[Mapping[str, Any]], output_path: PathLike) -> Path:
    """Write every column of the enriched rows."""
    path = Path(output_path)
    _write_rows(path, _collect_columns(rows), rows)
    log.info(f"Full report CSV written: {path} ({len(rows)} rows)")
    return path
