"""
CSV loader.

Reads a header-row CSV into a list of ``{column: value}`` rows. Empty lines
are skipped; every value stays a string (no type coercion).
"""

from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from name_validator.core.exceptions import LoaderError
from name_validator.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]


def resolve_input_path(path: Optional[PathLike]) -> Optional[str]:
    """
    Convert a user-provided path into an absolute validated file path.

    Returns:
        Absolute path string, or None if no input path was provided.
    """
    if path is None:
        log.debug("No input path provided to resolve_input_path().")
        return None

    abs_path = os.path.abspath(path)
    log.debug(f"Resolving input file: {abs_path}")

    if not os.path.exists(abs_path):
        log.error(f"Input file does not exist: {abs_path}")
        raise FileNotFoundError(f"Input file not found: {abs_path}")

    if not os.path.isfile(abs_path):
        log.error(f"Input path is not a file: {abs_path}")
        raise ValueError(f"Input path is not a file: {abs_path}")

    return abs_path


def _is_blank(row: Dict[Optional[str], object]) -> bool:
    # The None key holds overflow cells beyond the header.
    cells = list(row.get(None) or []) + [v for k, v in row.items() if k is not None]
    return all(v is None or not str(v).strip() for v in cells)


def load_csv(path: PathLike) -> Tuple[List[Dict[str, Optional[str]]], List[str]]:
    """
    Load ``path`` and return ``(rows, columns)``.

    A UTF-8 BOM is tolerated. Raises FileNotFoundError for a missing file and
    LoaderError when the file has no header or no data rows.
    """
    abs_path = resolve_input_path(path)

    try:
        with open(abs_path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            columns = list(reader.fieldnames or [])
            rows = [dict(row) for row in reader if not _is_blank(row)]
    except (csv.Error, UnicodeDecodeError) as exc:
        raise LoaderError(f"Error parsing CSV {abs_path}: {exc}") from exc

    if not columns:
        raise LoaderError(f"No header row found in {abs_path}")
    if not rows:
        raise LoaderError(f"No data found in the CSV file {abs_path}")

    # Rows longer than the header collect extras under a None key.
    for row in rows:
        row.pop(None, None)

    log.info(f"Loaded {len(rows)} rows, {len(columns)} columns from {abs_path}")
    return rows, columns
