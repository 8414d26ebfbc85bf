"""
Public interface for the table loader.

    from name_validator.loader import load_csv, detect_name_column
"""

from __future__ import annotations

from .column_detection import detect_name_column
from .csv_loader import load_csv, resolve_input_path

__all__ = [
    "detect_name_column",
    "load_csv",
    "resolve_input_path",
]
