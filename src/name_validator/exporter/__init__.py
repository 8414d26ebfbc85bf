"""
Output sinks for processed rows.

    from name_validator.exporter import export_clean_csv, export_full_csv, export_json_report
"""

from .csv_exporter import (
    CLEAN_COLUMNS,
    export_clean_csv,
    export_full_csv,
    split_output_name,
)
from .json_exporter import build_report_dict, dumps_json, export_json_report

__all__ = [
    "CLEAN_COLUMNS",
    "build_report_dict",
    "dumps_json",
    "export_clean_csv",
    "export_full_csv",
    "export_json_report",
    "split_output_name",
]
