"""
json_exporter.py
JSON report for a processed batch.

The report carries the summary counters, the enriched rows and, per row, the
full NameValidation record for programmatic consumers.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

from name_validator.core.exceptions import ExportError
from name_validator.logging import get_logger

log = get_logger(__name__)


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enums -> their value
    - Primitives pass through
    - objects with to_dict() -> that dict
    - dataclasses -> dict (recursively)
    - dict / list / tuple / set -> recursively converted
    - anything else -> str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if hasattr(obj, "to_dict"):
        return _to_json_compatible(obj.to_dict())

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def build_report_dict(batch: Any) -> Dict[str, Any]:
    """
    Convert a BatchResult into a JSON-safe dict.
    """
    return {
        "name_column": batch.name_column,
        "summary": _to_json_compatible(batch.summary),
        "rows": _to_json_compatible(batch.rows),
        "validations": _to_json_compatible(batch.validations),
    }


def dumps_json(data: Any, *, pretty: bool = True) -> str:
    if pretty:
        return json.dumps(_to_json_compatible(data), indent=2, ensure_ascii=False)
    return json.dumps(_to_json_compatible(data), separators=(",", ":"), ensure_ascii=False)


def export_json_report(
    batch: Any,
    output_path: Union[str, Path],
    *,
    pretty: bool = True,
) -> Path:
    """Write the batch report (summary, enriched rows, per-name details)."""
    data = build_report_dict(batch)

    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dumps_json(data, pretty=pretty), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Could not write {path}: {exc}") from exc

    log.info(f"JSON report written: {path}")
    return path
