"""
Post-hoc removal of rows whose decomposition should not be trusted at all.

Works on enriched rows (not NameValidation values) so a previously exported
full report can be filtered again.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from name_validator.batch.aggregate import ValidationResults
from name_validator.logging import get_logger
from name_validator.normalization.script_detection import ScriptTag

log = get_logger(__name__)

# Issue text fragments marking a row as removable (case-insensitive).
SEVERE_ISSUE_KEYWORDS = (
    "security", "sql", "code",
    "test", "placeholder",
    "null", "empty",
)

_LATIN_LIKE = (ScriptTag.LATIN.value, ScriptTag.UNKNOWN.value)


def is_problem_row(row: Mapping[str, Any]) -> bool:
    """Low confidence, Latin-like script and a severe issue."""
    if row.get("Confidence") != "low":
        return False

    script = row.get("Script") or ScriptTag.UNKNOWN.value
    if script not in _LATIN_LIKE:
        return False

    issues = str(row.get("Issues") or "").lower()
    return any(keyword in issues for keyword in SEVERE_ISSUE_KEYWORDS)


def filter_problem_names(
    rows: Sequence[Mapping[str, Any]],
    summary: Optional[ValidationResults] = None,
) -> Tuple[List[Dict[str, Any]], ValidationResults]:
    """
    Drop problem rows and return (kept_rows, updated_summary).

    The summary's totals become the kept count and the severe-issue counters
    reset to zero; the remaining counters are carried over unchanged.
    """
    kept = [dict(row) for row in rows if not is_problem_row(row)]
    base = summary if summary is not None else ValidationResults()
    updated = replace(
        base,
        total=len(kept),
        processed=len(kept),
        security_issues=0,
        suspicious_entries=0,
        null_values=0,
    )
    log.info("Filtered problem names: kept %d of %d rows", len(kept), len(rows))
    return kept, updated
