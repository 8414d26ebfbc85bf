"""
Pick the column that most likely holds full personal names.
"""

from __future__ import annotations

from typing import Optional, Sequence

# Headers mentioning "name" but naming something else, or an already split part.
_EXCLUDED_FRAGMENTS = ("company", "business", "first", "last")


def detect_name_column(columns: Sequence[str]) -> Optional[str]:
    """
    Return the first header containing "name" that is not a company/business
    or first/last-name column. A single-column table uses its only column.
    """
    for column in columns:
        lowered = column.lower()
        if "name" in lowered and not any(x in lowered for x in _EXCLUDED_FRAGMENTS):
            return column

    if len(columns) == 1:
        return columns[0]

    return None
