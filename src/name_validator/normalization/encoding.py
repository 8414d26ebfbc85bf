"""
Fixed-table repair for UTF-8 text that was decoded as Latin-1.

Only the accented letters in ``_REPAIRABLE`` are handled, plus removal of
stray U+FFFD replacement characters. This is not a general decoder.
"""

from __future__ import annotations

from typing import Dict

from name_validator.normalization.script_detection import REPLACEMENT_CHAR

_REPAIRABLE = "áéíóúñäöüèôî"

# "Ã©" -> "é", etc.
MOJIBAKE_REPAIRS: Dict[str, str] = {
    ch.encode("utf-8").decode("latin-1"): ch for ch in _REPAIRABLE
}


def repair_encoding(text: str) -> str:
    """Apply the repair table and drop replacement characters."""
    if not text:
        return text
    fixed = text
    for broken, good in MOJIBAKE_REPAIRS.items():
        fixed = fixed.replace(broken, good)
    return fixed.replace(REPLACEMENT_CHAR, "")
