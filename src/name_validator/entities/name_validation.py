"""
name_validation.py
Structured result of decomposing one free-text personal name.

Defines:
- ConfidenceLevel: coarse trust rating (low < medium < high)
- NameValidation:  split name fields + script + issues + confidence
- ISSUE_*:         the advisory strings recorded on a NameValidation

A NameValidation is filled in by ``decompose`` and handed out as a finished
value; batch code reads it but does not edit it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from name_validator.normalization.script_detection import ScriptTag


# -----------------------------------------------------------------------------
# Issue messages (order of appearance on a record = detection order)
# -----------------------------------------------------------------------------

ISSUE_NULL_OR_EMPTY = "Null or empty name"
ISSUE_EMPTY_AFTER_SANITIZATION = "Empty name after sanitization"
ISSUE_PLACEHOLDER = "Name may be a test or placeholder"
ISSUE_SECURITY = "Name may contain code or SQL patterns"
ISSUE_ENCODING = "Character encoding issues detected"
ISSUE_ENCODING_REPAIRED = "Attempted to fix encoding issues"
ISSUE_UNSPACED_FAMILY_NAME = "Non-Latin name without spaces - assuming entire name is family name"
ISSUE_NON_LATIN = "Non-Latin script detected - name splitting might be incorrect"
ISSUE_ONLY_AFFIXES = "Name consists of only honorifics/suffixes"
ISSUE_SINGLE_NAME = "Only a single name was provided"

NULL_ISSUES = frozenset({ISSUE_NULL_OR_EMPTY, ISSUE_EMPTY_AFTER_SANITIZATION})

ISSUE_SEPARATOR = "; "


class ConfidenceLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK = {
    ConfidenceLevel.LOW: 0,
    ConfidenceLevel.MEDIUM: 1,
    ConfidenceLevel.HIGH: 2,
}


@dataclass(slots=True)
class NameValidation:
    original: str = ""
    sanitized: str = ""
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    honorific: str = ""
    suffix: str = ""
    script: ScriptTag = ScriptTag.UNKNOWN
    is_comma_format: bool = False
    potential_issues: List[str] = field(default_factory=list)
    confidence_level: ConfidenceLevel = ConfidenceLevel.HIGH

    # -- building helpers (used by the decomposer only) ----------------------

    def cap_confidence(self, level: ConfidenceLevel) -> None:
        """Lower confidence to ``level``; never raises it."""
        if level.rank < self.confidence_level.rank:
            self.confidence_level = level

    def flag(self, issue: str, level: ConfidenceLevel | None = None) -> None:
        self.potential_issues.append(issue)
        if level is not None:
            self.cap_confidence(level)

    # -- issue categories ----------------------------------------------------

    @property
    def is_null(self) -> bool:
        return any(issue in NULL_ISSUES for issue in self.potential_issues)

    @property
    def is_placeholder(self) -> bool:
        return ISSUE_PLACEHOLDER in self.potential_issues

    @property
    def is_security_threat(self) -> bool:
        return ISSUE_SECURITY in self.potential_issues

    @property
    def is_non_latin(self) -> bool:
        return self.script not in (ScriptTag.LATIN, ScriptTag.UNKNOWN)

    @property
    def issues_text(self) -> str:
        return ISSUE_SEPARATOR.join(self.potential_issues)

    # -- projections ---------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "sanitized": self.sanitized,
            "firstName": self.first_name,
            "middleName": self.middle_name,
            "lastName": self.last_name,
            "honorific": self.honorific,
            "suffix": self.suffix,
            "script": self.script.value,
            "isCommaFormat": self.is_comma_format,
            "potentialIssues": list(self.potential_issues),
            "confidenceLevel": self.confidence_level.value,
        }

    def to_row_fields(self) -> Dict[str, str]:
        """Columns merged into an input row; optional ones only when set."""
        fields: Dict[str, str] = {
            "First_Name": self.first_name,
            "Last_Name": self.last_name,
        }
        if self.middle_name:
            fields["Middle_Name"] = self.middle_name
        if self.honorific:
            fields["Honorific"] = self.honorific
        if self.suffix:
            fields["Suffix"] = self.suffix
        fields["Script"] = self.script.value
        fields["Confidence"] = self.confidence_level.value
        if self.potential_issues:
            fields["Issues"] = self.issues_text
        return fields
