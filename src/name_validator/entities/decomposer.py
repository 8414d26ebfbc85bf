"""
decomposer.py
Split one free-text personal name into honorific / first / middle / last /
suffix and grade how far the split can be trusted.

Pipeline (each stage may return early):
  1. null / empty guard
  2. sanitize (whitespace, surrounding quotes)
  3. empty-after-sanitize guard
  4. placeholder and code/SQL screening (flags only, never stops)
  5. script classification, encoding repair
  6. unspaced non-Latin scripts: whole-string split, return
  7. "Last, First Middle" comma format, return
  8. honorific / suffix strip, then positional split

Never raises; always returns a NameValidation.
"""

from __future__ import annotations

import re
from typing import Any, List

from name_validator.entities.name_validation import (
    ISSUE_EMPTY_AFTER_SANITIZATION,
    ISSUE_ENCODING,
    ISSUE_ENCODING_REPAIRED,
    ISSUE_NON_LATIN,
    ISSUE_NULL_OR_EMPTY,
    ISSUE_ONLY_AFFIXES,
    ISSUE_PLACEHOLDER,
    ISSUE_SECURITY,
    ISSUE_SINGLE_NAME,
    ISSUE_UNSPACED_FAMILY_NAME,
    ConfidenceLevel,
    NameValidation,
)
from name_validator.logging import get_logger
from name_validator.normalization.capitalization import capitalize_words, proper_capitalize
from name_validator.normalization.encoding import repair_encoding
from name_validator.normalization.script_detection import (
    UNSPACED_SCRIPTS,
    ScriptTag,
    classify,
    is_non_latin_script,
)
from name_validator.normalization.vocabularies import (
    contains_security_pattern,
    detect_honorific,
    detect_suffix,
    is_particle,
    is_placeholder,
    normalize_honorific,
)

log = get_logger(__name__)

_WS_RE = re.compile(r"\s+")
_QUOTE_CHARS = "\"'“”"


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def sanitize(raw: Any) -> str:
    """Collapse whitespace runs, trim, and strip surrounding quote characters."""
    if raw is None:
        return ""
    out = _WS_RE.sub(" ", str(raw)).strip()
    return out.strip(_QUOTE_CHARS).strip()


def _tokens(text: str) -> List[str]:
    return [t for t in text.split(" ") if t]


def _split_unspaced(result: NameValidation, text: str) -> NameValidation:
    """Han / kana / Thai: no inter-word spaces, so split on the first space only."""
    if " " in text:
        first, _, rest = text.partition(" ")
        result.first_name = first
        result.last_name = rest
    else:
        result.last_name = text
        result.potential_issues.append(ISSUE_UNSPACED_FAMILY_NAME)
    result.cap_confidence(ConfidenceLevel.MEDIUM)
    return result


def _split_comma_format(result: NameValidation, text: str) -> NameValidation:
    """'Last, First Middle' - one split on the first comma, no affix stripping."""
    result.is_comma_format = True
    last, _, remainder = text.partition(",")

    given = [t for t in (tok.strip(",") for tok in remainder.split()) if t]

    result.last_name = proper_capitalize(last.strip(), is_last_name=True)
    if given:
        result.first_name = proper_capitalize(given[0])
        result.middle_name = capitalize_words(given[1:])
    else:
        result.flag(ISSUE_SINGLE_NAME, ConfidenceLevel.MEDIUM)
    return result


def _split_tokens(result: NameValidation, text: str) -> NameValidation:
    components = _tokens(text)
    remaining = list(components)

    # Both checks look at the token count before stripping, so "Mr. Jr."
    # loses both tokens.
    if len(components) > 1:
        honorific = detect_honorific(remaining)
        if honorific:
            result.honorific = proper_capitalize(normalize_honorific(honorific))
            remaining.pop(0)

    if len(components) > 1 and remaining:
        suffix = detect_suffix(remaining)
        if suffix:
            result.suffix = suffix.upper()
            remaining.pop()

    if not remaining:
        result.flag(ISSUE_ONLY_AFFIXES, ConfidenceLevel.LOW)
        return result

    if len(remaining) == 1:
        result.first_name = proper_capitalize(remaining[0])
        result.flag(ISSUE_SINGLE_NAME, ConfidenceLevel.MEDIUM)
        return result

    first, *middle, last = remaining

    # Particles directly before the final token belong to the surname
    # ("Ludwig van Beethoven" -> "Van Beethoven").
    surname = [last]
    while middle and is_particle(middle[-1]):
        surname.insert(0, middle.pop())

    result.first_name = proper_capitalize(first)
    result.middle_name = capitalize_words(middle)
    result.last_name = proper_capitalize(" ".join(surname), is_last_name=True)
    return result


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def decompose(raw_name: Any) -> NameValidation:
    """
    Decompose a raw name field into a NameValidation.

        "Dr. Jane Doe Jr"      -> honorific Dr, Jane / Doe, suffix JR
        "Smith, John Michael"  -> John / Michael / Smith, comma format
        "Ludwig van Beethoven" -> Ludwig / Van Beethoven
        "王小明"                -> last name only, medium confidence

    Issues accumulate in detection order; confidence only ever goes down.
    """
    if raw_name is None or raw_name == "":
        return NameValidation(
            original="",
            script=ScriptTag.UNKNOWN,
            potential_issues=[ISSUE_NULL_OR_EMPTY],
            confidence_level=ConfidenceLevel.LOW,
        )

    original = str(raw_name)
    sanitized = sanitize(original)
    result = NameValidation(original=original, sanitized=sanitized)

    if not sanitized:
        result.flag(ISSUE_EMPTY_AFTER_SANITIZATION, ConfidenceLevel.LOW)
        return result

    if is_placeholder(sanitized):
        result.flag(ISSUE_PLACEHOLDER, ConfidenceLevel.LOW)

    if contains_security_pattern(sanitized):
        result.flag(ISSUE_SECURITY, ConfidenceLevel.LOW)

    result.script = classify(sanitized)

    if result.script is ScriptTag.ENCODING_ISSUE:
        result.flag(ISSUE_ENCODING, ConfidenceLevel.LOW)
        repaired = sanitize(repair_encoding(sanitized))
        if repaired != sanitized:
            result.sanitized = repaired
            result.potential_issues.append(ISSUE_ENCODING_REPAIRED)
            log.debug("Repaired encoding: %r -> %r", sanitized, repaired)
        if not repaired:
            result.flag(ISSUE_EMPTY_AFTER_SANITIZATION, ConfidenceLevel.LOW)
            return result

    text = result.sanitized

    if is_non_latin_script(result.script):
        if result.script in UNSPACED_SCRIPTS:
            return _split_unspaced(result, text)
        result.flag(ISSUE_NON_LATIN, ConfidenceLevel.MEDIUM)

    if "," in text:
        return _split_comma_format(result, text)

    return _split_tokens(result, text)
