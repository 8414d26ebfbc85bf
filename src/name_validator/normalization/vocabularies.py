"""
Fixed lookup tables used by the decomposer, plus small token detectors.

All tables are built once at import and never mutated.
"""

from __future__ import annotations

from typing import List, Optional


# ==========================================================
# TOKEN VOCABULARIES
# ==========================================================

# Titles stripped from the front of a name (compared lower-case, trailing
# period removed).
HONORIFICS = frozenset({
    "mr", "mrs", "ms", "miss",
    "dr", "prof", "rev", "hon",
    "sir", "madam", "lord", "lady",
    "capt", "major", "col", "lt", "cmdr", "sgt",
})

# Generational and credential markers stripped from the end of a name.
SUFFIXES = frozenset({
    "jr", "sr",
    "i", "ii", "iii", "iv", "v",
    "phd", "md", "dds", "esq",
})

# Any trailing token starting with one of these is treated as a suffix too
# ("jr.", "sr.,", ...).
SUFFIX_STEMS = ("jr", "sr")

# Name particles; lower-case outside surname position.
NAME_PARTICLES = frozenset({
    "von", "van", "de", "del", "della", "di", "da", "do", "dos", "das", "du",
    "la", "le", "el", "les", "lo", "mac", "mc", "o'",
    "al", "bin", "ibn", "ap", "ben", "bat", "bint",
})


# ==========================================================
# DATA-QUALITY VOCABULARIES (substring, case-insensitive)
# ==========================================================

PLACEHOLDER_NAMES = (
    "test", "user", "admin", "sample", "demo", "fake", "anonymous", "unknown",
    "noreply", "example", "null", "undefined", "n/a", "na", "none", "blank",
)

SECURITY_PATTERNS = (
    ");", "--", "/*", "*/", ";",
    "drop", "select", "insert", "update", "delete", "union", "script", "<>",
)


# ==========================================================
# HELPERS
# ==========================================================

def normalize_honorific(token: Optional[str]) -> str:
    """Lowercase and drop one trailing period."""
    if not token:
        return ""
    lowered = token.lower()
    return lowered[:-1] if lowered.endswith(".") else lowered


def normalize_suffix(token: Optional[str]) -> str:
    """Lowercase, drop commas and trailing periods."""
    if not token:
        return ""
    return token.lower().replace(",", "").rstrip(".")


def is_particle(token: Optional[str]) -> bool:
    return bool(token) and token.lower() in NAME_PARTICLES


def is_placeholder(text: Optional[str]) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(fake in lowered for fake in PLACEHOLDER_NAMES)


def contains_security_pattern(text: Optional[str]) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(pattern in lowered for pattern in SECURITY_PATTERNS)


# ==========================================================
# HONORIFIC / SUFFIX DETECTION
# ==========================================================

def detect_honorific(tokens: List[str]) -> Optional[str]:
    """
    Return the first token if it is a known honorific.
    """
    if not tokens:
        return None

    return tokens[0] if normalize_honorific(tokens[0]) in HONORIFICS else None


def detect_suffix(tokens: List[str]) -> Optional[str]:
    """
    Return the normalized last token if it is a known suffix.

    Tokens beginning with "jr"/"sr" count as suffixes even when they are not
    in the table.
    """
    if not tokens:
        return None

    candidate = normalize_suffix(tokens[-1])
    if candidate in SUFFIXES or candidate.startswith(SUFFIX_STEMS):
        return candidate
    return None
