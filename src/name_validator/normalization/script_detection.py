"""
Unicode script classification for free-text names.

``classify`` maps a string to a ``ScriptTag``. Encoding damage (U+FFFD) wins
over every other signal; after that a fixed priority list of Unicode blocks is
tested and the first hit is reported, so a string mixing two known scripts
reports whichever comes first in ``_SCRIPT_PATTERNS``.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Tuple


class ScriptTag(str, Enum):
    LATIN = "latin"
    CYRILLIC = "cyrillic"
    DEVANAGARI = "devanagari"
    ARABIC = "arabic"
    HAN = "han"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    HANGUL = "hangul"
    THAI = "thai"
    NON_LATIN = "non-latin"
    ENCODING_ISSUE = "encoding-issue"
    UNKNOWN = "unknown"


REPLACEMENT_CHAR = "\ufffd"

# Priority order matters for mixed-script input.
_SCRIPT_PATTERNS: Tuple[Tuple[ScriptTag, re.Pattern[str]], ...] = (
    (ScriptTag.CYRILLIC, re.compile(r"[\u0400-\u04FF]")),
    (ScriptTag.DEVANAGARI, re.compile(r"[\u0900-\u097F]")),
    (ScriptTag.ARABIC, re.compile(r"[\u0600-\u06FF\u0750-\u077F]")),
    (ScriptTag.HAN, re.compile(r"[\u4E00-\u9FFF\u3400-\u4DBF]")),
    (ScriptTag.HIRAGANA, re.compile(r"[\u3040-\u309F]")),
    (ScriptTag.KATAKANA, re.compile(r"[\u30A0-\u30FF]")),
    (ScriptTag.HANGUL, re.compile(r"[\uAC00-\uD7AF\u1100-\u11FF]")),
    (ScriptTag.THAI, re.compile(r"[\u0E00-\u0E7F]")),
)

_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")

# Scripts conventionally written without spaces between name parts.
UNSPACED_SCRIPTS = frozenset(
    {ScriptTag.HAN, ScriptTag.HIRAGANA, ScriptTag.KATAKANA, ScriptTag.THAI}
)


def classify(text: Any) -> ScriptTag:
    """Return the writing system of ``text``; never raises."""
    if not text or not isinstance(text, str):
        return ScriptTag.UNKNOWN

    if REPLACEMENT_CHAR in text:
        return ScriptTag.ENCODING_ISSUE

    for tag, pattern in _SCRIPT_PATTERNS:
        if pattern.search(text):
            return tag

    if _NON_ASCII_RE.search(text):
        return ScriptTag.NON_LATIN

    return ScriptTag.LATIN


def is_latin_like(tag: ScriptTag | str) -> bool:
    """Latin and unknown text get Latin-style capitalization and splitting."""
    return ScriptTag(tag) in (ScriptTag.LATIN, ScriptTag.UNKNOWN)


def is_non_latin_script(tag: ScriptTag | str) -> bool:
    """True for a real non-Latin script; encoding damage is not counted."""
    tag = ScriptTag(tag)
    return not is_latin_like(tag) and tag is not ScriptTag.ENCODING_ISSUE
