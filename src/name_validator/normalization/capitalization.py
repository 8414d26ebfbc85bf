"""
Particle-aware capitalization for name fields.

``proper_capitalize`` is a small recursive function over a token string:
hyphenated and multi-word input is split and each part capitalized on its
own, so the function is stable when re-applied to its own output. Text in a
non-Latin script is returned unchanged.
"""

from __future__ import annotations

from typing import Optional

from name_validator.normalization.script_detection import classify, is_latin_like
from name_validator.normalization.vocabularies import NAME_PARTICLES


def _cap(s: str) -> str:
    return s[:1].upper() + s[1:].lower() if s else s


def proper_capitalize(name: Optional[str], is_last_name: bool = False) -> str:
    """
    Capitalize one name field.

    Rules, first match wins:
      * hyphenated      -> each part capitalized ("smith-jones" -> "Smith-Jones")
      * several words   -> each word capitalized; a leading particle stays
                           lower-case unless ``is_last_name``
      * Mc / Mac prefix -> "mcdonald" -> "McDonald", "macleod" -> "MacLeod"
      * O' prefix       -> "o'brien" -> "O'Brien"
      * inner apostrophe-> "d'artagnan" -> "D'Artagnan"
      * particle        -> "van" (or "Van" in surname position)
      * default         -> first letter upper, rest lower
    """
    if not name:
        return ""

    if not is_latin_like(classify(name)):
        return name

    if "-" in name:
        return "-".join(proper_capitalize(part, is_last_name) for part in name.split("-"))

    if " " in name:
        return " ".join(proper_capitalize(word, is_last_name) for word in name.split(" "))

    lowered = name.lower()

    if lowered.startswith(("mc", "mac")) and len(name) > 3:
        cut = 3 if lowered.startswith("mac") else 2
        return _cap(name[:cut]) + _cap(name[cut:])

    if lowered.startswith("o'") and len(name) > 2:
        return "O'" + _cap(name[2:])

    if "'" in name[1:]:
        return "'".join(_cap(part) for part in name.split("'"))

    if lowered in NAME_PARTICLES:
        return _cap(name) if is_last_name else lowered

    return _cap(name)


def capitalize_words(words, is_last_name: bool = False) -> str:
    """Capitalize each token independently and join with single spaces."""
    return " ".join(proper_capitalize(w, is_last_name) for w in words if w)
