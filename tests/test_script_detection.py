# tests/test_script_detection.py

from __future__ import annotations

import pytest

from name_validator.normalization.script_detection import (
    ScriptTag,
    classify,
    is_latin_like,
    is_non_latin_script,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("John Smith", ScriptTag.LATIN),
        ("Иван Петров", ScriptTag.CYRILLIC),
        ("राम", ScriptTag.DEVANAGARI),
        ("محمد", ScriptTag.ARABIC),
        ("王小明", ScriptTag.HAN),
        ("さくら", ScriptTag.HIRAGANA),
        ("サクラ", ScriptTag.KATAKANA),
        ("김민준", ScriptTag.HANGUL),
        ("สมชาย", ScriptTag.THAI),
        ("José", ScriptTag.NON_LATIN),
        ("Jos\ufffd", ScriptTag.ENCODING_ISSUE),
    ],
)
def test_classify_known_scripts(text, expected):
    assert classify(text) is expected


@pytest.mark.parametrize("value", [None, "", 42, ["a"]])
def test_classify_empty_or_non_string_is_unknown(value):
    assert classify(value) is ScriptTag.UNKNOWN


def test_replacement_char_beats_script_match():
    assert classify("Иван\ufffd") is ScriptTag.ENCODING_ISSUE
    assert classify("王\ufffd") is ScriptTag.ENCODING_ISSUE


def test_mixed_scripts_report_priority_order_not_position():
    # Known limitation: priority order decides, not which script dominates.
    assert classify("Иван 王") is ScriptTag.CYRILLIC
    assert classify("王 Иван") is ScriptTag.CYRILLIC
    assert classify("山田さくら") is ScriptTag.HAN


def test_script_tag_values_are_plain_strings():
    assert ScriptTag.NON_LATIN.value == "non-latin"
    assert ScriptTag("encoding-issue") is ScriptTag.ENCODING_ISSUE
    assert ScriptTag.LATIN == "latin"


def test_latin_like_helpers():
    assert is_latin_like(ScriptTag.LATIN)
    assert is_latin_like("unknown")
    assert not is_latin_like(ScriptTag.HAN)

    assert is_non_latin_script(ScriptTag.ARABIC)
    assert is_non_latin_script("non-latin")
    assert not is_non_latin_script(ScriptTag.ENCODING_ISSUE)
    assert not is_non_latin_script(ScriptTag.LATIN)
