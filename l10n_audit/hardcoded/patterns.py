"""Regular expressions used to find Japanese text in Dart source lines.

These are line-oriented approximations of Dart's literal grammar, not a
tokenizer: nested or interpolated literals (``'${'あ'}'``) and literals
spanning several lines are not modelled.
"""

from __future__ import annotations

import re

# Hiragana: U+3040-U+309F
HIRAGANA = re.compile(r"[\u3040-\u309F]")

# Katakana: U+30A0-U+30FF
KATAKANA = re.compile(r"[\u30A0-\u30FF]")

# CJK unified ideographs: U+4E00-U+9FAF
KANJI = re.compile(r"[\u4E00-\u9FAF]")

JAPANESE = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]")

SINGLE_QUOTE_STRING = re.compile(r"'([^'\\]|\\.)*'")
DOUBLE_QUOTE_STRING = re.compile(r'"([^"\\]|\\.)*"')
RAW_STRING = re.compile(r'r"[^"]*"')

DEBUG_OUTPUT_CALL = re.compile(r"debugPrint\s*\([^)]*\)")
EXCEPTION_CALL = re.compile(r"Exception\s*\([^)]*\)")
PRINT_CALL = re.compile(r"print\s*\([^)]*\)")

# Order matters: debugPrint must go before print so the bare print pattern
# never sees a half-removed debugPrint call.
STRIPPED_CALLS: tuple[re.Pattern[str], ...] = (DEBUG_OUTPUT_CALL, EXCEPTION_CALL, PRINT_CALL)

SINGLE_LINE_COMMENT = re.compile(r"//.*$")
COMMENT_MARKER = "//"


def contains_japanese(text: str) -> bool:
    return bool(text) and JAPANESE.search(text) is not None


def is_hiragana(char: str) -> bool:
    return HIRAGANA.fullmatch(char) is not None


def is_katakana(char: str) -> bool:
    return KATAKANA.fullmatch(char) is not None


def is_kanji(char: str) -> bool:
    return KANJI.fullmatch(char) is not None


__all__ = [
    "COMMENT_MARKER",
    "DEBUG_OUTPUT_CALL",
    "DOUBLE_QUOTE_STRING",
    "EXCEPTION_CALL",
    "HIRAGANA",
    "JAPANESE",
    "KANJI",
    "KATAKANA",
    "PRINT_CALL",
    "RAW_STRING",
    "SINGLE_LINE_COMMENT",
    "SINGLE_QUOTE_STRING",
    "STRIPPED_CALLS",
    "contains_japanese",
    "is_hiragana",
    "is_kanji",
    "is_katakana",
]
