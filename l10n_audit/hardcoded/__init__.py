from .models import ScanResult, StringMatch
from .patterns import contains_japanese, is_hiragana, is_kanji, is_katakana
from .detect import (
    extract_comment_spans,
    extract_literals,
    is_inside_string_literal,
    scan_file,
    scan_line,
    scan_text,
    strip_comments,
)
from .discovery import find_target_files, is_excluded, load_localized_strings, scan
from .report import render_failure_notice, render_json, render_report

__all__ = [
    "ScanResult",
    "StringMatch",
    "contains_japanese",
    "extract_comment_spans",
    "extract_literals",
    "find_target_files",
    "is_excluded",
    "is_hiragana",
    "is_inside_string_literal",
    "is_kanji",
    "is_katakana",
    "load_localized_strings",
    "render_failure_notice",
    "render_json",
    "render_report",
    "scan",
    "scan_file",
    "scan_line",
    "scan_text",
    "strip_comments",
]
