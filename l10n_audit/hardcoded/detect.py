from __future__ import annotations

import logging
from pathlib import Path

from l10n_audit.hardcoded.models import StringMatch
from l10n_audit.hardcoded.patterns import (
    COMMENT_MARKER,
    DOUBLE_QUOTE_STRING,
    RAW_STRING,
    SINGLE_LINE_COMMENT,
    SINGLE_QUOTE_STRING,
    STRIPPED_CALLS,
    contains_japanese,
)

logger = logging.getLogger(__name__)


def is_inside_string_literal(text: str, position: int) -> bool:
    """Return True when an odd number of unescaped quotes precede ``position``."""
    single_quotes = 0
    double_quotes = 0
    in_escape = False

    for char in text[: max(position, 0)]:
        if in_escape:
            in_escape = False
            continue
        if char == "\\":
            in_escape = True
        elif char == "'":
            single_quotes += 1
        elif char == '"':
            double_quotes += 1

    return single_quotes % 2 == 1 or double_quotes % 2 == 1


def strip_comments(line: str) -> str:
    """Remove debug/exception/print call spans and a trailing ``//`` comment."""
    clean_line = line
    for pattern in STRIPPED_CALLS:
        clean_line = pattern.sub("", clean_line)

    comment_index = clean_line.find(COMMENT_MARKER)
    if comment_index < 0:
        return clean_line

    before_comment = clean_line[:comment_index]
    if is_inside_string_literal(before_comment, comment_index):
        return clean_line
    return before_comment


def extract_literals(line: str) -> list[str]:
    literals: list[str] = [m.group(0) for m in SINGLE_QUOTE_STRING.finditer(line)]

    double_spans: set[tuple[int, int]] = set()
    for match in DOUBLE_QUOTE_STRING.finditer(line):
        double_spans.add(match.span())
        literals.append(match.group(0))

    for match in RAW_STRING.finditer(line):
        start, end = match.span()
        if (start + 1, end) in double_spans:
            continue
        literals.append(match.group(0))

    return literals


def extract_comment_spans(line: str) -> list[str]:
    return [m.group(0) for m in SINGLE_LINE_COMMENT.finditer(line)]


def scan_line(
    line: str,
    *,
    file_path: str | Path,
    line_number: int,
    include_comments: bool = False,
) -> list[StringMatch]:
    """Return the Japanese literals (and optionally comments) found on one line."""
    target = line if include_comments else strip_comments(line)
    path = Path(file_path)

    matches = [
        StringMatch(
            file_path=path,
            line_number=line_number,
            content=line,
            matched_text=literal,
        )
        for literal in extract_literals(target)
        if contains_japanese(literal)
    ]

    if include_comments:
        for comment in extract_comment_spans(line):
            if contains_japanese(comment):
                matches.append(
                    StringMatch(
                        file_path=path,
                        line_number=line_number,
                        content=line,
                        matched_text=comment,
                        is_in_comment=True,
                    )
                )

    return matches


def scan_text(
    text: str, *, file_path: str | Path, include_comments: bool = False
) -> list[StringMatch]:
    matches: list[StringMatch] = []
    # split on "\n" only; str.splitlines() would also break on U+2028 etc.
    for index, line in enumerate(text.split("\n")):
        matches.extend(
            scan_line(
                line,
                file_path=file_path,
                line_number=index + 1,
                include_comments=include_comments,
            )
        )
    return matches


def scan_file(path: str | Path, *, include_comments: bool = False) -> list[StringMatch]:
    """Scan one file; unreadable files are logged and skipped."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return []

    return scan_text(text, file_path=path, include_comments=include_comments)


__all__ = [
    "extract_comment_spans",
    "extract_literals",
    "is_inside_string_literal",
    "scan_file",
    "scan_line",
    "scan_text",
    "strip_comments",
]
