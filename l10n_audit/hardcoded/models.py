from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _literal_body(literal: str) -> str:
    text = literal
    if text.startswith("r") and len(text) >= 3:
        text = text[1:]
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
        return text[1:-1]
    return text


@dataclass(frozen=True)
class StringMatch:
    file_path: Path
    line_number: int
    content: str
    matched_text: str
    is_in_comment: bool = False

    @property
    def literal_body(self) -> str:
        """Matched text without the surrounding quotes (or raw prefix)."""
        if self.is_in_comment:
            return self.matched_text
        return _literal_body(self.matched_text)

    def relative_path(self, root: str | Path) -> str:
        try:
            relative = os.path.relpath(self.file_path, root)
        except ValueError:
            relative = str(self.file_path)
        return Path(relative).as_posix()

    def to_dict(self, root: str | Path | None = None) -> dict[str, object]:
        path = self.relative_path(root) if root is not None else Path(self.file_path).as_posix()
        return {
            "path": path,
            "line": self.line_number,
            "text": self.matched_text,
            "content": self.content.strip(),
            "in_comment": self.is_in_comment,
        }


@dataclass(frozen=True)
class ScanResult:
    matches: tuple[StringMatch, ...]
    files_scanned: int
    localized_strings: frozenset[str] = field(default_factory=frozenset)

    @property
    def total(self) -> int:
        return len(self.matches)

    @property
    def passed(self) -> bool:
        return not self.matches

    def is_localized(self, match: StringMatch) -> bool:
        return match.literal_body in self.localized_strings


__all__ = ["ScanResult", "StringMatch"]
