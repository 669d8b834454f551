from __future__ import annotations

from pathlib import Path


class MissingResourceFile(FileNotFoundError):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"File not found: {self.path}")


class MalformedResourceFile(ValueError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Malformed ARB file {self.path}: {reason}")


__all__ = ["MalformedResourceFile", "MissingResourceFile"]
