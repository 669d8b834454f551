from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable

from dotenv import find_dotenv, load_dotenv

# .env is looked up from the working directory, not the installed package
load_dotenv(find_dotenv(usecwd=True))

ARB_METADATA_PREFIX = "@"
ARB_LOCALE_KEY = "@@locale"


def _parse_list(raw: str | None) -> tuple[str, ...]:
    values: list[str] = []
    for value in (raw or "").split(","):
        candidate = value.strip()
        if not candidate:
            continue
        values.append(candidate)
    return tuple(values)


L10N_DIRECTORY = os.getenv("L10N_AUDIT_ARB_DIR", "lib/l10n")
TARGET_DIRECTORIES = _parse_list(os.getenv("L10N_AUDIT_TARGET_DIRS")) or ("lib/views",)
LOG_LEVEL = os.getenv("L10N_AUDIT_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("L10N_AUDIT_LOG_FILE")

DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    ".g.dart",
    ".freezed.dart",
    ".mocks.dart",
    "generated_plugin_registrant.dart",
)

DEFAULT_EXCLUDE_PATHS: tuple[str, ...] = (
    "lib/l10n/",
    "lib/gen/",
    "lib/viewmodels/",
)

# Kept for backward compatibility, or only shown to Japanese users
DEFAULT_EXCLUDED_FILES: tuple[str, ...] = (
    "lib/views/widgets/order/order_constants.dart",
    "lib/views/widgets/sort/sort_order.dart",
    "lib/views/screens/notification/components/notification_list_screen.dart",
    "lib/views/screens/notification/notification_list_screen.dart",
)


@dataclass(frozen=True)
class DetectorConfig:
    target_directories: tuple[str, ...] = TARGET_DIRECTORIES
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    exclude_paths: tuple[str, ...] = DEFAULT_EXCLUDE_PATHS
    excluded_files: tuple[str, ...] = DEFAULT_EXCLUDED_FILES
    include_comments: bool = False
    l10n_directory: str = L10N_DIRECTORY
    project_root: Path = field(default_factory=Path.cwd)
    source_extension: str = ".dart"
    resource_extension: str = ".arb"
    suppress_localized: bool = False

    def with_targets(self, directories: Iterable[str]) -> "DetectorConfig":
        """Return a copy whose target directory list is fully replaced."""
        targets = tuple(directories)
        if not targets:
            return self
        return replace(self, target_directories=targets)


@dataclass(frozen=True)
class ComparatorConfig:
    files: tuple[tuple[str, Path], ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for lang, _ in self.files:
            if lang in seen:
                raise ValueError(f"language {lang!r} is configured more than once")
            seen.add(lang)

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(lang for lang, _ in self.files)

    @classmethod
    def from_directory(
        cls, directory: str | Path, languages: Iterable[str], *, prefix: str = "app_"
    ) -> "ComparatorConfig":
        base = Path(directory)
        return cls(files=tuple((lang, base / f"{prefix}{lang}.arb") for lang in languages))


def parse_language_pair(raw: str) -> tuple[str, Path]:
    """Parse a ``TAG=PATH`` command-line value."""
    lang, sep, path = raw.partition("=")
    lang = lang.strip()
    path = path.strip()
    if not sep or not lang or not path:
        raise ValueError(f"expected TAG=PATH, got {raw!r}")
    return lang, Path(path)


DEFAULT_LANGUAGES: tuple[str, ...] = ("en", "ja")


def default_detector_config() -> DetectorConfig:
    return DetectorConfig()


def default_comparator_config() -> ComparatorConfig:
    return ComparatorConfig.from_directory(L10N_DIRECTORY, DEFAULT_LANGUAGES)


__all__ = [
    "ARB_LOCALE_KEY",
    "ARB_METADATA_PREFIX",
    "ComparatorConfig",
    "DEFAULT_EXCLUDED_FILES",
    "DEFAULT_EXCLUDE_PATHS",
    "DEFAULT_EXCLUDE_PATTERNS",
    "DEFAULT_LANGUAGES",
    "DetectorConfig",
    "LOG_FILE",
    "LOG_LEVEL",
    "default_comparator_config",
    "default_detector_config",
    "parse_language_pair",
]
