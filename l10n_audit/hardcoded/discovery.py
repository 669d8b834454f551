from __future__ import annotations

import logging
from pathlib import Path

from l10n_audit.arb import collect_string_values
from l10n_audit.config import DetectorConfig
from l10n_audit.hardcoded.detect import scan_file
from l10n_audit.hardcoded.models import ScanResult, StringMatch
from l10n_audit.hardcoded.patterns import contains_japanese

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 10


def is_excluded(relative_path: str, config: DetectorConfig) -> bool:
    if any(relative_path.startswith(prefix) for prefix in config.exclude_paths):
        return True
    if any(pattern in relative_path for pattern in config.exclude_patterns):
        return True
    return any(
        relative_path == excluded or relative_path.endswith(excluded)
        for excluded in config.excluded_files
    )


def find_target_files(config: DetectorConfig) -> list[Path]:
    """List the source files under the target directories that are not excluded."""
    root = Path(config.project_root)
    files: list[Path] = []
    seen: set[Path] = set()

    for target_dir in config.target_directories:
        directory = root / target_dir
        if not directory.is_dir():
            logger.debug("Target directory %s does not exist", directory)
            continue

        for path in sorted(directory.rglob(f"*{config.source_extension}")):
            if not path.is_file() or path in seen:
                continue
            relative = path.relative_to(root).as_posix() if path.is_relative_to(root) else path.as_posix()
            if is_excluded(relative, config):
                logger.debug("Excluded %s", relative)
                continue
            seen.add(path)
            files.append(path)

    return files


def load_localized_strings(config: DetectorConfig) -> frozenset[str]:
    """Load ARB values that contain Japanese text."""
    directory = Path(config.project_root) / config.l10n_directory
    return frozenset(
        collect_string_values(
            directory,
            extension=config.resource_extension,
            predicate=contains_japanese,
        )
    )


def scan(config: DetectorConfig) -> ScanResult:
    localized = load_localized_strings(config)
    files = find_target_files(config)

    matches: list[StringMatch] = []
    for index, path in enumerate(files, start=1):
        file_matches = scan_file(path, include_comments=config.include_comments)
        if config.suppress_localized:
            file_matches = [m for m in file_matches if m.literal_body not in localized]
        matches.extend(file_matches)
        if index % PROGRESS_INTERVAL == 0:
            logger.debug("Scanned %d/%d files", index, len(files))

    return ScanResult(matches=tuple(matches), files_scanned=len(files), localized_strings=localized)


__all__ = ["find_target_files", "is_excluded", "load_localized_strings", "scan"]
