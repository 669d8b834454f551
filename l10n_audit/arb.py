from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from l10n_audit.config import ARB_LOCALE_KEY, ARB_METADATA_PREFIX
from l10n_audit.errors import MalformedResourceFile, MissingResourceFile

logger = logging.getLogger(__name__)


def load_arb_file(path: str | Path) -> dict[str, Any]:
    """Read an ARB file and return its top-level JSON object."""
    arb_path = Path(path)
    if not arb_path.is_file():
        raise MissingResourceFile(arb_path)

    try:
        with open(arb_path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedResourceFile(arb_path, str(exc)) from exc

    if not isinstance(data, dict):
        raise MalformedResourceFile(arb_path, f"expected a JSON object, got {type(data).__name__}")
    return data


def extract_keys(arb_data: Mapping[str, Any]) -> frozenset[str]:
    """Return the translatable keys, skipping ``@`` metadata and ``@@locale``."""
    return frozenset(
        key
        for key in arb_data
        if not key.startswith(ARB_METADATA_PREFIX) and key != ARB_LOCALE_KEY
    )


def collect_string_values(
    directory: str | Path,
    *,
    extension: str = ".arb",
    predicate: Callable[[str], bool] | None = None,
) -> set[str]:
    """Collect string values from every ARB file directly under ``directory``.

    Files that cannot be parsed are skipped with a warning.
    """
    strings: set[str] = set()
    base = Path(directory)
    if not base.is_dir():
        return strings

    for arb_path in sorted(base.iterdir()):
        if not arb_path.is_file() or arb_path.suffix != extension:
            continue
        try:
            data = load_arb_file(arb_path)
        except (MalformedResourceFile, OSError) as exc:
            logger.warning("Skipping ARB file %s: %s", arb_path, exc)
            continue

        for value in data.values():
            if isinstance(value, str) and (predicate is None or predicate(value)):
                strings.add(value)
    return strings


__all__ = ["collect_string_values", "extract_keys", "load_arb_file"]
