from __future__ import annotations

import json
from pathlib import Path

from l10n_audit.hardcoded.models import ScanResult, StringMatch

RULE_WIDTH = 60
SUCCESS_MESSAGE = "No hardcoded Japanese strings found."


def group_by_file(matches: tuple[StringMatch, ...], root: str | Path) -> dict[str, list[StringMatch]]:
    """Group matches by relative path, keeping first-seen file order."""
    grouped: dict[str, list[StringMatch]] = {}
    for match in matches:
        grouped.setdefault(match.relative_path(root), []).append(match)
    return grouped


def _match_label(match: StringMatch, result: ScanResult) -> str:
    markers = ""
    if match.is_in_comment:
        markers += " [in comment]"
    if result.is_localized(match):
        markers += " [in ARB]"
    return f"  line {match.line_number}{markers}: {match.matched_text}"


def render_report(result: ScanResult, root: str | Path) -> str:
    if result.passed:
        return SUCCESS_MESSAGE

    lines: list[str] = [f"Found {result.total} Japanese string(s)", ""]
    for file_path, file_matches in group_by_file(result.matches, root).items():
        lines.append(f"{file_path} ({len(file_matches)})")
        lines.append("-" * RULE_WIDTH)
        for match in file_matches:
            lines.append(_match_label(match, result))
            lines.append(f"    {match.content.strip()}")
            lines.append("")
        lines.append("")

    lines.append("Summary")
    lines.append("=" * RULE_WIDTH)
    lines.append(f"Hardcoded strings detected: {result.total}")
    duplicated = sum(1 for match in result.matches if result.is_localized(match))
    if duplicated:
        lines.append(f"Already present in ARB files: {duplicated}")
    return "\n".join(lines)


def render_failure_notice(result: ScanResult) -> str:
    return (
        f"{result.total} hardcoded Japanese string(s) detected.\n"
        "Replace the locations above with l10n keys."
    )


def render_json(result: ScanResult, root: str | Path) -> str:
    payload = {
        "total": result.total,
        "files_scanned": result.files_scanned,
        "matches": [
            {**match.to_dict(root), "in_arb": result.is_localized(match)}
            for match in result.matches
        ],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


__all__ = ["group_by_file", "render_failure_notice", "render_json", "render_report"]
