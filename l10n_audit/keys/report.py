from __future__ import annotations

from l10n_audit.keys.compare import KeySetComparison

RULE = "=" * 60


def format_key_count(lang: str, keys: frozenset[str]) -> str:
    return f"{lang.upper()}: {len(keys)} keys"


def _section(title: str) -> list[str]:
    return ["", RULE, title, RULE]


def render_report(comparison: KeySetComparison) -> str:
    """Render everything after the per-language key counts."""
    lines: list[str] = ["", RULE, f"Total keys: {len(comparison.union)}"]

    lines.extend(_section("Missing keys by language:"))
    for lang in comparison.languages:
        missing = comparison.missing(lang)
        if missing:
            lines.append("")
            lines.append(f"{lang.upper()} is missing {len(missing)} key(s):")
            lines.extend(f"  - {key}" for key in missing)
        else:
            lines.append("")
            lines.append(f"{lang.upper()}: no missing keys")

    lines.extend(_section("Keys present in only some languages:"))
    for partial in comparison.partial_keys():
        lines.append("")
        lines.append(f"'{partial.key}':")
        lines.append(f"  present in: {', '.join(lang.upper() for lang in partial.present)}")
        lines.append(f"  missing in: {', '.join(lang.upper() for lang in partial.absent)}")

    lines.extend(_section("Details:"))
    for lang in comparison.languages:
        unique = comparison.unique(lang)
        if unique:
            lines.append("")
            lines.append(f"{lang.upper()} unique keys ({len(unique)}):")
            lines.extend(f"  - {key}" for key in unique)

    return "\n".join(lines)


__all__ = ["format_key_count", "render_report"]
