"""Command-line entry points for the localization audit tools."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from l10n_audit.config import (
    ComparatorConfig,
    default_comparator_config,
    default_detector_config,
    parse_language_pair,
)
from l10n_audit.errors import MalformedResourceFile, MissingResourceFile
from l10n_audit.hardcoded import render_failure_notice, render_json, render_report, scan
from l10n_audit.keys import KeySetComparison, format_key_count, iter_key_sets
from l10n_audit.keys import render_report as render_keys_report
from l10n_audit.logging import setup_logging

logger = logging.getLogger(__name__)


def _add_verbosity(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output (progress, exclusions) to stderr",
    )


def build_detector_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="find-japanese-hardcoded-strings",
        description="Detect Japanese string literals hardcoded in Dart sources.",
    )
    parser.add_argument(
        "directories",
        nargs="*",
        help="Directories to scan, relative to the project root (replaces the default list)",
    )
    parser.add_argument("--root", type=Path, default=None, help="Project root (default: cwd)")
    parser.add_argument(
        "--include-comments",
        action="store_true",
        help="Also report Japanese text inside // comments",
    )
    parser.add_argument(
        "--suppress-localized",
        action="store_true",
        help="Do not report literals whose text already exists as an ARB value",
    )
    parser.add_argument("--json", action="store_true", help="Emit a JSON report")
    _add_verbosity(parser)
    return parser


def find_hardcoded_main(argv: Sequence[str] | None = None) -> int:
    args = build_detector_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    config = default_detector_config().with_targets(args.directories)
    overrides: dict[str, object] = {}
    if args.root is not None:
        overrides["project_root"] = args.root
    if args.include_comments:
        overrides["include_comments"] = True
    if args.suppress_localized:
        overrides["suppress_localized"] = True
    if overrides:
        config = replace(config, **overrides)

    try:
        result = scan(config)
    except OSError:
        logger.exception("Scan aborted")
        return 1

    if args.json:
        print(render_json(result, config.project_root))
        return 0 if result.passed else 1

    print(f"Target directories: {', '.join(config.target_directories)}")
    print(f"Existing l10n strings loaded: {len(result.localized_strings)}")
    print(f"Target Dart files: {result.files_scanned}")
    print()
    print(render_report(result, config.project_root))

    if result.passed:
        return 0
    print(file=sys.stderr)
    print(render_failure_notice(result), file=sys.stderr)
    return 1


def build_keys_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="check-arb-keys",
        description="Compare the key sets of per-language ARB files.",
    )
    parser.add_argument(
        "--lang",
        dest="pairs",
        action="append",
        default=[],
        metavar="TAG=PATH",
        help="Language tag and ARB path; repeat for each language (order is kept)",
    )
    parser.add_argument("--arb-dir", default=None, help="Directory holding app_<lang>.arb files")
    parser.add_argument("--langs", nargs="+", default=None, help="Language tags used with --arb-dir")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any language is missing keys",
    )
    _add_verbosity(parser)
    return parser


def _comparator_config(args: argparse.Namespace) -> ComparatorConfig:
    if args.pairs and (args.arb_dir or args.langs):
        raise ValueError("--lang cannot be combined with --arb-dir/--langs")
    if args.pairs:
        return ComparatorConfig(files=tuple(parse_language_pair(raw) for raw in args.pairs))
    default = default_comparator_config()
    if args.arb_dir or args.langs:
        directory = args.arb_dir or default.files[0][1].parent
        return ComparatorConfig.from_directory(directory, args.langs or default.languages)
    return default


def check_arb_keys_main(argv: Sequence[str] | None = None) -> int:
    parser = build_keys_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    try:
        config = _comparator_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    key_sets: dict[str, frozenset[str]] = {}
    try:
        for lang, keys in iter_key_sets(config):
            key_sets[lang] = keys
            print(format_key_count(lang, keys))
    except (MissingResourceFile, MalformedResourceFile) as exc:
        logger.error("%s", exc)
        return 1
    except OSError:
        logger.exception("Failed to load ARB files")
        return 1

    comparison = KeySetComparison.from_key_sets(key_sets)
    print(render_keys_report(comparison))

    if args.strict and not comparison.is_consistent:
        return 1
    return 0


__all__ = [
    "build_detector_parser",
    "build_keys_parser",
    "check_arb_keys_main",
    "find_hardcoded_main",
]
