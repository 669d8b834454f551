from .compare import KeySetComparison, PartialKey, iter_key_sets, load_key_sets
from .report import format_key_count, render_report

__all__ = [
    "KeySetComparison",
    "PartialKey",
    "format_key_count",
    "iter_key_sets",
    "load_key_sets",
    "render_report",
]
