from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping

from l10n_audit.arb import extract_keys, load_arb_file
from l10n_audit.config import ComparatorConfig


@dataclass(frozen=True)
class PartialKey:
    key: str
    present: tuple[str, ...]
    absent: tuple[str, ...]


def iter_key_sets(config: ComparatorConfig) -> Iterator[tuple[str, frozenset[str]]]:
    """Load each configured ARB file in order.

    Raises MissingResourceFile as soon as a configured file is absent, so
    nothing after it is read.
    """
    for lang, path in config.files:
        yield lang, extract_keys(load_arb_file(path))


def load_key_sets(config: ComparatorConfig) -> dict[str, frozenset[str]]:
    return dict(iter_key_sets(config))


@dataclass(frozen=True)
class KeySetComparison:
    languages: tuple[str, ...]
    key_sets: Mapping[str, frozenset[str]]
    union: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        union: set[str] = set()
        for lang in self.languages:
            union |= self.key_sets[lang]
        object.__setattr__(self, "union", frozenset(union))

    @classmethod
    def from_key_sets(cls, key_sets: Mapping[str, frozenset[str]]) -> "KeySetComparison":
        return cls(languages=tuple(key_sets), key_sets=dict(key_sets))

    def missing(self, lang: str) -> list[str]:
        return sorted(self.union - self.key_sets[lang])

    def unique(self, lang: str) -> list[str]:
        others: set[str] = set()
        for other, keys in self.key_sets.items():
            if other != lang:
                others |= keys
        return sorted(self.key_sets[lang] - others)

    def partial_keys(self) -> list[PartialKey]:
        """Keys that are not present in every configured language."""
        all_languages = set(self.languages)
        partial: list[PartialKey] = []
        for key in sorted(self.union):
            present = {lang for lang in self.languages if key in self.key_sets[lang]}
            if len(present) < len(self.languages):
                partial.append(
                    PartialKey(
                        key=key,
                        present=tuple(sorted(present)),
                        absent=tuple(sorted(all_languages - present)),
                    )
                )
        return partial

    @property
    def is_consistent(self) -> bool:
        return all(self.key_sets[lang] == self.union for lang in self.languages)


__all__ = ["KeySetComparison", "PartialKey", "iter_key_sets", "load_key_sets"]
