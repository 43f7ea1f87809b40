"""Word/phrase lexicon with prefix and suffix lists (Aho-Corasick)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

import ahocorasick

if TYPE_CHECKING:
    from ._normalizer import TextNormalizer


class Lexicon:
    __slots__ = ("_words", "_prefixes", "_suffixes", "_ac", "_entries")

    def __init__(
        self,
        words: Iterable[str],
        prefixes: Iterable[str] = (),
        suffixes: Iterable[str] = (),
    ) -> None:
        entries = sorted({w for w in words if w})
        self._words = frozenset(entries)
        self._prefixes = frozenset(p for p in prefixes if p)
        self._suffixes = frozenset(s for s in suffixes if s)
        self._entries = entries
        self._ac: ahocorasick.Automaton | None = None
        if entries:
            ac = ahocorasick.Automaton()
            for idx, entry in enumerate(entries):
                ac.add_word(entry, idx)
            ac.make_automaton()
            self._ac = ac

    @classmethod
    def from_raw(cls, raw: dict[str, Any], normalizer: TextNormalizer) -> Lexicon:
        """Build from loaded data, normalizing every entry to letters only.

        Phrases lose their spaces, since ELS letters carry no word breaks.
        """
        norm = normalizer.normalize_keyword
        return cls(
            words=(norm(w) for w in raw.get("words", [])),
            prefixes=(norm(p) for p in raw.get("prefixes", [])),
            suffixes=(norm(s) for s in raw.get("suffixes", [])),
        )

    def __contains__(self, letters: object) -> bool:
        return letters in self._words

    def __len__(self) -> int:
        return len(self._words)

    @property
    def prefixes(self) -> frozenset[str]:
        return self._prefixes

    @property
    def suffixes(self) -> frozenset[str]:
        return self._suffixes

    def scan(self, letters: str) -> list[tuple[int, int, str]]:
        """All lexicon entries inside ``letters`` as (start, end, entry)."""
        if self._ac is None:
            return []
        found: list[tuple[int, int, str]] = []
        for end_inclusive, idx in self._ac.iter(letters):
            entry = self._entries[idx]
            end = end_inclusive + 1
            found.append((end - len(entry), end, entry))
        found.sort(key=lambda m: (m[0], -(m[1] - m[0])))
        return found

    def covering(self, letters: str, start: int, end: int) -> list[str]:
        """Entries in ``letters`` whose span contains ``[start, end)``."""
        return [
            entry for s, e, entry in self.scan(letters) if s <= start and e >= end
        ]

    def has_prefix(self, before: str) -> bool:
        """True if some tail of ``before`` is a known prefix."""
        return any(before[i:] in self._prefixes for i in range(len(before)))

    def has_suffix(self, after: str) -> bool:
        """True if some head of ``after`` is a known suffix."""
        return any(after[:i] in self._suffixes for i in range(1, len(after) + 1))
