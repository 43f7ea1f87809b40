"""Letters-only text stream with a map back to original positions."""

from __future__ import annotations

from typing import Iterable, Mapping

from ._types import NormalizedText


class TextNormalizer:
    """Keep alphabet letters only, remembering where each one came from.

    Each character is case-folded and passed through the alias table
    (final forms to base letters) before the alphabet check, so the
    normalized stream only ever holds graph keys.
    """

    __slots__ = ("_alphabet", "_aliases")

    def __init__(
        self,
        alphabet: Iterable[str],
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        self._alphabet = frozenset(ch.casefold() for ch in alphabet)
        self._aliases = {
            k.casefold(): v.casefold() for k, v in (aliases or {}).items()
        }

    @property
    def alphabet(self) -> frozenset[str]:
        return self._alphabet

    @property
    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def fold(self, ch: str) -> str | None:
        """Return the alphabet letter ``ch`` stands for, or None."""
        c = ch.casefold()
        c = self._aliases.get(c, c)
        return c if c in self._alphabet else None

    def normalize(self, text: str) -> NormalizedText:
        letters: list[str] = []
        index_map: list[int] = []
        aliases = self._aliases
        alphabet = self._alphabet
        for pos, ch in enumerate(text):
            c = ch.casefold()
            c = aliases.get(c, c)
            if c in alphabet:
                letters.append(c)
                index_map.append(pos)
        return NormalizedText(
            source=text, letters="".join(letters), index_map=tuple(index_map),
        )

    def normalize_keyword(self, keyword: str) -> str:
        return self.normalize(keyword).letters
