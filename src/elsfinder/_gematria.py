"""Letter-value methods over a LetterGraph.

All methods normalize their input first, so vowel points, punctuation and
final forms are handled the same way the search does. Letters outside the
alphabet are ignored here; use ``LetterGraph.path_weight`` for the strict
variant that raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._graph import LetterGraph
    from ._normalizer import TextNormalizer

_MASTER_NUMBERS = frozenset({11, 22, 33})


def standard(graph: LetterGraph, normalizer: TextNormalizer, text: str) -> int:
    return graph.path_weight(normalizer.normalize_keyword(text))


def ordinal(graph: LetterGraph, normalizer: TextNormalizer, text: str) -> int:
    """Sum of alphabet positions (1-based, in load order)."""
    positions = {letter: i + 1 for i, letter in enumerate(graph.letters)}
    return sum(positions[ch] for ch in normalizer.normalize_keyword(text))


def reduced(value: int) -> int:
    """Repeated digit sum, stopping early on the master numbers 11, 22, 33."""
    if value in _MASTER_NUMBERS:
        return value
    total = value
    while total > 9:
        total = sum(int(d) for d in str(total))
        if total in _MASTER_NUMBERS:
            return total
    return total


def full_value(graph: LetterGraph, normalizer: TextNormalizer, text: str) -> int:
    """Weight of every letter spelled out in full (milui).

    A letter's full name is the letter itself followed by its decomposition.
    """
    total = 0
    for ch in normalizer.normalize_keyword(text):
        node = graph[ch]
        total += node.weight + graph.path_weight(node.decomposition)
    return total


def atbash(graph: LetterGraph, normalizer: TextNormalizer, text: str) -> str:
    """Mirror substitution: first letter <-> last, second <-> second to last."""
    letters = graph.letters
    mirror = dict(zip(letters, reversed(letters)))
    return "".join(mirror[ch] for ch in normalizer.normalize_keyword(text))


def atbash_value(graph: LetterGraph, normalizer: TextNormalizer, text: str) -> int:
    return graph.path_weight(atbash(graph, normalizer, text))
