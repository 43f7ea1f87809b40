"""ElsEngine: normalizer, letter graph, sweep and scorer behind one API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import _gematria
from ._errors import InvalidSkipError
from ._grid import grid_path, grid_width
from ._scorer import SignificanceScorer
from ._searcher import resolve_skip
from ._sweep import sweep, to_normalized
from ._types import (
    BOTH_DIRECTIONS,
    Direction,
    Match,
    NormalizedText,
    ScoringConstants,
    SignificanceReport,
    SweepBudget,
    SweepResult,
)

if TYPE_CHECKING:
    from ._graph import LetterGraph
    from ._lexicon import Lexicon
    from ._normalizer import TextNormalizer

logger = logging.getLogger(__name__)


class ElsEngine:
    """Main search engine. Holds the loaded alphabet and exposes the public API."""

    __slots__ = ("_graph", "_normalizer", "_lexicon", "_scorer")

    def __init__(
        self,
        graph: LetterGraph,
        normalizer: TextNormalizer,
        lexicon: Lexicon | None = None,
        constants: ScoringConstants | None = None,
    ) -> None:
        self._graph = graph
        self._normalizer = normalizer
        self._lexicon = lexicon
        self._scorer = SignificanceScorer(graph, lexicon, constants)

    @property
    def graph(self) -> LetterGraph:
        return self._graph

    @property
    def normalizer(self) -> TextNormalizer:
        return self._normalizer

    @property
    def lexicon(self) -> Lexicon | None:
        return self._lexicon

    @property
    def constants(self) -> ScoringConstants:
        return self._scorer.constants

    def with_constants(self, constants: ScoringConstants) -> ElsEngine:
        """Copy of this engine scoring with different thresholds and weights."""
        return ElsEngine(self._graph, self._normalizer, self._lexicon, constants)

    # -- Text and values --

    def normalize(self, text: str) -> NormalizedText:
        return self._normalizer.normalize(text)

    def weigh(self, text: str) -> int:
        """Standard gematria of ``text``; non-letters are ignored."""
        return _gematria.standard(self._graph, self._normalizer, text)

    def ordinal(self, text: str) -> int:
        return _gematria.ordinal(self._graph, self._normalizer, text)

    def reduced(self, text: str) -> int:
        return _gematria.reduced(self.weigh(text))

    def full_value(self, text: str) -> int:
        return _gematria.full_value(self._graph, self._normalizer, text)

    def atbash(self, text: str) -> str:
        return _gematria.atbash(self._graph, self._normalizer, text)

    def atbash_value(self, text: str) -> int:
        return _gematria.atbash_value(self._graph, self._normalizer, text)

    # -- Search API --

    def sweep(
        self,
        text: str,
        keyword: str,
        *,
        direction: Direction | str | None = None,
        skip: int | None = None,
        seed: str | None = None,
        max_skip: int | None = None,
        budget: SweepBudget | None = None,
        workers: int | None = None,
    ) -> SweepResult:
        """Find every ELS of ``keyword`` in ``text``, grouped by skip.

        Args:
            text: Raw text; non-letters are stripped before searching.
            keyword: Raw keyword, normalized the same way.
            direction: Only this direction. None searches both.
            skip: Only this skip. A negative skip reads the other way.
            seed: Contextual seed; its weight becomes the only skip.
            max_skip: Upper bound of the sweep when neither skip nor seed
                is given. Defaults to half the letter count.
            budget: Match-count / time budget for early stopping.
            workers: Thread count for the sweep.

        Raises:
            InvalidSkipError: If ``skip`` is zero.
            ValueError: If both ``skip`` and ``seed`` are given.
        """
        _, _, result = self._run(
            text, keyword, direction=direction, skip=skip, seed=seed,
            max_skip=max_skip, budget=budget, workers=workers,
        )
        return result

    def find(self, text: str, keyword: str, **kwargs) -> list[Match]:
        """Flat list of matches, ordered by skip. Takes the same options as sweep."""
        return self.sweep(text, keyword, **kwargs).matches

    def analyze(self, text: str, keyword: str, **kwargs) -> list[SignificanceReport]:
        """Matches ranked by significance. Takes the same options as sweep."""
        normalized, norm_keyword, result = self._run(text, keyword, **kwargs)
        if not result.by_skip:
            return []
        return self._scorer.score(result, norm_keyword, normalized)

    def layout(
        self, normalized: NormalizedText, match: Match,
    ) -> list[tuple[int, int]]:
        """(row, col) of each match letter in a square grid of the letter stream."""
        positions = to_normalized(normalized.index_map, match.original_positions)
        return grid_path(positions, grid_width(len(normalized)))

    # -- Internal methods --

    def _run(
        self,
        text: str,
        keyword: str,
        *,
        direction: Direction | str | None = None,
        skip: int | None = None,
        seed: str | None = None,
        max_skip: int | None = None,
        budget: SweepBudget | None = None,
        workers: int | None = None,
    ) -> tuple[NormalizedText, str, SweepResult]:
        if skip is not None and seed is not None:
            raise ValueError("pass either skip or seed, not both")

        directions = BOTH_DIRECTIONS if direction is None else (Direction(direction),)
        skips: list[int] | None = None
        if skip is not None:
            if skip == 0:
                raise InvalidSkipError("skip must be nonzero")
            if direction is None:
                skips = [abs(skip)]
            else:
                magnitude, resolved = resolve_skip(skip, directions[0])
                skips, directions = [magnitude], (resolved,)

        normalized = self._normalizer.normalize(text)
        empty = SweepResult(by_skip={}, max_skip=0)

        norm_keyword = self._normalizer.normalize_keyword(keyword)
        if not norm_keyword:
            logger.warning("Keyword %r has no letters after normalization", keyword)
            return normalized, norm_keyword, empty

        if seed is not None:
            seed_weight = self.weigh(seed)
            if seed_weight == 0:
                logger.warning("Seed %r weighs 0; nothing to search", seed)
                return normalized, norm_keyword, empty
            skips = [seed_weight]

        result = sweep(
            normalized, norm_keyword, max_skip,
            directions=directions, skips=skips, budget=budget, workers=workers,
        )
        return normalized, norm_keyword, result
