"""SignificanceScorer: tag matches and rank them by weighted tag score."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Mapping

from ._errors import IndexMappingError, UnknownSymbolError
from ._sweep import to_normalized
from ._types import (
    Direction,
    Match,
    NormalizedText,
    Reason,
    ScoringConstants,
    SignificanceReport,
    SweepResult,
)

if TYPE_CHECKING:
    from ._graph import LetterGraph
    from ._lexicon import Lexicon
    from ._types import Island

logger = logging.getLogger(__name__)


def _report_order(report: SignificanceReport) -> tuple[int, int, int, int]:
    m = report.match
    return (-report.score, m.skip, m.start, m.direction is Direction.BACKWARD)


class SignificanceScorer:
    """Attach significance tags to matches using the letter graph and lexicon."""

    __slots__ = (
        "_graph", "_lexicon", "_constants",
        "_self_loops", "_cycle_letters", "_hub", "_island_of",
    )

    def __init__(
        self,
        graph: LetterGraph,
        lexicon: Lexicon | None = None,
        constants: ScoringConstants | None = None,
    ) -> None:
        self._graph = graph
        self._lexicon = lexicon
        self._constants = constants or ScoringConstants()
        self._self_loops = graph.self_loops()
        self._cycle_letters = frozenset().union(*graph.two_cycles())
        self._hub = graph.hub()
        self._island_of: dict[str, Island] = {
            letter: island
            for island in graph.partition()
            for letter in island.members
        }

    @property
    def constants(self) -> ScoringConstants:
        return self._constants

    # -- Public scoring API --

    def score(
        self,
        matches: SweepResult | Mapping[int, list[Match]],
        keyword: str,
        normalized: NormalizedText,
    ) -> list[SignificanceReport]:
        """Tag and rank every match.

        Args:
            matches: Sweep output, or a mapping skip -> matches.
            keyword: The normalized keyword that was searched.
            normalized: The normalized text the matches were found in.

        Returns:
            Reports with a positive score, ordered by score descending, then
            skip, then first original position, then direction.
        """
        by_skip = matches.by_skip if isinstance(matches, SweepResult) else matches
        try:
            keyword_weight: int | None = self._graph.path_weight(keyword)
        except UnknownSymbolError as exc:
            logger.debug("Keyword weight unavailable, skipping weight tags: %s", exc)
            keyword_weight = None

        reports: list[SignificanceReport] = []
        for skip in sorted(by_skip):
            group = by_skip[skip]
            clustered = self._clustered(group)
            for i, match in enumerate(group):
                try:
                    reasons = self._reasons(
                        match, normalized, keyword_weight,
                        group_size=len(group), clustered=i in clustered,
                    )
                except IndexMappingError as exc:
                    logger.error("Dropping match %r: %s", match, exc)
                    continue
                score = sum(self._constants.weight_of(r) for r in reasons)
                if score <= 0:
                    continue
                reports.append(SignificanceReport(
                    match=match, reasons=frozenset(reasons), score=score,
                ))

        reports.sort(key=_report_order)
        return reports

    # -- Internal methods --

    def _clustered(self, group: list[Match]) -> set[int]:
        """Indices of matches whose start lies near another match's start."""
        distance = self._constants.cluster_distance
        order = sorted(range(len(group)), key=lambda i: group[i].start)
        out: set[int] = set()
        for a, b in zip(order, order[1:]):
            if group[b].start - group[a].start < distance:
                out.add(a)
                out.add(b)
        return out

    def _context(self, positions: list[int], letters: str) -> tuple[str, str]:
        """Text letters just before the first and just after the last matched letter."""
        reach = self._constants.context_letters
        first, last = min(positions), max(positions)
        return letters[max(0, first - reach):first], letters[last + 1:last + 1 + reach]

    def _reasons(
        self,
        match: Match,
        normalized: NormalizedText,
        keyword_weight: int | None,
        *,
        group_size: int,
        clustered: bool,
    ) -> set[Reason]:
        reasons: set[Reason] = set()
        positions = to_normalized(normalized.index_map, match.original_positions)
        text = normalized.letters
        core = "".join(text[p] for p in positions)
        letter_set = set(core)

        # Numeric coincidences
        if keyword_weight is not None:
            if match.skip == keyword_weight:
                reasons.add(Reason.SKIP_EQUALS_KEYWORD_WEIGHT)
            if self._graph.path_weight(core) == keyword_weight:
                reasons.add(Reason.LETTERS_WEIGHT_EQUALS_KEYWORD_WEIGHT)

        # Frequency and clustering
        if group_size >= self._constants.high_frequency:
            reasons.add(Reason.HIGH_FREQUENCY_SKIP)
        if clustered:
            reasons.add(Reason.CLUSTERED)

        # Island membership
        counts = Counter(
            self._island_of[ch] for ch in core if ch in self._island_of
        )
        if counts:
            island, count = counts.most_common(1)[0]
            if count == len(core):
                reasons.add(Reason.SINGLE_ISLAND)
            elif count * 2 > len(core):
                reasons.add(Reason.ISLAND_MAJORITY)
            if count * 2 > len(core) and match.skip == island.combined_weight:
                reasons.add(Reason.SKIP_EQUALS_ISLAND_WEIGHT)

        # Loops and hub
        if letter_set & self._self_loops:
            reasons.add(Reason.SELF_LOOP_LETTER)
        if letter_set & self._cycle_letters:
            reasons.add(Reason.CYCLE_LETTER)
        if self._hub is not None and self._hub in letter_set:
            reasons.add(Reason.HUB_LETTER)

        # Lexicon
        if self._lexicon is not None:
            before, after = self._context(positions, text)
            extended = before + core + after
            if self._lexicon.covering(extended, len(before), len(before) + len(core)):
                reasons.add(Reason.LEXICON_ENTRY)
            if before and self._lexicon.has_prefix(before):
                reasons.add(Reason.KNOWN_PREFIX)
            if after and self._lexicon.has_suffix(after):
                reasons.add(Reason.KNOWN_SUFFIX)

        return reasons
