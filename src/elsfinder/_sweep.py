"""Skip sweep: run the searcher over a range of skips and both directions."""

from __future__ import annotations

import logging
import time
from bisect import bisect_left
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from ._errors import EmptyKeywordError, IndexMappingError, InvalidSkipError
from ._searcher import search
from ._types import (
    BOTH_DIRECTIONS,
    Direction,
    Match,
    NormalizedText,
    SweepBudget,
    SweepResult,
)

logger = logging.getLogger(__name__)


def to_original(index_map: Sequence[int], sequence: Iterable[int]) -> tuple[int, ...]:
    """Translate normalized indices to original-text positions.

    Raises:
        IndexMappingError: If an index has no entry in ``index_map``.
    """
    out: list[int] = []
    n = len(index_map)
    for i in sequence:
        if not 0 <= i < n:
            raise IndexMappingError(
                f"normalized index {i} outside index map of length {n}"
            )
        out.append(index_map[i])
    return tuple(out)


def to_normalized(index_map: Sequence[int], positions: Iterable[int]) -> list[int]:
    """Inverse of ``to_original``; ``index_map`` is strictly increasing.

    Raises:
        IndexMappingError: If a position is not a kept letter of the text.
    """
    out: list[int] = []
    for pos in positions:
        i = bisect_left(index_map, pos)
        if i >= len(index_map) or index_map[i] != pos:
            raise IndexMappingError(
                f"original position {pos} is not a letter of the text"
            )
        out.append(i)
    return out


def search_skip(
    normalized: NormalizedText,
    keyword: str,
    skip: int,
    directions: Sequence[Direction] = BOTH_DIRECTIONS,
) -> list[Match]:
    """All matches for one skip, directions merged in the order given.

    A sequence whose indices do not resolve to the original text means the
    source is corrupt; it is logged and dropped rather than raised.
    """
    matches: list[Match] = []
    for direction in directions:
        for seq in search(normalized.letters, keyword, skip, direction):
            try:
                positions = to_original(normalized.index_map, seq)
            except IndexMappingError as exc:
                logger.error(
                    "Dropping %s match for %r at skip %d: %s",
                    direction.value, keyword, skip, exc,
                )
                continue
            matches.append(Match(
                keyword=keyword,
                skip=skip,
                direction=direction,
                original_positions=positions,
            ))
    return matches


class _BudgetClock:
    __slots__ = ("_max_matches", "_deadline")

    def __init__(self, budget: SweepBudget | None) -> None:
        self._max_matches = budget.max_matches if budget else None
        self._deadline = (
            time.monotonic() + budget.time_limit
            if budget and budget.time_limit is not None else None
        )

    def exhausted(self, n_matches: int) -> bool:
        if self._max_matches is not None and n_matches >= self._max_matches:
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return True
        return False


def _skip_values(
    n_letters: int, max_skip: int | None, skips: Iterable[int] | None,
) -> list[int]:
    if skips is not None:
        values = sorted(set(skips))
        for s in values:
            if s <= 0:
                raise InvalidSkipError(f"sweep skips must be positive, got {s}")
        return values
    if max_skip is None:
        max_skip = n_letters // 2
    return list(range(1, max_skip + 1))


def sweep(
    normalized: NormalizedText,
    keyword: str,
    max_skip: int | None = None,
    *,
    directions: Sequence[Direction] = BOTH_DIRECTIONS,
    skips: Iterable[int] | None = None,
    budget: SweepBudget | None = None,
    workers: int | None = None,
) -> SweepResult:
    """Search every skip from 1 to ``max_skip`` in each direction.

    Args:
        normalized: Output of ``TextNormalizer.normalize``.
        keyword: Normalized keyword.
        max_skip: Largest skip tried. Defaults to half the letter count.
        directions: Directions searched for each skip.
        skips: Explicit positive skip values, replacing the 1..max_skip range.
        budget: Match-count / time budget, checked between skips. When it
            runs out the partial result is returned with ``truncated=True``.
        workers: Thread count. Above 1 the skips are searched concurrently;
            results are still merged in skip order.

    Raises:
        EmptyKeywordError: If ``keyword`` is empty.
        InvalidSkipError: If ``skips`` holds a value below 1.
    """
    if not keyword:
        raise EmptyKeywordError("keyword is empty")
    values = _skip_values(len(normalized), max_skip, skips)
    directions = tuple(Direction(d) for d in directions)
    clock = _BudgetClock(budget)
    by_skip: dict[int, list[Match]] = {}
    n_found = 0
    truncated = False

    logger.debug(
        "Sweeping %d skips over %d letters for %r", len(values), len(normalized), keyword,
    )

    if workers is not None and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                (skip, executor.submit(search_skip, normalized, keyword, skip, directions))
                for skip in values
            ]
            for skip, future in futures:
                if clock.exhausted(n_found):
                    truncated = True
                    break
                found = future.result()
                if found:
                    by_skip[skip] = found
                    n_found += len(found)
            if truncated:
                for _, future in futures:
                    future.cancel()
    else:
        for skip in values:
            if clock.exhausted(n_found):
                truncated = True
                break
            found = search_skip(normalized, keyword, skip, directions)
            if found:
                by_skip[skip] = found
                n_found += len(found)

    if truncated:
        logger.info(
            "Sweep for %r stopped early after %d matches in %d skips",
            keyword, n_found, len(by_skip),
        )

    return SweepResult(
        by_skip=by_skip,
        max_skip=values[-1] if values else 0,
        truncated=truncated,
    )
