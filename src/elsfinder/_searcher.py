"""Single-skip equidistant letter sequence search."""

from __future__ import annotations

from ._errors import EmptyKeywordError, InvalidSkipError
from ._types import Direction


def resolve_skip(skip: int, direction: Direction | str) -> tuple[int, Direction]:
    """Split a signed skip into (magnitude, direction).

    A negative skip reads in the opposite direction.

    Raises:
        InvalidSkipError: If ``skip`` is zero.
    """
    direction = Direction(direction)
    if skip == 0:
        raise InvalidSkipError("skip must be nonzero")
    if skip < 0:
        return -skip, direction.opposite
    return skip, direction


def search(
    letters: str,
    keyword: str,
    skip: int,
    direction: Direction | str = Direction.FORWARD,
) -> list[list[int]]:
    """Find every start from which reading each ``skip``-th letter spells ``keyword``.

    Direction only picks the origin and the scan order of start positions:
    forward scans left to right, backward treats the right end as the origin
    and scans right to left. From every start the letters are read at
    ``i, i + skip, i + 2*skip, ...``, so a backward search yields the forward
    sequences in reverse start order.

    Both ``letters`` and ``keyword`` must already be normalized. Returned
    sequences are normalized indices in keyword order; translating them to
    original-text positions is up to the caller.

    Raises:
        InvalidSkipError: If ``skip`` is zero.
        EmptyKeywordError: If ``keyword`` is empty.
    """
    step, direction = resolve_skip(skip, direction)
    if not keyword:
        raise EmptyKeywordError("keyword is empty")

    n = len(letters)
    k = len(keyword)
    span = (k - 1) * step
    first = keyword[0]
    found: list[list[int]] = []

    # starts past n - 1 - span can never fit
    if direction is Direction.FORWARD:
        starts = range(0, n - span)
    else:
        starts = range(n - span - 1, -1, -1)

    for i in starts:
        if letters[i] != first:
            continue
        for j in range(1, k):
            if letters[i + j * step] != keyword[j]:
                break
        else:
            found.append([i + j * step for j in range(k)])

    return found
