"""Square-grid layout of a normalized letter stream for display."""

from __future__ import annotations

import math
from typing import Iterable


def grid_width(n_letters: int) -> int:
    """Column count of the smallest square grid holding ``n_letters``."""
    if n_letters <= 0:
        return 0
    return math.isqrt(n_letters - 1) + 1


def grid_path(positions: Iterable[int], width: int) -> list[tuple[int, int]]:
    """(row, col) of each normalized position in a grid ``width`` columns wide."""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return [divmod(p, width) for p in positions]
