"""elsfinder: equidistant letter sequence search ranked over a letter graph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import (
    DuplicateSymbolError,
    ElsChecksumError,
    ElsDataError,
    ElsError,
    ElsVersionError,
    EmptyKeywordError,
    IndexMappingError,
    InvalidSkipError,
    UnknownSymbolError,
)
from ._graph import LetterGraph
from ._grid import grid_path, grid_width
from ._lexicon import Lexicon
from ._normalizer import TextNormalizer
from ._searcher import search
from ._sweep import sweep
from ._types import (
    BOTH_DIRECTIONS,
    TIER_WEIGHTS,
    Direction,
    Island,
    IslandName,
    LetterSymbol,
    Match,
    NormalizedText,
    Order,
    Reason,
    ScoringConstants,
    SignificanceReport,
    SweepBudget,
    SweepResult,
    Tier,
)

if TYPE_CHECKING:
    from pathlib import Path

    from ._engine import ElsEngine

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "BOTH_DIRECTIONS",
    "Direction",
    "DuplicateSymbolError",
    "ElsChecksumError",
    "ElsDataError",
    "ElsEngine",
    "ElsError",
    "ElsVersionError",
    "EmptyKeywordError",
    "IndexMappingError",
    "InvalidSkipError",
    "Island",
    "IslandName",
    "LetterGraph",
    "LetterSymbol",
    "Lexicon",
    "Match",
    "NormalizedText",
    "Order",
    "Reason",
    "ScoringConstants",
    "SignificanceReport",
    "SignificanceScorer",
    "SweepBudget",
    "SweepResult",
    "TextNormalizer",
    "Tier",
    "TIER_WEIGHTS",
    "UnknownSymbolError",
    "grid_path",
    "grid_width",
    "search",
    "sweep",
]


def load(data_dir: Path | str | None = None) -> "ElsEngine":
    """Load data and return a ready-to-use ElsEngine.

    Args:
        data_dir: Path to data directory. If None, uses the directory named by
            ``ELSFINDER_DATA_DIR`` or else the bundled package data.
    """
    from ._engine import ElsEngine
    from ._loader import load_data

    data = load_data(data_dir)
    graph = LetterGraph.load(data["letters"], data["islands"])
    normalizer = TextNormalizer(graph.letters, data["aliases"])
    return ElsEngine(
        graph=graph,
        normalizer=normalizer,
        lexicon=Lexicon.from_raw(data["lexicon"], normalizer),
        constants=data["constants"],
    )


# Deferred import so the engine and scorer are available as package
# attributes without circular import issues at module load time.
def __getattr__(name: str):
    if name == "ElsEngine":
        from ._engine import ElsEngine
        return ElsEngine
    if name == "SignificanceScorer":
        from ._scorer import SignificanceScorer
        return SignificanceScorer
    raise AttributeError(f"module 'elsfinder' has no attribute {name!r}")
