"""Data structures for elsfinder."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


class Direction(str, enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def opposite(self) -> Direction:
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD


BOTH_DIRECTIONS: tuple[Direction, ...] = (Direction.FORWARD, Direction.BACKWARD)


class Order(str, enum.Enum):
    DEPTH_FIRST = "depth-first"
    BREADTH_FIRST = "breadth-first"


class IslandName(str, enum.Enum):
    PRIMARY_CHAIN = "Primary Chain"
    ALEPH_PEY_LOOP = "Aleph-Pey Loop"
    RESH_SHIN_ISLAND = "Resh-Shin Island"
    SAMEKH_KAF_ISLAND = "Samekh-Kaf Island"
    ISOLATED_LETTERS = "Isolated Letters"


class Tier(str, enum.Enum):
    TIER_1 = "Tier 1"
    TIER_2 = "Tier 2"
    TIER_3 = "Tier 3"
    TIER_4 = "Tier 4"
    TIER_5 = "Tier 5"


# combined island weight -> tier
TIER_WEIGHTS: dict[int, Tier] = {
    547: Tier.TIER_1,
    500: Tier.TIER_2,
    287: Tier.TIER_3,
    81: Tier.TIER_4,
    80: Tier.TIER_5,
}


class Reason(str, enum.Enum):
    """Significance tags attached to a match."""

    SKIP_EQUALS_KEYWORD_WEIGHT = "skip-equals-keyword-weight"
    LETTERS_WEIGHT_EQUALS_KEYWORD_WEIGHT = "letters-weight-equals-keyword-weight"
    HIGH_FREQUENCY_SKIP = "high-frequency-skip"
    CLUSTERED = "clustered"
    SINGLE_ISLAND = "single-island"
    ISLAND_MAJORITY = "island-majority"
    SKIP_EQUALS_ISLAND_WEIGHT = "skip-equals-island-weight"
    SELF_LOOP_LETTER = "self-loop-letter"
    CYCLE_LETTER = "cycle-letter"
    HUB_LETTER = "hub-letter"
    LEXICON_ENTRY = "lexicon-entry"
    KNOWN_PREFIX = "known-prefix"
    KNOWN_SUFFIX = "known-suffix"


@dataclass(slots=True, frozen=True)
class LetterSymbol:
    symbol: str
    weight: int                      # standard gematria value
    decomposition: tuple[str, ...]   # hidden spelling, may contain symbol itself


@dataclass(slots=True, frozen=True)
class Island:
    members: frozenset[str]
    combined_weight: int
    name: IslandName | None = None   # set only for curated islands


@dataclass(slots=True, frozen=True)
class NormalizedText:
    source: str
    letters: str
    index_map: tuple[int, ...]   # letters[i] == fold(source[index_map[i]])

    def __len__(self) -> int:
        return len(self.letters)


@dataclass(slots=True, frozen=True)
class Match:
    keyword: str
    skip: int
    direction: Direction
    original_positions: tuple[int, ...]   # in keyword letter order

    @property
    def start(self) -> int:
        return self.original_positions[0]


@dataclass(slots=True, frozen=True)
class SweepBudget:
    max_matches: int | None = None
    time_limit: float | None = None   # seconds


@dataclass(slots=True, frozen=True)
class SweepResult:
    by_skip: dict[int, list[Match]]
    max_skip: int
    truncated: bool = False

    @property
    def matches(self) -> list[Match]:
        return [m for skip in sorted(self.by_skip) for m in self.by_skip[skip]]

    def __len__(self) -> int:
        return sum(len(v) for v in self.by_skip.values())


@dataclass(slots=True, frozen=True)
class SignificanceReport:
    match: Match
    reasons: frozenset[Reason]
    score: int


@dataclass(slots=True, frozen=True)
class ScoringConstants:
    high_frequency: int = 3
    cluster_distance: int = 100
    context_letters: int = 2
    weights: dict[Reason, int] = field(
        default_factory=lambda: {r: 1 for r in Reason}
    )

    def weight_of(self, reason: Reason) -> int:
        return self.weights.get(reason, 0)

    def replace(self, **changes) -> ScoringConstants:
        return replace(self, **changes)
