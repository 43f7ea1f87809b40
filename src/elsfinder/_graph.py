"""LetterGraph: letters as nodes, hidden spellings as edges."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Mapping

from ._errors import DuplicateSymbolError, ElsDataError, UnknownSymbolError
from ._types import TIER_WEIGHTS, Island, IslandName, LetterSymbol, Order, Tier


class LetterGraph:
    """Directed graph over an alphabet.

    Every letter is a node carrying its weight; its decomposition lists the
    letters it points to. The graph is not a tree: self-loops, 2-cycles and
    several disjoint components are all expected, so every walk keeps an
    explicit visited set and never recurses.
    """

    __slots__ = ("_nodes", "_predecessors", "_named", "_islands")

    def __init__(
        self,
        nodes: dict[str, LetterSymbol],
        named_islands: dict[IslandName, frozenset[str]] | None = None,
    ) -> None:
        self._nodes = nodes
        preds: dict[str, list[str]] = {letter: [] for letter in nodes}
        for letter, node in nodes.items():
            for target in node.decomposition:
                if target in preds and letter not in preds[target]:
                    preds[target].append(letter)
        self._predecessors = {k: tuple(v) for k, v in preds.items()}
        self._named = named_islands or {}
        self._islands: frozenset[Island] | None = None

    @classmethod
    def load(
        cls,
        symbols: Iterable[LetterSymbol],
        islands: Mapping[IslandName | str, Iterable[str]] | None = None,
    ) -> LetterGraph:
        """Build a graph from letter symbols and an optional curated island table.

        Raises:
            DuplicateSymbolError: If a symbol appears twice.
            ElsDataError: If the island table names an unknown island or
                letter, or if two islands share a letter.
        """
        nodes: dict[str, LetterSymbol] = {}
        for sym in symbols:
            if sym.symbol in nodes:
                raise DuplicateSymbolError(f"duplicate symbol {sym.symbol!r}")
            nodes[sym.symbol] = LetterSymbol(
                symbol=sym.symbol,
                weight=sym.weight,
                decomposition=tuple(sym.decomposition),
            )

        named: dict[IslandName, frozenset[str]] = {}
        seen: dict[str, IslandName] = {}
        for raw_name, letters in (islands or {}).items():
            try:
                name = IslandName(raw_name)
            except ValueError:
                raise ElsDataError(f"unknown island name {raw_name!r}") from None
            members = frozenset(letters)
            for letter in members:
                if letter not in nodes:
                    raise ElsDataError(
                        f"island {name.value!r} references unknown letter {letter!r}"
                    )
                if letter in seen:
                    raise ElsDataError(
                        f"letter {letter!r} is in both {seen[letter].value!r} "
                        f"and {name.value!r}"
                    )
                seen[letter] = name
            named[name] = members

        return cls(nodes, named)

    # -- Node access --

    def __contains__(self, letter: object) -> bool:
        return letter in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[LetterSymbol]:
        return iter(self._nodes.values())

    def __getitem__(self, letter: str) -> LetterSymbol:
        node = self._nodes.get(letter)
        if node is None:
            raise UnknownSymbolError(letter)
        return node

    @property
    def letters(self) -> tuple[str, ...]:
        """All letters in load order."""
        return tuple(self._nodes)

    def successors(self, letter: str) -> tuple[str, ...]:
        """Distinct decomposition targets that are themselves nodes."""
        out: list[str] = []
        for target in self[letter].decomposition:
            if target in self._nodes and target not in out:
                out.append(target)
        return tuple(out)

    def predecessors(self, letter: str) -> tuple[str, ...]:
        if letter not in self._nodes:
            raise UnknownSymbolError(letter)
        return self._predecessors[letter]

    # -- Weights --

    def path_weight(self, letters: Iterable[str]) -> int:
        """Sum the weights of ``letters`` in order.

        Raises:
            UnknownSymbolError: On the first letter absent from the graph.
        """
        total = 0
        nodes = self._nodes
        for ch in letters:
            node = nodes.get(ch)
            if node is None:
                raise UnknownSymbolError(ch)
            total += node.weight
        return total

    # -- Traversal --

    def traverse(
        self,
        start: str,
        order: Order | str = Order.DEPTH_FIRST,
        *,
        visited: set[str] | None = None,
        undirected: bool = False,
    ) -> Iterator[LetterSymbol]:
        """Lazily walk the graph from ``start`` along decomposition edges.

        Args:
            start: Letter to start from.
            order: Depth-first or breadth-first.
            visited: Shared visited set, updated in place. Letters already in
                it are never yielded.
            undirected: Also follow edges backwards (used for islands).

        Raises:
            UnknownSymbolError: If ``start`` is not a node.
        """
        if start not in self._nodes:
            raise UnknownSymbolError(start)
        return self._walk(
            start, Order(order), visited if visited is not None else set(), undirected,
        )

    def _neighbours(self, letter: str, undirected: bool) -> list[str]:
        out = list(self.successors(letter))
        if undirected:
            out.extend(p for p in self._predecessors[letter] if p not in out)
        return out

    def _walk(
        self, start: str, order: Order, visited: set[str], undirected: bool,
    ) -> Iterator[LetterSymbol]:
        depth_first = order is Order.DEPTH_FIRST
        frontier = deque([start])
        while frontier:
            letter = frontier.pop() if depth_first else frontier.popleft()
            if letter in visited:
                continue
            visited.add(letter)
            yield self._nodes[letter]
            nbrs = self._neighbours(letter, undirected)
            if depth_first:
                # stack: push in reverse so decomposition order is kept
                nbrs.reverse()
            frontier.extend(n for n in nbrs if n not in visited)

    # -- Structure --

    def self_loops(self) -> frozenset[str]:
        return frozenset(
            letter for letter, node in self._nodes.items()
            if letter in node.decomposition
        )

    def two_cycles(self) -> frozenset[frozenset[str]]:
        """Unordered pairs ``{x, y}`` with x -> y and y -> x."""
        pairs: set[frozenset[str]] = set()
        for letter in self._nodes:
            for target in self.successors(letter):
                if target != letter and letter in self._nodes[target].decomposition:
                    pairs.add(frozenset((letter, target)))
        return frozenset(pairs)

    def cyclic_letters(self) -> frozenset[str]:
        """Letters lying on any directed cycle, self-loops included."""
        cyclic: set[str] = set()
        for letter in self._nodes:
            for target in self.successors(letter):
                if target == letter:
                    cyclic.add(letter)
                    break
                if any(n.symbol == letter for n in self._walk(
                    target, Order.DEPTH_FIRST, set(), False,
                )):
                    cyclic.add(letter)
                    break
        return frozenset(cyclic)

    def has_cycle(self) -> bool:
        return bool(self.cyclic_letters())

    def in_degree(self, letter: str) -> int:
        """Number of other letters whose decomposition contains ``letter``."""
        return sum(1 for p in self.predecessors(letter) if p != letter)

    def hub(self) -> str | None:
        """Letter with the highest in-degree; ties go to the earliest loaded.

        None when no letter is pointed to by another.
        """
        if not self._nodes:
            return None
        best = max(self._nodes, key=self.in_degree)
        return best if self.in_degree(best) > 0 else None

    # -- Islands --

    def islands(self) -> frozenset[Island]:
        """Connected components with edges taken as undirected.

        One visited set is shared across all walks so every letter lands in
        exactly one island. Cached; the graph never changes after load.
        """
        if self._islands is None:
            visited: set[str] = set()
            found: list[Island] = []
            for letter in self._nodes:
                if letter in visited:
                    continue
                members = [
                    node for node in
                    self._walk(letter, Order.DEPTH_FIRST, visited, True)
                ]
                found.append(Island(
                    members=frozenset(n.symbol for n in members),
                    combined_weight=sum(n.weight for n in members),
                ))
            self._islands = frozenset(found)
        return self._islands

    def named_islands(self) -> frozenset[Island]:
        """Curated islands from the static island table, if one was loaded."""
        return frozenset(
            Island(
                members=members,
                combined_weight=self.path_weight(members),
                name=name,
            )
            for name, members in self._named.items()
        )

    def named_island(self, name: IslandName | str) -> Island:
        name = IslandName(name)
        members = self._named.get(name)
        if members is None:
            raise ElsDataError(f"island {name.value!r} is not configured")
        return Island(
            members=members, combined_weight=self.path_weight(members), name=name,
        )

    def partition(self) -> frozenset[Island]:
        """Named islands when the table is configured, else components."""
        return self.named_islands() if self._named else self.islands()

    def island_of(self, letter: str, *, named: bool = True) -> Island | None:
        if letter not in self._nodes:
            raise UnknownSymbolError(letter)
        islands = self.partition() if named else self.islands()
        for island in islands:
            if letter in island.members:
                return island
        return None

    @staticmethod
    def tier_of(island: Island) -> Tier | None:
        return TIER_WEIGHTS.get(island.combined_weight)
