"""Day 23 - LAN Party"""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import Dict, FrozenSet, Optional, Set, Tuple

from advent_of_code.file_io import PathLike, PuzzleInputError, lines_from_file

Computer = str
ThreeWay = Tuple[Computer, Computer, Computer]


def _computer(name: str, line: str) -> Computer:
    if len(name) != 2:
        raise PuzzleInputError(f"Computers should have 2-character names, got {line!r}")
    return name


class ComputerGraph:
    """Undirected graph of network connections."""

    def __init__(self, edges=()):
        self.data: Dict[Computer, Set[Computer]] = defaultdict(set)
        for c1, c2 in edges:
            self.connect(c1, c2)

    def connect(self, c1: Computer, c2: Computer) -> None:
        self.data[c1].add(c2)
        self.data[c2].add(c1)

    @classmethod
    def from_file(cls, path: PathLike) -> ComputerGraph:
        graph = cls()
        for line in lines_from_file(path):
            if not line.strip():
                continue
            names = line.strip().split("-")
            if len(names) != 2:
                raise PuzzleInputError(
                    f"Computer names should be split by a single dash, got {line!r}"
                )
            graph.connect(*(_computer(name, line) for name in names))
        return graph

    def find_threeway_games(self, initial: str) -> Set[ThreeWay]:
        """Triangles with at least one computer whose name starts with `initial`."""
        threeways: Set[ThreeWay] = set()
        for c1, connected in self.data.items():
            if not c1.startswith(initial):
                continue
            for c2, c3 in combinations(connected, 2):
                if c3 in self.data[c2]:
                    threeways.add(tuple(sorted((c1, c2, c3))))
        return threeways

    def _pruned_bron_kerbosch(
        self, clique: FrozenSet[Computer], candidates: Set[Computer], largest_found: int
    ) -> Optional[FrozenSet[Computer]]:
        if len(clique) + len(candidates) <= largest_found:
            return None
        if not candidates:
            return clique

        best: Optional[FrozenSet[Computer]] = None
        remaining = set(candidates)
        for computer in candidates:
            found = self._pruned_bron_kerbosch(
                clique | {computer},
                remaining & self.data[computer],
                max(largest_found, len(best) if best else 0),
            )
            if found is not None and (best is None or len(found) > len(best)):
                best = found
            remaining.discard(computer)
        return best

    def largest_clique(self) -> FrozenSet[Computer]:
        return self._pruned_bron_kerbosch(frozenset(), set(self.data), 0) or frozenset()


def part1(path: PathLike) -> int:
    return len(ComputerGraph.from_file(path).find_threeway_games("t"))


def part2(path: PathLike) -> str:
    return ",".join(sorted(ComputerGraph.from_file(path).largest_clique()))
