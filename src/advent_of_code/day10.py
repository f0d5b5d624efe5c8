"""Day 10 - Hoof It"""

from functools import cache
from typing import FrozenSet

from advent_of_code.file_io import PathLike, grid_from_file
from advent_of_code.grid import Grid
from advent_of_code.position import Position

TRAILHEAD = 0
SUMMIT = 9


class Topography:
    def __init__(self, heights: Grid[int]):
        self.heights = heights
        # per-instance memoisation of the recursive walks
        self.reachable_summits = cache(self._reachable_summits)
        self.trail_count = cache(self._trail_count)

    @classmethod
    def from_file(cls, path: PathLike) -> "Topography":
        return cls(grid_from_file(path, int))

    def uphill_neighbours(self, pos: Position):
        height = self.heights[pos]
        return [
            neib
            for neib in self.heights.valid_neighbours(pos)
            if self.heights[neib] == height + 1
        ]

    def _reachable_summits(self, pos: Position) -> FrozenSet[Position]:
        if self.heights[pos] == SUMMIT:
            return frozenset([pos])
        return frozenset().union(
            *(self.reachable_summits(neib) for neib in self.uphill_neighbours(pos))
        )

    def _trail_count(self, pos: Position) -> int:
        if self.heights[pos] == SUMMIT:
            return 1
        return sum(self.trail_count(neib) for neib in self.uphill_neighbours(pos))

    def trail_score(self) -> int:
        return sum(len(self.reachable_summits(zero)) for zero in self.heights.find(TRAILHEAD))

    def trail_rating(self) -> int:
        return sum(self.trail_count(zero) for zero in self.heights.find(TRAILHEAD))


def part1(path: PathLike) -> int:
    return Topography.from_file(path).trail_score()


def part2(path: PathLike) -> int:
    return Topography.from_file(path).trail_rating()
