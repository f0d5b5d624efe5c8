"""Day 18 - RAM Run"""

from __future__ import annotations

import heapq
from typing import Dict, List, Optional, Sequence, Tuple

from advent_of_code.file_io import PathLike, PuzzleInputError, lines_from_file
from advent_of_code.grid import Bounds, Grid
from advent_of_code.position import Position

MEMORY_SIZE = Bounds(71, 71)
FALLEN_BYTES = 1024


class MemorySpace:
    def __init__(self, bounds: Bounds):
        self.corrupted: Grid[bool] = Grid.filled(bounds, False)
        self.start = Position(0, 0)
        self.end = Position(bounds.width - 1, bounds.height - 1)

    def corrupt(self, pos: Position) -> None:
        self.corrupted[pos] = True

    def bulk_corrupt(self, corruptions: Sequence[Position]) -> None:
        for pos in corruptions:
            self.corrupt(pos)

    def heuristic(self, pos: Position) -> int:
        return pos.manhattan(self.end)

    def shortest_path(self) -> Optional[int]:
        """A* from the top-left to the bottom-right corner."""
        if self.corrupted[self.start] or self.corrupted[self.end]:
            return None
        fastest_arrival: Dict[Position, int] = {self.start: 0}
        runners = [(self.heuristic(self.start), 0, self.start)]

        while runners:
            _, time_elapsed, pos = heapq.heappop(runners)
            if pos == self.end:
                return time_elapsed
            if time_elapsed > fastest_arrival[pos]:
                continue
            for next_pos in self.corrupted.valid_neighbours(pos):
                if self.corrupted[next_pos]:
                    continue
                next_time = time_elapsed + 1
                if next_time < fastest_arrival.get(next_pos, next_time + 1):
                    fastest_arrival[next_pos] = next_time
                    heapq.heappush(
                        runners, (next_time + self.heuristic(next_pos), next_time, next_pos)
                    )
        return None


def find_blocking_byte(bounds: Bounds, corruptions: Sequence[Position]) -> int:
    """Index of the first byte after which no path is left (binary search)."""
    if not corruptions:
        raise PuzzleInputError("No bytes fall into the memory space")
    left, right = 0, len(corruptions) - 1
    while left < right:
        mid = (left + right) // 2
        memory = MemorySpace(bounds)
        memory.bulk_corrupt(corruptions[: mid + 1])
        if memory.shortest_path() is not None:
            left = mid + 1
        else:
            right = mid

    memory = MemorySpace(bounds)
    memory.bulk_corrupt(corruptions)
    if memory.shortest_path() is not None:
        raise PuzzleInputError("The exit is still reachable after every byte has fallen")
    return right


def load_corruptions(path: PathLike) -> List[Position]:
    corruptions = []
    for line in lines_from_file(path):
        if not line.strip():
            continue
        try:
            x, y = line.split(",")
            corruptions.append(Position(int(x), int(y)))
        except ValueError as exc:
            raise PuzzleInputError(
                f"{path}: each line should contain a pair of comma-separated numbers, got {line!r}"
            ) from exc
    return corruptions


def part1(path: PathLike, bounds: Bounds = MEMORY_SIZE, fallen_bytes: int = FALLEN_BYTES) -> int:
    memory = MemorySpace(bounds)
    memory.bulk_corrupt(load_corruptions(path)[:fallen_bytes])
    steps = memory.shortest_path()
    if steps is None:
        raise ValueError("No shortest path found!")
    return steps


def part2(path: PathLike, bounds: Bounds = MEMORY_SIZE) -> Tuple[int, int]:
    corruptions = load_corruptions(path)
    blocking = corruptions[find_blocking_byte(bounds, corruptions)]
    return blocking.x, blocking.y
