"""Day 16 - Reindeer Maze"""

from __future__ import annotations

import heapq
from collections import defaultdict
from dataclasses import dataclass
from itertools import count
from typing import Dict, List, NamedTuple, Set, Tuple

from advent_of_code.direction import Direction
from advent_of_code.file_io import PathLike, grid_from_file
from advent_of_code.grid import Grid
from advent_of_code.position import Position

STEP_COST = 1
TURN_COST = 1000


class Reindeer(NamedTuple):
    pos: Position
    dir: Direction


@dataclass
class Maze:
    walls: Grid[bool]
    start: Position
    end: Position

    def next_steps(self, reindeer: Reindeer) -> List[Tuple[int, Reindeer]]:
        steps = [
            (TURN_COST, Reindeer(reindeer.pos, reindeer.dir.turned_right())),
            (TURN_COST, Reindeer(reindeer.pos, reindeer.dir.turned_left())),
        ]
        ahead = self.walls.try_step(reindeer.pos, reindeer.dir)
        if ahead is not None and not self.walls[ahead]:
            steps.append((STEP_COST, Reindeer(ahead, reindeer.dir)))
        return steps

    def score_and_best_seats(self) -> Tuple[int, int]:
        """Dijkstra over (position, facing); returns the lowest score and the
        number of tiles that lie on at least one lowest-score path."""
        start = Reindeer(self.start, Direction.RIGHT)
        best: Dict[Reindeer, int] = {start: 0}
        predecessors: Dict[Reindeer, List[Reindeer]] = defaultdict(list)
        tie_breaker = count()
        queue = [(0, next(tie_breaker), start)]
        min_total = None
        finishers: List[Reindeer] = []

        while queue:
            score, _, reindeer = heapq.heappop(queue)
            if score > best.get(reindeer, score):
                continue
            if min_total is not None and score > min_total:
                break
            if reindeer.pos == self.end:
                min_total = score
                finishers.append(reindeer)
                continue

            for step_cost, next_reindeer in self.next_steps(reindeer):
                next_score = score + step_cost
                known = best.get(next_reindeer)
                if known is None or next_score < known:
                    best[next_reindeer] = next_score
                    predecessors[next_reindeer] = [reindeer]
                    heapq.heappush(queue, (next_score, next(tie_breaker), next_reindeer))
                elif next_score == known:
                    predecessors[next_reindeer].append(reindeer)

        if min_total is None:
            raise ValueError("No path found!")

        seen: Set[Reindeer] = set(finishers)
        stack = list(finishers)
        while stack:
            for previous in predecessors[stack.pop()]:
                if previous not in seen:
                    seen.add(previous)
                    stack.append(previous)

        return min_total, len({reindeer.pos for reindeer in seen})


def load_maze(path: PathLike) -> Maze:
    char_grid = grid_from_file(path)
    return Maze(
        walls=char_grid.convert(lambda c: c == "#"),
        start=char_grid.find_one("S"),
        end=char_grid.find_one("E"),
    )


def part1(path: PathLike) -> int:
    return load_maze(path).score_and_best_seats()[0]


def part2(path: PathLike) -> int:
    return load_maze(path).score_and_best_seats()[1]
