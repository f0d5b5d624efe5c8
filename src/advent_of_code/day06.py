"""Day 6 - Guard Gallivant"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Set

from advent_of_code.direction import Direction
from advent_of_code.file_io import PathLike, PuzzleInputError, strings_from_file
from advent_of_code.grid import Bounds
from advent_of_code.position import Position


class Guard(NamedTuple):
    pos: Position
    dir: Direction


@dataclass
class MazeState:
    guard: Guard
    obstacles: Set[Position] = field(default_factory=set)
    bounds: Bounds = Bounds(0, 0)

    def step_guard(self) -> Position | None:
        """Move or turn once; None once the guard has left the map."""
        pos, direction = self.guard
        next_pos = pos.step(direction)
        if next_pos in self.obstacles:
            self.guard = Guard(pos, direction.turned_right())
            return pos
        if not self.bounds.contains(next_pos):
            return None
        self.guard = Guard(next_pos, direction)
        return next_pos

    def visited_positions(self) -> Set[Position]:
        start = self.guard
        visited = {start.pos}
        while (new_pos := self.step_guard()) is not None:
            visited.add(new_pos)
        self.guard = start
        return visited

    def creates_loop(self, obstacle: Position) -> bool:
        start = self.guard
        self.obstacles.add(obstacle)
        seen_states = {start}
        loops = False
        while self.step_guard() is not None:
            if self.guard in seen_states:
                loops = True
                break
            seen_states.add(self.guard)
        self.obstacles.discard(obstacle)
        self.guard = start
        return loops


def read_maze(path: PathLike) -> MazeState:
    lines = [line for line in strings_from_file(path) if line]
    guard = None
    obstacles: Set[Position] = set()
    for y, line in enumerate(lines):
        for x, c in enumerate(line):
            if c == "#":
                obstacles.add(Position(x, y))
            elif c in "^>v<":
                guard = Guard(Position(x, y), Direction.from_char(c))
    if guard is None:
        raise PuzzleInputError(f"{path}: no guard found")
    return MazeState(guard, obstacles, Bounds(len(lines[0]), len(lines)))


def part1(path: PathLike) -> int:
    return len(read_maze(path).visited_positions())


def part2(path: PathLike) -> int:
    maze = read_maze(path)
    candidates = maze.visited_positions() - {maze.guard.pos}
    return sum(1 for obstacle in candidates if maze.creates_loop(obstacle))
