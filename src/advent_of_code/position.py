"""Grid coordinates: x to the right, y downwards."""

from __future__ import annotations

from typing import List, NamedTuple

from advent_of_code.direction import Direction
from advent_of_code.math2d import Vec2


class Position(NamedTuple):
    x: int
    y: int

    def __add__(self, offset: Vec2) -> Position:  # type: ignore[override]
        return Position(self.x + offset[0], self.y + offset[1])

    def __sub__(self, other: Position) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def neighbours(self) -> List[Position]:
        return [
            Position(self.x + 1, self.y),
            Position(self.x - 1, self.y),
            Position(self.x, self.y + 1),
            Position(self.x, self.y - 1),
        ]

    def step(self, direction: Direction) -> Position:
        return self + direction.delta

    def mirrored_across(self, other: Position) -> Position:
        return Position(2 * other.x - self.x, 2 * other.y - self.y)

    def manhattan(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)
