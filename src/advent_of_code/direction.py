"""The four grid directions, with y growing downwards."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from advent_of_code.math2d import Vec2


class Direction(Enum):
    UP = "^"
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"

    @classmethod
    def from_char(cls, character: str) -> Direction:
        try:
            return cls(character)
        except ValueError:
            raise ValueError(
                f"Invalid character {character!r} specified to create Direction."
            ) from None

    @classmethod
    def iter_all(cls) -> Iterator[Direction]:
        return iter(cls)

    @property
    def delta(self) -> Vec2:
        return _DELTAS[self]

    def turned_right(self) -> Direction:
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def turned_left(self) -> Direction:
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def turned_around(self) -> Direction:
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


_CLOCKWISE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

_DELTAS = {
    Direction.UP: Vec2(0, -1),
    Direction.RIGHT: Vec2(1, 0),
    Direction.DOWN: Vec2(0, 1),
    Direction.LEFT: Vec2(-1, 0),
}
