"""Position, Direction and Vec2 helpers."""

from __future__ import annotations

import pytest

from advent_of_code.direction import Direction
from advent_of_code.math2d import Vec2
from advent_of_code.position import Position


@pytest.mark.parametrize("char, direction", [
    ("^", Direction.UP),
    (">", Direction.RIGHT),
    ("v", Direction.DOWN),
    ("<", Direction.LEFT),
])
def test_direction_from_char(char: str, direction: Direction) -> None:
    assert Direction.from_char(char) is direction


def test_direction_from_bad_char() -> None:
    with pytest.raises(ValueError):
        Direction.from_char("x")


def test_turns() -> None:
    assert Direction.UP.turned_right() is Direction.RIGHT
    assert Direction.UP.turned_left() is Direction.LEFT
    assert Direction.LEFT.turned_around() is Direction.RIGHT
    for direction in Direction.iter_all():
        assert direction.turned_right().turned_left() is direction


def test_step_and_delta() -> None:
    pos = Position(3, 3)
    assert pos.step(Direction.UP) == Position(3, 2)
    assert pos.step(Direction.DOWN) == Position(3, 4)
    assert pos.step(Direction.LEFT) == Position(2, 3)
    assert pos.step(Direction.RIGHT) == Position(4, 3)


def test_position_arithmetic() -> None:
    a, b = Position(1, 2), Position(4, 6)
    assert b - a == Vec2(3, 4)
    assert a + (b - a) == b
    assert a.manhattan(b) == 7
    assert b.mirrored_across(a) == Position(-2, -2)
    assert set(a.neighbours()) == {Position(2, 2), Position(0, 2), Position(1, 3), Position(1, 1)}


def test_vec2() -> None:
    v = Vec2(2, -3)
    assert v * 2 == Vec2(4, -6)
    assert 2 * v == Vec2(4, -6)
    assert -v == Vec2(-2, 3)
    assert v.orthogonal() == Vec2(3, 2)
    assert v.dot(v.orthogonal()) == 0
    assert v.norm_sq() == 13
    assert v.manhattan() == 5
    assert Vec2(7, 9) // 2 == Vec2(3, 4)
