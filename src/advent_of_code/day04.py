"""Day 4 - Ceres Search"""

from itertools import product
from typing import Iterable

from advent_of_code.file_io import PathLike, grid_from_file
from advent_of_code.grid import Grid
from advent_of_code.position import Position

Puzzle = Grid[str]

DIRECTIONS = [(dx, dy) for dx, dy in product((-1, 0, 1), repeat=2) if (dx, dy) != (0, 0)]


def straight_line(start: Position, direction: tuple[int, int], length: int) -> Iterable[Position]:
    return (start + (direction[0] * i, direction[1] * i) for i in range(length))


def matches_word(puzzle: Puzzle, positions: Iterable[Position], word: str) -> bool:
    return all(
        puzzle.in_bounds(pos) and puzzle[pos] == c for pos, c in zip(positions, word)
    )


def count_word(puzzle: Puzzle, word: str = "XMAS") -> int:
    return sum(
        1
        for pos, direction in product(puzzle.positions(), DIRECTIONS)
        if matches_word(puzzle, straight_line(pos, direction, len(word)), word)
    )


def is_x_mas(puzzle: Puzzle, pos_a: Position) -> bool:
    if puzzle[pos_a] != "A":
        return False
    x, y = pos_a
    diagonals = (
        [Position(x - 1, y - 1), Position(x + 1, y + 1)],
        [Position(x - 1, y + 1), Position(x + 1, y - 1)],
    )
    return all(
        matches_word(puzzle, diagonal, "MS") or matches_word(puzzle, diagonal, "SM")
        for diagonal in diagonals
    )


def part1(path: PathLike) -> int:
    return count_word(grid_from_file(path))


def part2(path: PathLike) -> int:
    puzzle = grid_from_file(path)
    return sum(1 for pos in puzzle.positions() if is_x_mas(puzzle, pos))
