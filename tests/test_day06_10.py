"""Days 6 to 10 on the puzzle examples."""

from __future__ import annotations

import pytest

from advent_of_code import day06, day07, day08, day09, day10
from advent_of_code.file_io import PuzzleInputError
from advent_of_code.position import Position


def test_day06(data) -> None:
    assert day06.part1(data("day06.txt")) == 41
    assert day06.part2(data("day06.txt")) == 6


def test_day06_loop_detection_restores_state(data) -> None:
    maze = day06.read_maze(data("day06.txt"))
    start = maze.guard
    obstacles = set(maze.obstacles)
    assert maze.creates_loop(Position(3, 6))
    assert not maze.creates_loop(Position(0, 0))
    assert maze.guard == start
    assert maze.obstacles == obstacles


def test_day06_without_guard(tmp_path) -> None:
    path = tmp_path / "maze.txt"
    path.write_text("..#\n...\n")
    with pytest.raises(PuzzleInputError):
        day06.read_maze(path)


def test_day07(data) -> None:
    assert day07.part1(data("day07.txt")) == 3749
    assert day07.part2(data("day07.txt")) == 11387


@pytest.mark.parametrize("target, numbers, plain, with_concat", [
    (190, [10, 19], True, True),
    (3267, [81, 40, 27], True, True),
    (156, [15, 6], False, True),
    (7290, [6, 8, 6, 15], False, True),
    (192, [17, 8, 14], False, True),
    (161011, [16, 10, 13], False, False),
])
def test_day07_equations(target: int, numbers: list[int], plain: bool, with_concat: bool) -> None:
    assert day07.equation_possible(target, numbers, False) is plain
    assert day07.equation_possible(target, numbers, True) is with_concat


def test_day08(data) -> None:
    assert day08.part1(data("day08.txt")) == 14
    assert day08.part2(data("day08.txt")) == 34


def test_day09(data) -> None:
    assert day09.part1(data("day09.txt")) == 1928
    assert day09.part2(data("day09.txt")) == 2858


@pytest.mark.parametrize("disk_map, checksum", [
    ("2", 0),
    ("232", 5),
    ("3132", 12),
    ("12345", 60),
])
def test_day09_small_disks(disk_map: str, checksum: int) -> None:
    assert day09.block_compacted_checksum(day09.sizes_from_string(disk_map)) == checksum


@pytest.mark.parametrize("disk_map, checksum", [
    ("12345", 132),
    # an empty file joins the free space on both sides into one gap
    ("11022", 6),
    ("1702499", 497),
])
def test_day09_whole_file_moves(disk_map: str, checksum: int) -> None:
    assert day09.file_compacted_checksum(day09.sizes_from_string(disk_map)) == checksum


def test_day09_partial_checksum() -> None:
    assert day09.partial_checksum(3, 4, 3) == 3 * (4 + 5 + 6)


def test_day09_rejects_garbage() -> None:
    with pytest.raises(PuzzleInputError):
        day09.sizes_from_string("12a4")


def test_day10(data) -> None:
    assert day10.part1(data("day10.txt")) == 36
    assert day10.part2(data("day10.txt")) == 81
