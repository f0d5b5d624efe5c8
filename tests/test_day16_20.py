"""Days 16 to 20 on the puzzle examples."""

from __future__ import annotations

import pytest

from advent_of_code import day16, day17, day18, day19, day20
from advent_of_code.file_io import PuzzleInputError
from advent_of_code.grid import Bounds
from advent_of_code.position import Position


@pytest.mark.parametrize("name, score, seats", [
    ("day16a.txt", 7036, 45),
    ("day16b.txt", 11048, 64),
])
def test_day16(data, name: str, score: int, seats: int) -> None:
    assert day16.part1(data(name)) == score
    assert day16.part2(data(name)) == seats


def test_day16_unreachable_end(tmp_path) -> None:
    path = tmp_path / "maze.txt"
    path.write_text("#####\n#S#E#\n#####\n")
    with pytest.raises(ValueError):
        day16.part1(path)


def test_day17(data) -> None:
    assert day17.part1(data("day17a.txt")) == "4,6,3,5,6,3,5,2,1,0"
    assert day17.part2(data("day17b.txt")) == 117440


def test_day17_quine_check(data) -> None:
    state = day17.load_program(data("day17b.txt"))
    state.a = 117440
    assert state.run() == "0,3,5,4,3,0"


def test_day17_small_programs() -> None:
    state = day17.ProgramState([2, 6], c=9)
    state.run()
    assert state.b == 1

    assert day17.ProgramState([5, 0, 5, 1, 5, 4], a=10).run() == "0,1,2"

    state = day17.ProgramState([0, 1, 5, 4, 3, 0], a=2024)
    assert state.run() == "4,2,5,6,7,7,7,7,3,1,0"
    assert state.a == 0

    state = day17.ProgramState([1, 7], b=29)
    state.run()
    assert state.b == 26

    state = day17.ProgramState([4, 0], b=2024, c=43690)
    state.run()
    assert state.b == 44354


def test_day17_invalid_combo_operand() -> None:
    with pytest.raises(ValueError):
        day17.ProgramState([5, 7]).run()


def test_day17_invalid_program() -> None:
    with pytest.raises(PuzzleInputError):
        day17.parse_program_string("0,9")


def test_day18(data) -> None:
    assert day18.part1(data("day18.txt"), bounds=Bounds(7, 7), fallen_bytes=12) == 22
    assert day18.part2(data("day18.txt"), bounds=Bounds(7, 7)) == (6, 1)


def test_day18_blocked_memory() -> None:
    memory = day18.MemorySpace(Bounds(3, 3))
    assert memory.shortest_path() == 4
    memory.bulk_corrupt([Position(0, 1), Position(1, 1), Position(2, 1)])
    assert memory.shortest_path() is None


def test_day18_exit_never_blocked(tmp_path) -> None:
    path = tmp_path / "bytes.txt"
    path.write_text("1,1\n")
    with pytest.raises(PuzzleInputError):
        day18.part2(path, bounds=Bounds(3, 3))


def test_day18_no_bytes(tmp_path) -> None:
    path = tmp_path / "bytes.txt"
    path.write_text("")
    with pytest.raises(PuzzleInputError):
        day18.part2(path, bounds=Bounds(3, 3))


def test_day19(data) -> None:
    assert day19.part1(data("day19.txt")) == 6
    assert day19.part2(data("day19.txt")) == 16


@pytest.mark.parametrize("design, ways", [
    ("brwrr", 2),
    ("bggr", 1),
    ("gbbr", 4),
    ("rrbgbr", 6),
    ("ubwu", 0),
    ("bwurrg", 1),
    ("brgr", 2),
    ("bbrgwb", 0),
])
def test_day19_ways(data, design: str, ways: int) -> None:
    trie, _ = day19.load_input(data("day19.txt"))
    assert trie.ways_to_make(day19.pattern_from_word(design)) == ways


def test_day19_trie() -> None:
    trie = day19.PatternTrie([day19.pattern_from_word("rb")])
    assert trie.contains(day19.pattern_from_word("rb"))
    assert not trie.contains(day19.pattern_from_word("r"))
    assert not trie.can_make(day19.pattern_from_word("rbr"))
    trie.insert(day19.pattern_from_word("r"))
    assert trie.can_make(day19.pattern_from_word("rbr"))


def test_day19_invalid_stripe() -> None:
    with pytest.raises(ValueError):
        day19.pattern_from_word("rx")


def test_day20_short_cheats(data) -> None:
    cheats = day20.load_track(data("day20.txt")).cheats(2)
    assert {save: len(found) for save, found in cheats.items()} == {
        2: 14, 4: 14, 6: 2, 8: 4, 10: 2, 12: 3, 20: 1, 36: 1, 38: 1, 40: 1, 64: 1,
    }
    assert day20.part1(data("day20.txt"), min_time_save=2) == 44


def test_day20_long_cheats(data) -> None:
    cheats = day20.load_track(data("day20.txt")).cheats(20)
    counts = {save: len(found) for save, found in cheats.items() if save >= 50}
    assert counts == {
        50: 32, 52: 31, 54: 29, 56: 39, 58: 25, 60: 23, 62: 20,
        64: 19, 66: 12, 68: 14, 70: 12, 72: 22, 74: 4, 76: 3,
    }
    assert day20.part2(data("day20.txt"), min_time_save=50) == 285


def test_day20_path(data) -> None:
    track = day20.load_track(data("day20.txt"))
    path = track.single_path()
    assert path[0] == track.start
    assert path[-1] == track.end
    assert len(path) == 85


def test_day20_branching_track(tmp_path) -> None:
    path = tmp_path / "track.txt"
    path.write_text("#####\n#S..#\n#...#\n#..E#\n#####\n")
    with pytest.raises(PuzzleInputError):
        day20.load_track(path).single_path()
