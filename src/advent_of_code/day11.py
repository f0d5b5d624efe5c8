"""Day 11 - Plutonian Pebbles"""

from collections import Counter
from typing import Dict, List, Tuple

from advent_of_code.file_io import PathLike, PuzzleInputError, read_text

StoneList = List[int]
StoneMap = Dict[int, int]


def even_number_of_digits(value: int) -> bool:
    return len(str(value)) % 2 == 0


def split_digits(value: int) -> Tuple[int, int]:
    digits = str(value)
    half = len(digits) // 2
    return int(digits[:half]), int(digits[half:])


def blink_stone(stone: int) -> List[int]:
    if stone == 0:
        return [1]
    if even_number_of_digits(stone):
        return list(split_digits(stone))
    return [stone * 2024]


def blink_list(stones: StoneList) -> StoneList:
    return [new_stone for stone in stones for new_stone in blink_stone(stone)]


def blink_map(stones: StoneMap) -> StoneMap:
    """Same rules as `blink_list`, but only tracks how many of each stone there are."""
    next_map: Counter = Counter()
    for stone, count in stones.items():
        for new_stone in blink_stone(stone):
            next_map[new_stone] += count
    return next_map


def stone_list_from_file(path: PathLike) -> StoneList:
    try:
        return [int(word) for word in read_text(path).split()]
    except ValueError as exc:
        raise PuzzleInputError(f"{path}: {exc}") from exc


def part1(path: PathLike, blinks: int = 25) -> int:
    stones = stone_list_from_file(path)
    for _ in range(blinks):
        stones = blink_list(stones)
    return len(stones)


def part2(path: PathLike, blinks: int = 75) -> int:
    stones: StoneMap = Counter(stone_list_from_file(path))
    for _ in range(blinks):
        stones = blink_map(stones)
    return sum(stones.values())
