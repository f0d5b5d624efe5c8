"""Day 1 - Historian Hysteria"""

from collections import Counter
from typing import List

from advent_of_code.file_io import PathLike, two_columns_from_file


def total_distance(left: List[int], right: List[int]) -> int:
    """Pair up the sorted lists and add up how far apart each pair is."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: List[int], right: List[int]) -> int:
    freq_left = Counter(left)
    freq_right = Counter(right)
    return sum(
        number * occurrences * freq_right[number]
        for number, occurrences in freq_left.items()
    )


def part1(path: PathLike) -> int:
    left, right = two_columns_from_file(path)
    return total_distance(left, right)


def part2(path: PathLike) -> int:
    left, right = two_columns_from_file(path)
    return similarity_score(left, right)
