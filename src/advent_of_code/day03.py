"""Day 3 - Mull It Over"""

import re

from advent_of_code.file_io import PathLike, strings_from_file

MUL_PATTERN = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
# anything from don't() up to the next do() or the end of the memory
DONT_PATTERN = re.compile(r"don't\(\).*?(?:do\(\)|$)", re.DOTALL)


def compute_sum(memory: str) -> int:
    return sum(int(a) * int(b) for a, b in MUL_PATTERN.findall(memory))


def enabled_instructions(memory: str) -> str:
    return DONT_PATTERN.sub("", memory)


def part1(path: PathLike) -> int:
    return sum(compute_sum(line) for line in strings_from_file(path))


def part2(path: PathLike) -> int:
    memory = " ".join(strings_from_file(path))
    return compute_sum(enabled_instructions(memory))
