"""Day 25 - Code Chronicle"""

from typing import List, Tuple

import numpy as np

from advent_of_code.file_io import PathLike, PuzzleInputError, paragraphs_from_file

PINS = 5
LOCK_HEIGHT = 5
LOCK_TOP = "#" * PINS
KEY_TOP = "." * PINS
GREETING = "Deliver the chronicle!"


def is_lock(block: List[str]) -> bool:
    if block[0] == LOCK_TOP:
        return True
    if block[0] == KEY_TOP:
        return False
    raise PuzzleInputError(f"Each block should start with an empty or a full line, got {block[0]!r}")


def pin_heights(block: List[str]) -> np.ndarray:
    """Count '#' per column, ignoring the first and last line."""
    if len(block) != LOCK_HEIGHT + 2 or any(len(line) != PINS for line in block):
        raise PuzzleInputError(f"Malformed lock or key: {block!r}")
    cells = np.array([list(line) for line in block[1:-1]])
    return (cells == "#").sum(axis=0)


def locks_and_keys(path: PathLike) -> Tuple[np.ndarray, np.ndarray]:
    locks, keys = [], []
    for block in paragraphs_from_file(path):
        (locks if is_lock(block) else keys).append(pin_heights(block))
    return (
        np.array(locks, dtype=int).reshape(-1, PINS),
        np.array(keys, dtype=int).reshape(-1, PINS),
    )


def fitting_combinations(locks: np.ndarray, keys: np.ndarray) -> int:
    combined = locks[:, None, :] + keys[None, :, :]
    return int((combined <= LOCK_HEIGHT).all(axis=-1).sum())


def part1(path: PathLike) -> int:
    return fitting_combinations(*locks_and_keys(path))


def part2(path: PathLike) -> str:
    return GREETING
