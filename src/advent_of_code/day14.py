"""Day 14 - Restroom Redoubt

Robots move in straight lines on a torus. Positions and velocities are kept
as (n, 2) numpy arrays so whole packs advance in one vectorised step.
"""

import re
from typing import NamedTuple

import numpy as np
from loguru import logger

from advent_of_code.file_io import PathLike, PuzzleInputError, lines_from_file

ROBOT_PATTERN = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")

SAFETY_SECONDS = 100


class Torus(NamedTuple):
    width: int
    height: int


BATHROOM = Torus(101, 103)


class Robots(NamedTuple):
    positions: np.ndarray
    velocities: np.ndarray


def robots_from_file(path: PathLike) -> Robots:
    rows = []
    for line in lines_from_file(path):
        if not line.strip():
            continue
        match = ROBOT_PATTERN.fullmatch(line.strip())
        if match is None:
            raise PuzzleInputError(f"{path}: robot data could not be detected in {line!r}")
        rows.append([int(value) for value in match.groups()])
    data = np.array(rows, dtype=np.int64).reshape(-1, 4)
    return Robots(positions=data[:, :2], velocities=data[:, 2:])


def positions_after(robots: Robots, seconds: int, torus: Torus) -> np.ndarray:
    size = np.array(torus, dtype=np.int64)
    return (robots.positions + robots.velocities * seconds) % size


def safety_factor(positions: np.ndarray, torus: Torus) -> int:
    mid_x, mid_y = torus.width // 2, torus.height // 2
    x, y = positions[:, 0], positions[:, 1]
    quadrants = [
        (x < mid_x) & (y < mid_y),
        (x > mid_x) & (y < mid_y),
        (x < mid_x) & (y > mid_y),
        (x > mid_x) & (y > mid_y),
    ]
    return int(np.prod([np.count_nonzero(quadrant) for quadrant in quadrants]))


def render(positions: np.ndarray, torus: Torus) -> str:
    """Multiplicity map: '.' for empty cells, otherwise the robot count."""
    counts = np.zeros((torus.height, torus.width), dtype=np.int64)
    np.add.at(counts, (positions[:, 1], positions[:, 0]), 1)
    return "\n".join(
        "".join("." if count == 0 else str(count) for count in row) for row in counts
    )


def _least_spread_time(start: np.ndarray, velocity: np.ndarray, period: int) -> int:
    """Time in [0, period) at which one coordinate has the smallest variance."""
    times = np.arange(period, dtype=np.int64)[:, None]
    coordinates = (start[None, :] + velocity[None, :] * times) % period
    return int(np.argmin(coordinates.var(axis=1)))


def chinese_remainder(residue_x: int, period_x: int, residue_y: int, period_y: int) -> int:
    """Smallest t >= 0 with t = residue_x (mod period_x) and t = residue_y (mod period_y).

    The periods must be coprime.
    """
    inverse = pow(period_x, -1, period_y)
    k = ((residue_y - residue_x) * inverse) % period_y
    return residue_x + k * period_x


def picture_time(robots: Robots, torus: Torus) -> int:
    """First second at which the robots bunch together into the picture.

    Each axis is periodic on its own, so find the tightest x spread within one
    width and the tightest y spread within one height, then combine.
    """
    time_x = _least_spread_time(robots.positions[:, 0], robots.velocities[:, 0], torus.width)
    time_y = _least_spread_time(robots.positions[:, 1], robots.velocities[:, 1], torus.height)
    return chinese_remainder(time_x, torus.width, time_y, torus.height)


def part1(path: PathLike, torus: Torus = BATHROOM) -> int:
    robots = robots_from_file(path)
    return safety_factor(positions_after(robots, SAFETY_SECONDS, torus), torus)


def part2(path: PathLike, torus: Torus = BATHROOM) -> int:
    robots = robots_from_file(path)
    seconds = picture_time(robots, torus)
    logger.opt(lazy=True).debug(
        "Robots after {} seconds:\n{}",
        lambda: seconds,
        lambda: render(positions_after(robots, seconds, torus), torus),
    )
    return seconds
