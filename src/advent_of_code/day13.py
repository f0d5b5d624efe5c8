"""Day 13 - Claw Contraption"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from math import gcd
from typing import List, Optional

from advent_of_code.file_io import PathLike, PuzzleInputError, paragraphs_from_file
from advent_of_code.math2d import Vec2

COST_A = 3
COST_B = 1
MAX_PRESSES = 100
PRIZE_OFFSET = 10_000_000_000_000

BUTTON_A_PATTERN = re.compile(r"Button A: X\+(\d+), Y\+(\d+)")
BUTTON_B_PATTERN = re.compile(r"Button B: X\+(\d+), Y\+(\d+)")
PRIZE_PATTERN = re.compile(r"Prize: X=(\d+), Y=(\d+)")


def cost(press_a: int, press_b: int) -> int:
    return press_a * COST_A + press_b * COST_B


def _vector(pattern: re.Pattern, data_string: str) -> Vec2:
    match = pattern.search(data_string)
    if match is None:
        raise PuzzleInputError(f"{pattern.pattern!r} not found in {data_string!r}")
    return Vec2(int(match.group(1)), int(match.group(2)))


def _presses_to_cover(step: Vec2, distance: Vec2) -> Optional[int]:
    """Number of `step` presses landing exactly on `distance`, if any."""
    axis = 0 if step.x else 1
    if step[axis] == 0:
        return 0 if distance == Vec2(0, 0) else None
    if distance[axis] % step[axis]:
        return None
    presses = distance[axis] // step[axis]
    return presses if step * presses == distance else None


@dataclass(frozen=True)
class ClawMachine:
    a: Vec2
    b: Vec2
    prize: Vec2

    @classmethod
    def from_string(cls, data_string: str) -> ClawMachine:
        return cls(
            a=_vector(BUTTON_A_PATTERN, data_string),
            b=_vector(BUTTON_B_PATTERN, data_string),
            prize=_vector(PRIZE_PATTERN, data_string),
        )

    def cheapest_win_easy(self) -> Optional[int]:
        """Try every number of A presses up to the 100-press limit."""
        costs = []
        for a_presses in range(MAX_PRESSES + 1):
            remainder = self.prize - self.a * a_presses
            if remainder.x < 0 or remainder.y < 0:
                break
            b_presses = _presses_to_cover(self.b, remainder)
            if b_presses is not None and b_presses <= MAX_PRESSES:
                costs.append(cost(a_presses, b_presses))
        return min(costs, default=None)

    def cheapest_win(self) -> Optional[int]:
        """Solve a*A + b*B = prize exactly (Cramer's rule)."""
        determinant = self.b.orthogonal().dot(self.a)
        if determinant == 0:
            return self._cheapest_collinear_win()

        numerator_a = self.b.orthogonal().dot(self.prize)
        numerator_b = -self.a.orthogonal().dot(self.prize)
        if numerator_a % determinant or numerator_b % determinant:
            return None
        presses_a, presses_b = numerator_a // determinant, numerator_b // determinant
        if presses_a < 0 or presses_b < 0:
            return None
        return cost(presses_a, presses_b)

    def _cheapest_collinear_win(self) -> Optional[int]:
        # A and B point the same way; the prize has to lie on that line too
        if self.a.orthogonal().dot(self.prize) or self.b.orthogonal().dot(self.prize):
            return None
        axis = 0 if self.a.x or self.b.x else 1
        step_a, step_b, target = self.a[axis], self.b[axis], self.prize[axis]
        if step_a == 0 or step_b == 0:
            # at most one button moves the claw at all
            step, unit_cost = (step_a, COST_A) if step_a else (step_b, COST_B)
            if step == 0:
                return 0 if target == 0 else None
            return (target // step) * unit_cost if target % step == 0 else None

        # valid A press counts repeat with this period
        period = step_b // gcd(step_a, step_b)
        max_a = target // step_a
        if step_a * COST_B > step_b * COST_A:
            # A covers more distance per token: as many A presses as possible
            candidates = range(max_a, max(max_a - period, -1), -1)
        else:
            candidates = range(0, min(max_a, period - 1) + 1)
        for presses_a in candidates:
            rest = target - presses_a * step_a
            if rest % step_b == 0:
                return cost(presses_a, rest // step_b)
        return None


def claw_machines_from_file(path: PathLike) -> List[ClawMachine]:
    return [
        ClawMachine.from_string(" ".join(paragraph))
        for paragraph in paragraphs_from_file(path)
    ]


def part1(path: PathLike) -> int:
    wins = (machine.cheapest_win_easy() for machine in claw_machines_from_file(path))
    return sum(win for win in wins if win is not None)


def part2(path: PathLike) -> int:
    offset = Vec2(PRIZE_OFFSET, PRIZE_OFFSET)
    machines = [
        replace(machine, prize=machine.prize + offset)
        for machine in claw_machines_from_file(path)
    ]
    wins = (machine.cheapest_win() for machine in machines)
    return sum(win for win in wins if win is not None)
