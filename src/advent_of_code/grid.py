from __future__ import annotations

import hashlib
from collections import deque
from typing import Callable, Generic, Iterable, Iterator, List, NamedTuple, Set, TypeVar

import numpy as np

from advent_of_code.direction import Direction
from advent_of_code.file_io import PuzzleInputError
from advent_of_code.position import Position

T = TypeVar("T")
S = TypeVar("S")


class Bounds(NamedTuple):
    width: int
    height: int

    def contains(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height


class Grid(Generic[T]):
    """Rectangular row-major grid addressed by `Position(x, y)`."""

    def __init__(self, data: List[List[T]]):
        if not data or not data[0]:
            raise PuzzleInputError("Grid needs at least one non-empty row")
        cols = len(data[0])
        for y, row in enumerate(data):
            if len(row) != cols:
                raise PuzzleInputError(
                    f"Grid rows must have equal length: row {y} has {len(row)}, expected {cols}"
                )
        self.data = data
        self.rows = len(data)
        self.cols = cols

    @classmethod
    def from_lines(cls, lines: Iterable[str], convert: Callable[[str], T] = str) -> Grid[T]:
        data: List[List[T]] = []
        for line in lines:
            try:
                data.append([convert(c) for c in line])
            except ValueError as exc:
                raise PuzzleInputError(f"Cannot convert grid line {line!r}: {exc}") from exc
        return cls(data)

    @classmethod
    def filled(cls, bounds: Bounds, value: T) -> Grid[T]:
        return cls([[value] * bounds.width for _ in range(bounds.height)])

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.cols, self.rows)

    def __getitem__(self, pos: Position) -> T:
        return self.data[pos[1]][pos[0]]

    def __setitem__(self, pos: Position, value: T) -> None:
        self.data[pos[1]][pos[0]] = value

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.cols and 0 <= pos[1] < self.rows

    def positions(self) -> Iterator[Position]:
        for x in range(self.cols):
            for y in range(self.rows):
                yield Position(x, y)

    def valid_neighbours(self, pos: Position) -> List[Position]:
        return [neib for neib in pos.neighbours() if self.in_bounds(neib)]

    def try_step(self, pos: Position, direction: Direction) -> Position | None:
        next_pos = pos.step(direction)
        return next_pos if self.in_bounds(next_pos) else None

    def find(self, value: T) -> Set[Position]:
        return {pos for pos in self.positions() if self[pos] == value}

    def find_one(self, value: T) -> Position:
        found = self.find(value)
        if len(found) != 1:
            raise PuzzleInputError(
                f"There should be exactly one {value!r} in the grid, found {len(found)}"
            )
        return found.pop()

    def contiguous_region(self, start: Position) -> Set[Position]:
        """Flood fill from `start` over orthogonally connected equal cells."""
        target_value = self[start]
        visited: Set[Position] = set()
        to_visit = deque([start])
        while to_visit:
            pos = to_visit.popleft()
            if pos in visited:
                continue
            visited.add(pos)
            for neib in self.valid_neighbours(pos):
                if neib not in visited and self[neib] == target_value:
                    to_visit.append(neib)
        return visited

    def convert(self, func: Callable[[T], S]) -> Grid[S]:
        return Grid([[func(cell) for cell in row] for row in self.data])

    def copy(self) -> Grid[T]:
        return Grid([list(row) for row in self.data])

    def to_array(self) -> np.ndarray:
        return np.array(self.data)

    def pretty_print_string(self, to_char: Callable[[T], str] = str) -> str:
        return "\n".join("".join(to_char(cell) for cell in row) for row in self.data)

    def fingerprint(self) -> str:
        """Return SHA-256 hex digest of the rendered grid"""
        return hashlib.sha256(self.pretty_print_string().encode("utf-8")).hexdigest()

    def __str__(self) -> str:
        return self.pretty_print_string()

    def __repr__(self) -> str:
        return f"Grid({self.cols}×{self.rows})"
