"""Day 15 - Warehouse Woes"""

from __future__ import annotations

from typing import List, Set, Tuple

from loguru import logger

from advent_of_code.direction import Direction
from advent_of_code.file_io import PathLike, PuzzleInputError, paragraphs_from_file
from advent_of_code.grid import Grid
from advent_of_code.position import Position

WALL = "#"
EMPTY = "."
BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"
ROBOT = "@"

WIDEN = str.maketrans({WALL: "##", BOX: "[]", EMPTY: "..", ROBOT: "@."})


class Warehouse:
    """The room without the robot, plus the robot's position."""

    def __init__(self, room: Grid[str], robot: Position):
        self.room = room
        self.robot = robot
        self.wide = any(BOX_LEFT in row for row in room.data)

    @classmethod
    def from_lines(cls, lines: List[str]) -> Warehouse:
        room = Grid.from_lines(lines)
        robot = room.find_one(ROBOT)
        room[robot] = EMPTY
        return cls(room, robot)

    def try_step(self, direction: Direction) -> bool:
        if direction.is_horizontal() or not self.wide:
            moved = self._push_in_line(self.robot, direction)
        else:
            moved = self._push_rows({self.robot}, direction)
        if moved:
            self.robot = self.robot.step(direction)
        return moved

    def _push_in_line(self, start: Position, direction: Direction) -> bool:
        next_pos = start.step(direction)
        next_value = self.room[next_pos]
        if next_value == WALL:
            return False
        if next_value in (BOX, BOX_LEFT, BOX_RIGHT) and not self._push_in_line(next_pos, direction):
            return False
        self.room[next_pos] = self.room[start]
        self.room[start] = EMPTY
        return True

    def _push_rows(self, frontier: Set[Position], direction: Direction) -> bool:
        """Push a whole row of cells up or down at once.

        Nothing can move unless everything moves, so the rows further out are
        checked (and moved) before this one.
        """
        if not frontier:
            return True

        obstacles: Set[Position] = set()
        for pos in frontier:
            next_pos = pos.step(direction)
            next_value = self.room[next_pos]
            if next_value == WALL:
                return False
            if next_value == BOX_LEFT:
                obstacles |= {next_pos, next_pos.step(Direction.RIGHT)}
            elif next_value == BOX_RIGHT:
                obstacles |= {next_pos, next_pos.step(Direction.LEFT)}

        if not self._push_rows(obstacles, direction):
            return False

        for pos in frontier:
            self.room[pos.step(direction)] = self.room[pos]
            self.room[pos] = EMPTY
        return True

    def gps(self) -> int:
        return sum(
            pos.x + 100 * pos.y
            for pos in self.room.positions()
            if self.room[pos] in (BOX, BOX_LEFT)
        )

    def pretty_print_string(self) -> str:
        room = self.room.copy()
        room[self.robot] = ROBOT
        return room.pretty_print_string()


def load_input(path: PathLike, wide: bool = False) -> Tuple[Warehouse, List[Direction]]:
    paragraphs = paragraphs_from_file(path)
    if len(paragraphs) < 2:
        raise PuzzleInputError(f"{path}: expected a map and movement instructions")
    map_lines, *instruction_blocks = paragraphs
    if wide:
        map_lines = [line.translate(WIDEN) for line in map_lines]
    instructions = [
        Direction.from_char(c) for block in instruction_blocks for line in block for c in line
    ]
    return Warehouse.from_lines(map_lines), instructions


def run(warehouse: Warehouse, instructions: List[Direction]) -> int:
    logger.opt(lazy=True).debug("Initial state:\n{}", warehouse.pretty_print_string)
    for direction in instructions:
        warehouse.try_step(direction)
        logger.opt(lazy=True).debug(
            "Move {}:\n{}", lambda: direction.value, warehouse.pretty_print_string
        )
    return warehouse.gps()


def part1(path: PathLike) -> int:
    return run(*load_input(path))


def part2(path: PathLike) -> int:
    return run(*load_input(path, wide=True))
