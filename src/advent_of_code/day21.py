"""Day 21 - Keypad Conundrum

A chain of robots: you press a directional keypad, which drives a robot at
another directional keypad, ..., which finally drives a robot at the numeric
door keypad. Every robot arm starts on (and returns to) its "A" key.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import pairwise
from typing import Dict, List, Optional, Sequence, Set, Tuple

from advent_of_code.file_io import PathLike, PuzzleInputError, strings_from_file
from advent_of_code.position import Position

ACTIVATE = "A"

NUMERIC_LAYOUT = ("789", "456", "123", " 0A")
DIRECTIONAL_LAYOUT = (" ^A", "<v>")

MOVES = {">": (1, 0), "<": (-1, 0), "v": (0, 1), "^": (0, -1)}

Transition = Tuple[str, str]


class Keypad:
    """A keypad, optionally operated through another (controlling) keypad."""

    def __init__(self, layout: Sequence[str], controller: Optional[Keypad] = None):
        self.keys: Dict[str, Position] = {}
        self.gap: Optional[Position] = None
        for y, row in enumerate(layout):
            for x, key in enumerate(row):
                if key == " ":
                    self.gap = Position(x, y)
                else:
                    self.keys[key] = Position(x, y)
        self.controller = controller
        self.min_len_for_transition = lru_cache(maxsize=None)(self._min_len_for_transition)
        self.min_for_transition = lru_cache(maxsize=None)(self._min_for_transition)

    @classmethod
    def numeric(cls, controller: Optional[Keypad] = None) -> Keypad:
        return cls(NUMERIC_LAYOUT, controller)

    @classmethod
    def directional(cls, controller: Optional[Keypad] = None) -> Keypad:
        return cls(DIRECTIONAL_LAYOUT, controller)

    @classmethod
    def robot_chain(cls, robots: int) -> Keypad:
        """Numeric keypad behind `robots` robot-operated directional keypads."""
        keypad = cls.directional()
        for _ in range(robots):
            keypad = cls.directional(controller=keypad)
        return cls.numeric(controller=keypad)

    def _position(self, key: str) -> Position:
        try:
            return self.keys[key]
        except KeyError:
            raise ValueError(f"Key {key!r} is not on this keypad.") from None

    def _is_valid_sequence(self, start: Position, moves: str) -> bool:
        pos = start
        for move in moves:
            pos = pos + MOVES[move]
            if pos == self.gap:
                return False
        return True

    def key_sequences(self, transition: Transition) -> Set[str]:
        """Candidate directional sequences (ending in A) for one key transition.

        Only the two "all horizontal then all vertical" orders can be optimal;
        orders that pass over the gap are dropped.
        """
        start, end = (self._position(key) for key in transition)
        dx, dy = end - start
        horizontal = (">" if dx > 0 else "<") * abs(dx)
        vertical = ("v" if dy > 0 else "^") * abs(dy)
        return {
            moves + ACTIVATE
            for moves in (horizontal + vertical, vertical + horizontal)
            if self._is_valid_sequence(start, moves)
        }

    def _transitions(self, sequence: str) -> List[Transition]:
        return list(pairwise(ACTIVATE + sequence))

    def _min_for_transition(self, transition: Transition) -> str:
        if self.controller is None:
            return transition[1]
        return min(
            (self.controller.min_for_sequence(seq) for seq in sorted(self.key_sequences(transition))),
            key=len,
        )

    def min_for_sequence(self, sequence: str) -> str:
        """Shortest key presses on the outermost keypad that type `sequence` here."""
        return "".join(self.min_for_transition(t) for t in self._transitions(sequence))

    def _min_len_for_transition(self, transition: Transition) -> int:
        if self.controller is None:
            return 1
        return min(
            self.controller.min_len_for_sequence(seq) for seq in self.key_sequences(transition)
        )

    def min_len_for_sequence(self, sequence: str) -> int:
        return sum(self.min_len_for_transition(t) for t in self._transitions(sequence))


def numeric_part(code: str) -> int:
    digits = "".join(c for c in code if c.isdigit())
    if not digits:
        raise PuzzleInputError(f"Code {code!r} has no numeric part.")
    return int(digits)


def load_codes(path: PathLike) -> List[str]:
    return [line.strip() for line in strings_from_file(path) if line.strip()]


def complexity(path: PathLike, robots: int) -> int:
    door = Keypad.robot_chain(robots)
    return sum(door.min_len_for_sequence(code) * numeric_part(code) for code in load_codes(path))


def part1(path: PathLike) -> int:
    door = Keypad.robot_chain(2)
    return sum(len(door.min_for_sequence(code)) * numeric_part(code) for code in load_codes(path))


def part2(path: PathLike) -> int:
    return complexity(path, robots=25)
