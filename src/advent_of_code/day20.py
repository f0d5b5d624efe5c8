"""Day 20 - Race Condition"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Set

from advent_of_code.file_io import PathLike, PuzzleInputError, grid_from_file
from advent_of_code.grid import Grid
from advent_of_code.position import Position

SHORT_CHEAT = 2
LONG_CHEAT = 20
MIN_TIME_SAVE = 100


class Cheat(NamedTuple):
    start: Position
    end: Position

    def min_duration(self) -> int:
        return self.start.manhattan(self.end)


@dataclass
class RaceTrack:
    walls: Grid[bool]
    start: Position
    end: Position

    def single_path(self) -> List[Position]:
        prev_pos = None
        pos = self.start
        path = [pos]
        while pos != self.end:
            forward = [
                neib
                for neib in self.walls.valid_neighbours(pos)
                if not self.walls[neib] and neib != prev_pos
            ]
            if len(forward) != 1:
                raise PuzzleInputError(
                    f"Racetrack should have a unique step forward at {pos}, found {len(forward)}"
                )
            prev_pos, pos = pos, forward[0]
            path.append(pos)
        return path

    def timestamp_map(self) -> Dict[Position, int]:
        return {pos: timestamp for timestamp, pos in enumerate(self.single_path())}

    def cheats(self, max_duration: int = SHORT_CHEAT) -> Dict[int, Set[Cheat]]:
        """Time saved -> cheats saving exactly that much.

        A cheat jumps from one track cell to another at most `max_duration`
        steps away (Manhattan distance), ignoring walls.
        """
        timestamps = self.timestamp_map()
        offsets = [
            (dx, dy)
            for dx in range(-max_duration, max_duration + 1)
            for dy in range(-max_duration, max_duration + 1)
            if 0 < abs(dx) + abs(dy) <= max_duration
        ]
        cheats: Dict[int, Set[Cheat]] = defaultdict(set)
        for start_pos, start_time in timestamps.items():
            for offset in offsets:
                end_pos = start_pos + offset
                end_time = timestamps.get(end_pos)
                if end_time is None:
                    continue
                cheat = Cheat(start_pos, end_pos)
                time_save = end_time - (start_time + cheat.min_duration())
                if time_save > 0:
                    cheats[time_save].add(cheat)
        return dict(cheats)


def load_track(path: PathLike) -> RaceTrack:
    char_grid = grid_from_file(path)
    return RaceTrack(
        walls=char_grid.convert(lambda c: c == "#"),
        start=char_grid.find_one("S"),
        end=char_grid.find_one("E"),
    )


def count_cheats(path: PathLike, max_duration: int, min_time_save: int) -> int:
    cheats = load_track(path).cheats(max_duration)
    return sum(
        len(cheat_set) for time_save, cheat_set in cheats.items() if time_save >= min_time_save
    )


def part1(path: PathLike, min_time_save: int = MIN_TIME_SAVE) -> int:
    return count_cheats(path, SHORT_CHEAT, min_time_save)


def part2(path: PathLike, min_time_save: int = MIN_TIME_SAVE) -> int:
    return count_cheats(path, LONG_CHEAT, min_time_save)
