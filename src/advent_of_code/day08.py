"""Day 8 - Resonant Collinearity"""

from collections import defaultdict
from dataclasses import dataclass
from itertools import permutations
from math import gcd
from typing import Dict, Set

from advent_of_code.file_io import PathLike, grid_from_file
from advent_of_code.grid import Bounds, Grid
from advent_of_code.position import Position

AntennaMap = Dict[str, Set[Position]]


@dataclass
class City:
    bounds: Bounds
    antenna_map: AntennaMap

    @classmethod
    def from_grid(cls, grid: Grid[str]) -> "City":
        antenna_map: AntennaMap = defaultdict(set)
        for pos in grid.positions():
            if grid[pos] != ".":
                antenna_map[grid[pos]].add(pos)
        return cls(grid.bounds, dict(antenna_map))

    def basic_antinodes(self) -> Set[Position]:
        antinodes = set()
        for positions in self.antenna_map.values():
            for pos1, pos2 in permutations(positions, 2):
                antinode = pos1.mirrored_across(pos2)
                if self.bounds.contains(antinode):
                    antinodes.add(antinode)
        return antinodes

    def harmonic_antinodes(self) -> Set[Position]:
        antinodes = set()
        for positions in self.antenna_map.values():
            for pos1, pos2 in permutations(positions, 2):
                distance = pos2 - pos1
                delta = distance // gcd(abs(distance.x), abs(distance.y))
                antinode = pos1
                while self.bounds.contains(antinode):
                    antinodes.add(antinode)
                    antinode = antinode + delta
        return antinodes


def scan_city(path: PathLike) -> City:
    return City.from_grid(grid_from_file(path))


def part1(path: PathLike) -> int:
    return len(scan_city(path).basic_antinodes())


def part2(path: PathLike) -> int:
    return len(scan_city(path).harmonic_antinodes())
