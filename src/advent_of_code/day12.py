"""Day 12 - Garden Groups"""

from dataclasses import dataclass
from typing import Dict, List, Set

from advent_of_code.direction import Direction
from advent_of_code.file_io import PathLike, grid_from_file
from advent_of_code.grid import Grid
from advent_of_code.position import Position


@dataclass
class Plot:
    plant_type: str
    plants: Set[Position]

    def area(self) -> int:
        return len(self.plants)

    def perimeter(self) -> int:
        return sum(
            1 for plant in self.plants for neib in plant.neighbours() if neib not in self.plants
        )

    def boundary_map(self) -> Dict[Direction, Set[Position]]:
        """For each direction, the plants with a fence on that side."""
        return {
            direction: {pos for pos in self.plants if pos.step(direction) not in self.plants}
            for direction in Direction
        }

    def sides(self) -> int:
        sides = 0
        for direction, fenced in self.boundary_map().items():
            visited: Set[Position] = set()
            # a side runs perpendicular to the fence direction
            search_dirs = (direction.turned_left(), direction.turned_right())
            for pos in fenced:
                if pos in visited:
                    continue
                for search_dir in search_dirs:
                    search_pos = pos
                    while search_pos in fenced:
                        visited.add(search_pos)
                        search_pos = search_pos.step(search_dir)
                sides += 1
        return sides


def find_plots(field: Grid[str]) -> List[Plot]:
    recorded: Set[Position] = set()
    plots = []
    for pos in field.positions():
        if pos in recorded:
            continue
        plot = Plot(field[pos], field.contiguous_region(pos))
        recorded |= plot.plants
        plots.append(plot)
    return plots


def part1(path: PathLike) -> int:
    return sum(plot.area() * plot.perimeter() for plot in find_plots(grid_from_file(path)))


def part2(path: PathLike) -> int:
    return sum(plot.area() * plot.sides() for plot in find_plots(grid_from_file(path)))
