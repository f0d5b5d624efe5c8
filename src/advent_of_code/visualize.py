"""Pygame viewer for occupancy grids (day 14 robots, day 15 warehouse frames).

Needs the optional `viz` extra: pip install advent-of-code-2024[viz]
"""

import argparse
import time
from typing import Iterable, Iterator

import numpy as np
import pygame

from advent_of_code import day14
from advent_of_code.config import input_path


def draw_cells(
    surface: "pygame.Surface",
    cells: np.ndarray,
    cell_color: str = "green",
    background_color: str = "black",
    border_size: int = 1,
) -> int:
    """Paint every truthy cell of a (rows, cols) array; returns how many were drawn."""
    rows, cols = cells.shape
    window_width, window_height = surface.get_size()
    cell_height = window_height // rows
    cell_width = window_width // cols

    surface.fill(pygame.Color(background_color))
    fill = pygame.Color(cell_color)
    width = cell_width - 2 * border_size
    height = cell_height - 2 * border_size
    if width <= 0 or height <= 0:
        # Cells too small for a border
        width, height, border_size = max(cell_width, 1), max(cell_height, 1), 0

    drawn = 0
    for row, col in zip(*np.nonzero(cells)):
        x = col * cell_width + border_size
        y = row * cell_height + border_size
        pygame.draw.rect(surface, fill, (x, y, width, height))
        drawn += 1
    return drawn


def robot_frames(robots: day14.Robots, torus: day14.Torus, start: int, count: int) -> Iterator[np.ndarray]:
    for seconds in range(start, start + count):
        positions = day14.positions_after(robots, seconds, torus)
        cells = np.zeros((torus.height, torus.width), dtype=bool)
        cells[positions[:, 1], positions[:, 0]] = True
        yield cells


def run_display(
    frames: Iterable[np.ndarray],
    window_height: int = 600,
    window_width: int = 600,
    background_color: str = "black",
    cell_color: str = "green",
    pause: float = 0.1,
    caption: str = "Advent of Code 2024",
) -> None:
    pygame.init()
    window = pygame.display.set_mode((window_width, window_height))
    pygame.display.set_caption(caption)

    running = True
    frames = iter(frames)
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False

        cells = next(frames, None)
        if cells is None:
            break
        draw_cells(window, cells, cell_color=cell_color, background_color=background_color)
        pygame.display.flip()
        time.sleep(pause)

    pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Animate the day 14 robots around the picture.")
    parser.add_argument("--input", help="Puzzle input (defaults to the day 14 input)")
    parser.add_argument("--frames", type=int, default=20, help="Number of seconds to show")
    parser.add_argument("--pause", type=float, default=0.2, help="Seconds between frames")
    args = parser.parse_args()

    robots = day14.robots_from_file(args.input or input_path(14))
    picture = day14.picture_time(robots, day14.BATHROOM)
    run_display(
        robot_frames(robots, day14.BATHROOM, max(picture - args.frames // 2, 0), args.frames),
        window_height=824,
        window_width=808,
        cell_color="lime",
        pause=args.pause,
        caption=f"Restroom Redoubt around {picture}s",
    )


if __name__ == "__main__":
    main()
