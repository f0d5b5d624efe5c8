"""Headless checks of the pygame renderer."""

from __future__ import annotations

import os

import numpy as np
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from advent_of_code import day14, visualize  # noqa: E402


def test_draw_cells_paints_occupied_cells() -> None:
    surface = pygame.Surface((40, 20))
    cells = np.zeros((2, 4), dtype=bool)
    cells[0, 0] = cells[1, 3] = True
    assert visualize.draw_cells(surface, cells, cell_color="red", background_color="black") == 2
    assert tuple(surface.get_at((5, 5)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((35, 15)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((15, 5)))[:3] == (0, 0, 0)


def test_robot_frames(data) -> None:
    torus = day14.Torus(11, 7)
    robots = day14.robots_from_file(data("day14.txt"))
    frames = list(visualize.robot_frames(robots, torus, start=100, count=2))
    assert len(frames) == 2
    assert frames[0].shape == (7, 11)
    assert frames[0][0, 6] and frames[0][0, 9]
