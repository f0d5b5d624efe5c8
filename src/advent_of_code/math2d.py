"""Integer 2-D vectors."""

from __future__ import annotations

from typing import NamedTuple


class Vec2(NamedTuple):
    x: int
    y: int

    def __add__(self, other: Vec2) -> Vec2:  # type: ignore[override]
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Vec2:  # type: ignore[override]
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> Vec2:
        return Vec2(self.x // divisor, self.y // divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> int:
        return self.x * other.x + self.y * other.y

    def norm_sq(self) -> int:
        return self.x * self.x + self.y * self.y

    def manhattan(self) -> int:
        return abs(self.x) + abs(self.y)

    def orthogonal(self) -> Vec2:
        """Rotate by 90 degrees: (x, y) -> (-y, x)."""
        return Vec2(-self.y, self.x)
