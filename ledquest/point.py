"""Grid coordinates and small arithmetic helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A position or offset on the board grid."""

    x: int
    y: int

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: object) -> Point:
        if not isinstance(factor, int):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)


def sgn(x: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``x``."""
    if x == 0:
        return 0
    return -1 if x < 0 else 1