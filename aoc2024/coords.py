"""Immutable 2D grid coordinates and direction vectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """A 2D displacement."""

    x: int
    y: int

    def rotate_cw(self) -> Vector:
        """Return the vector rotated a quarter turn, (x, y) -> (y, -x)."""
        return Vector(self.y, -self.x)

    def rotate_ccw(self) -> Vector:
        """Return the vector rotated a quarter turn, (x, y) -> (-y, x)."""
        return Vector(-self.y, self.x)

    def mirror(self) -> Vector:
        """Return the vector pointing the opposite way."""
        return Vector(-self.x, -self.y)


CARDINAL_DIRS: tuple[Vector, ...] = (
    Vector(0, -1),
    Vector(1, 0),
    Vector(0, 1),
    Vector(-1, 0),
)

INTERCARDINAL_DIRS: tuple[Vector, ...] = CARDINAL_DIRS + (
    Vector(1, -1),
    Vector(1, 1),
    Vector(-1, 1),
    Vector(-1, -1),
)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A position on a 2D grid."""

    x: int
    y: int

    def add(self, vector: Vector) -> Coordinate:
        """Return this position moved by ``vector``."""
        return Coordinate(self.x + vector.x, self.y + vector.y)

    def sub(self, vector: Vector) -> Coordinate:
        """Return this position moved against ``vector``."""
        return Coordinate(self.x - vector.x, self.y - vector.y)

    def mul(self, factor: int) -> Coordinate:
        """Return this position with both components scaled by ``factor``."""
        return Coordinate(self.x * factor, self.y * factor)

    def cardinal_neighbours(self) -> list[Coordinate]:
        """Return the four orthogonal neighbours, in CARDINAL_DIRS order."""
        return [self.add(d) for d in CARDINAL_DIRS]

    def intercardinal_neighbours(self) -> list[Coordinate]:
        """Return all eight neighbours, in INTERCARDINAL_DIRS order."""
        return [self.add(d) for d in INTERCARDINAL_DIRS]