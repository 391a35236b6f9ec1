"""Ceres Search: find XMAS words and X-shaped MAS crosses in a letter grid."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Compass directions; the value is the (dx, dy) step with y pointing up."""

    N = (0, 1)
    NE = (1, 1)
    E = (1, 0)
    SE = (1, -1)
    S = (0, -1)
    SW = (-1, -1)
    W = (-1, 0)
    NW = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


DIAGONALS = (Direction.NE, Direction.SE, Direction.SW, Direction.NW)


def _target(start: tuple[int, int], direction: Direction, steps: int) -> tuple[int, int]:
    x, y = start
    return x + steps * direction.dx, y - steps * direction.dy


def parse_input(text: str) -> list[str]:
    """Return the grid as a list of rows."""
    return text.rstrip("\n").split("\n")


def search_in_grid(
    grid: list[str], term: str, start: tuple[int, int], direction: Direction
) -> bool:
    """True if ``term`` is spelled from ``start`` (x, y) towards ``direction``."""
    end_x, end_y = _target(start, direction, len(term) - 1)
    if end_x < 0 or end_y < 0 or end_x >= len(grid[0]) or end_y >= len(grid):
        return False
    for index, char in enumerate(term):
        x, y = _target(start, direction, index)
        if grid[y][x] != char:
            return False
    return True


def _cells(grid: list[str]):
    for y, row in enumerate(grid):
        for x in range(len(row)):
            yield x, y


def part1(text: str) -> int:
    """Number of occurrences of XMAS in any of the eight directions."""
    grid = parse_input(text)
    return sum(
        1
        for start in _cells(grid)
        for direction in Direction
        if search_in_grid(grid, "XMAS", start, direction)
    )


def part2(text: str) -> int:
    """Number of cells where two diagonal MAS words cross."""
    grid = parse_input(text)
    found_centers: dict[tuple[int, int], Direction] = {}
    crossed: set[tuple[int, int]] = set()
    for start in _cells(grid):
        for direction in DIAGONALS:
            if not search_in_grid(grid, "MAS", start, direction):
                continue
            center = _target(start, direction, 1)
            previous = found_centers.get(center)
            if previous is None:
                found_centers[center] = direction
            elif previous.value != (-direction.dx, -direction.dy):
                crossed.add(center)
    return len(crossed)