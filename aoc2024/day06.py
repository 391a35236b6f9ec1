"""Guard Gallivant: follow a patrolling guard around a lab."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

GUARD = "^"
OBSTACLE = "#"
FLOOR = "."


class Direction(Enum):
    """Heading of the guard; the value is the (dx, dy) step with y pointing up."""

    N = (0, 1)
    E = (1, 0)
    S = (0, -1)
    W = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def rotate_cw(self) -> Direction:
        """The heading after a right turn."""
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]


@dataclass(frozen=True)
class Guard:
    """A guard's starting position (x, y) and heading."""

    position: tuple[int, int]
    direction: Direction = Direction.N

    def simulate(
        self, grid: list[list[str]]
    ) -> tuple[dict[tuple[int, int], list[Direction]], bool]:
        """Walk until leaving the grid or looping.

        Returns the headings seen at each visited position and whether a loop was found.
        """
        height, width = len(grid), len(grid[0])
        (x, y), heading = self.position, self.direction
        visited: dict[tuple[int, int], list[Direction]] = {(x, y): [heading]}
        while True:
            nx, ny = x + heading.dx, y - heading.dy
            if not (0 <= nx < width and 0 <= ny < height):
                return visited, False
            if grid[ny][nx] == OBSTACLE:
                heading = heading.rotate_cw()
            else:
                x, y = nx, ny
            headings = visited.setdefault((x, y), [])
            if heading in headings:
                return visited, True
            headings.append(heading)


def parse_input(text: str) -> tuple[list[list[str]], Guard]:
    """Return the grid as mutable rows and the guard standing on it."""
    grid = [list(line) for line in text.rstrip("\n").split("\n")]
    guard = Guard((0, 0), Direction.N)
    for y, row in enumerate(grid):
        for x, symbol in enumerate(row):
            if symbol == GUARD:
                guard = Guard((x, y), Direction.N)
    return grid, guard


def part1(text: str) -> int:
    """Number of distinct positions the guard visits."""
    grid, guard = parse_input(text)
    visited, _ = guard.simulate(grid)
    return len(visited)


def part2(text: str) -> int:
    """Number of positions where one new obstacle traps the guard in a loop."""
    grid, guard = parse_input(text)
    visited, _ = guard.simulate(grid)
    result = 0
    for x, y in visited:
        if (x, y) == guard.position:
            continue
        grid[y][x] = OBSTACLE
        _, is_loop = guard.simulate(grid)
        if is_loop:
            result += 1
        grid[y][x] = FLOOR
    return result