"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from dataclasses import dataclass

from aoc2024.coords import CARDINAL_DIRS, Coordinate, Vector

WALL = "#"
FLOOR = "."
BOX = "O"
ROBOT = "@"

_MOVES = {
    "^": CARDINAL_DIRS[0],
    ">": CARDINAL_DIRS[1],
    "v": CARDINAL_DIRS[2],
    "<": CARDINAL_DIRS[3],
}


@dataclass
class Warehouse:
    """The warehouse map and the robot's position on it."""

    grid: list[list[str]]
    robot: Coordinate

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    def _in_bounds(self, coord: Coordinate) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def move_robot(self, move: Vector) -> None:
        """Move the robot one step, pushing any line of boxes if there is room."""
        current = self.robot
        while True:
            current = current.add(move)
            if not self._in_bounds(current):
                return
            tile = self.grid[current.y][current.x]
            if tile == WALL:
                return
            if tile == FLOOR:
                break
        self.grid[current.y][current.x] = BOX
        self.grid[self.robot.y][self.robot.x] = FLOOR
        self.robot = self.robot.add(move)
        self.grid[self.robot.y][self.robot.x] = ROBOT

    def gps_sum(self) -> int:
        """Sum of 100 * row + column over all boxes."""
        return sum(
            100 * y + x
            for y, row in enumerate(self.grid)
            for x, tile in enumerate(row)
            if tile == BOX
        )

    def render(self) -> str:
        """The map as text."""
        return "\n".join("".join(row) for row in self.grid)


def parse_input(text: str) -> tuple[Warehouse, list[Vector]]:
    """Return the warehouse and the robot's moves."""
    lines = text.rstrip("\n").split("\n")
    split = lines.index("") if "" in lines else len(lines) - 1
    grid = [list(line) for line in lines[:split]]
    robot = Coordinate(0, 0)
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == ROBOT:
                robot = Coordinate(x, y)
    moves = [_MOVES[c] for line in lines[split + 1 :] for c in line if c in _MOVES]
    return Warehouse(grid, robot), moves


def part1(text: str) -> int:
    """GPS sum after the robot has made all its moves."""
    warehouse, moves = parse_input(text)
    for move in moves:
        warehouse.move_robot(move)
    print(warehouse.render())
    return warehouse.gps_sum()


def part2(text: str) -> int:
    """The widened warehouse is not modelled; always 0."""
    return 0