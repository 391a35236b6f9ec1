"""Restroom Redoubt: robots wandering on a wrapping grid."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable
from dataclasses import dataclass

from aoc2024.cast import to_int
from aoc2024.coords import CARDINAL_DIRS, Coordinate, Vector

WIDTH = 101
HEIGHT = 103
SAFETY_SECONDS = 100
SEARCH_SECONDS = 10_000
BIG_REGION = 25
EMPTY = "."


@dataclass(frozen=True)
class Robot:
    """A robot's position and its velocity per second."""

    position: Coordinate
    velocity: Vector

    def step(self, width: int, height: int) -> Robot:
        """The robot one second later, wrapping around the grid edges."""
        moved = self.position.add(self.velocity)
        return Robot(Coordinate(moved.x % width, moved.y % height), self.velocity)


def parse_input(text: str) -> list[Robot]:
    """Parse lines of the form ``p=x,y v=dx,dy``."""
    robots = []
    for line in text.rstrip("\n").split("\n"):
        position, velocity = line.lstrip("p=").split(" v=")
        px, py = position.split(",")[:2]
        vx, vy = velocity.split(",")[:2]
        robots.append(
            Robot(Coordinate(to_int(px), to_int(py)), Vector(to_int(vx), to_int(vy)))
        )
    return robots


def _grid_rows(robots: Iterable[Robot], width: int, height: int) -> list[str]:
    presence = Counter(robot.position for robot in robots)
    return [
        "".join(
            chr(presence[Coordinate(x, y)] + ord("0"))
            if Coordinate(x, y) in presence
            else EMPTY
            for x in range(width)
        )
        for y in range(height)
    ]


def render_grid(robots: Iterable[Robot], width: int, height: int) -> str:
    """Draw the grid: robot counts as digits, empty tiles as dots."""
    return "\n".join(_grid_rows(robots, width, height))


def _has_big_region(rows: list[str], limit: int) -> bool:
    """True if some connected area of equal non-empty tiles exceeds ``limit``."""
    height, width = len(rows), len(rows[0])
    seen: set[tuple[int, int]] = set()
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == EMPTY or (x, y) in seen:
                continue
            seen.add((x, y))
            queue = deque([(x, y)])
            size = 0
            while queue:
                cx, cy = queue.popleft()
                size += 1
                for d in CARDINAL_DIRS:
                    nx, ny = cx + d.x, cy + d.y
                    if (
                        0 <= nx < width
                        and 0 <= ny < height
                        and (nx, ny) not in seen
                        and rows[ny][nx] == char
                    ):
                        seen.add((nx, ny))
                        queue.append((nx, ny))
            if size > limit:
                return True
    return False


def part1(text: str, width: int = WIDTH, height: int = HEIGHT) -> int:
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    robots = parse_input(text)
    for _ in range(SAFETY_SECONDS):
        robots = [robot.step(width, height) for robot in robots]
    mid_x, mid_y = width // 2, height // 2
    quadrants = Counter(
        (robot.position.x > mid_x, robot.position.y > mid_y)
        for robot in robots
        if robot.position.x != mid_x and robot.position.y != mid_y
    )
    return (
        quadrants[(False, False)]
        * quadrants[(True, False)]
        * quadrants[(False, True)]
        * quadrants[(True, True)]
    )


def part2(text: str, width: int = WIDTH, height: int = HEIGHT) -> int:
    """First second at which the robots form a large connected picture, or 0."""
    robots = parse_input(text)
    for second in range(1, SEARCH_SECONDS + 1):
        robots = [robot.step(width, height) for robot in robots]
        rows = _grid_rows(robots, width, height)
        if _has_big_region(rows, BIG_REGION):
            print("\n".join(rows))
            return second
    return 0