"""Race Condition: count cheats that shortcut a racetrack through walls."""

from __future__ import annotations

from aoc2024.coords import Coordinate
from aoc2024.priority_queue import PriorityQueue

WALL = "#"
MIN_SAVING = 100
BASIC_JUMP = 2
ADVANCED_JUMP = 20


def parse_input(text: str) -> tuple[list[str], Coordinate, Coordinate]:
    """Return the track rows, the start and the end."""
    grid = text.rstrip("\n").split("\n")
    start = end = Coordinate(0, 0)
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == "S":
                start = Coordinate(x, y)
            if char == "E":
                end = Coordinate(x, y)
    return grid, start, end


def distance_map(grid: list[str], start: Coordinate) -> dict[Coordinate, int]:
    """Distance from ``start`` to every reachable track position."""
    height, width = len(grid), len(grid[0])
    queue: PriorityQueue[Coordinate] = PriorityQueue()
    distances: dict[Coordinate, int] = {}
    queue.insert(start, 0)
    while not queue.is_empty():
        node, distance = queue.delete_min()
        if node in distances:
            continue
        distances[node] = distance
        for n in node.cardinal_neighbours():
            if 0 <= n.x < width and 0 <= n.y < height and grid[n.y][n.x] != WALL:
                queue.insert(n, distance + 1)
    return distances


def count_cheats(
    grid: list[str], dist_map: dict[Coordinate, int], max_jump: int, min_saving: int
) -> int:
    """Number of cheats of at most ``max_jump`` steps saving at least ``min_saving``."""
    height, width = len(grid), len(grid[0])
    count = 0
    for coord, dist in dist_map.items():
        for dx in range(-max_jump, max_jump + 1):
            remaining = max_jump - abs(dx)
            for dy in range(-remaining, remaining + 1):
                target = Coordinate(coord.x + dx, coord.y + dy)
                if not (0 <= target.x < width and 0 <= target.y < height):
                    continue
                target_dist = dist_map.get(target)
                if target_dist is None or target_dist >= dist:
                    continue
                if dist - target_dist - abs(dx) - abs(dy) >= min_saving:
                    count += 1
    return count


def _solve(text: str, max_jump: int, min_saving: int) -> int:
    grid, _, end = parse_input(text)
    return count_cheats(grid, distance_map(grid, end), max_jump, min_saving)


def part1(text: str, min_saving: int = MIN_SAVING) -> int:
    """Cheats of up to 2 steps saving at least ``min_saving``."""
    return _solve(text, BASIC_JUMP, min_saving)


def part2(text: str, min_saving: int = MIN_SAVING) -> int:
    """Cheats of up to 20 steps saving at least ``min_saving``."""
    return _solve(text, ADVANCED_JUMP, min_saving)