"""Hoof It: score hiking trails on a topographic map."""

from __future__ import annotations

from collections import Counter, deque

from aoc2024.cast import to_int

Point = tuple[int, int]
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def parse_input(text: str) -> list[list[int]]:
    """Return the height map as rows of digits."""
    return [[to_int(char) for char in line] for line in text.rstrip("\n").split("\n")]


def _trailheads(grid: list[list[int]]) -> list[Point]:
    return [(x, y) for y, row in enumerate(grid) for x, value in enumerate(row) if value == 0]


def _neighbours(grid: list[list[int]], point: Point):
    height, width = len(grid), len(grid[0])
    x, y = point
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            yield nx, ny


def trail_score(grid: list[list[int]], start: Point, distinct: bool) -> int:
    """Score of the trailhead at ``start`` (x, y).

    With ``distinct`` the score is the number of reachable 9s; otherwise it
    is the number of distinct uphill trails ending at any 9.
    """
    arrivals: Counter[Point] = Counter()
    queue = deque([start])
    while queue:
        node = queue.popleft()
        value = grid[node[1]][node[0]]
        if value == 9:
            arrivals[node] += 1
            continue
        queue.extend(n for n in _neighbours(grid, node) if grid[n[1]][n[0]] == value + 1)
    return len(arrivals) if distinct else sum(arrivals.values())


def part1(text: str) -> int:
    """Sum of trailhead scores (distinct summits reached)."""
    grid = parse_input(text)
    return sum(trail_score(grid, start, True) for start in _trailheads(grid))


def part2(text: str) -> int:
    """Sum of trailhead ratings (distinct trails)."""
    grid = parse_input(text)
    return sum(trail_score(grid, start, False) for start in _trailheads(grid))