"""Resonant Collinearity: count antinodes created by antenna pairs."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from itertools import combinations

Point = tuple[int, int]
AntinodeFunc = Callable[[Point, Point, int, int], list[Point]]


def _in_bounds(point: Point, width: int, height: int) -> bool:
    x, y = point
    return 0 <= x < width and 0 <= y < height


def antinodes_basic(a: Point, b: Point, width: int, height: int) -> list[Point]:
    """The two in-bounds points mirrored beyond each antenna of the pair."""
    dx, dy = a[0] - b[0], a[1] - b[1]
    candidates = [(a[0] + dx, a[1] + dy), (b[0] - dx, b[1] - dy)]
    return [p for p in candidates if _in_bounds(p, width, height)]


def antinodes_advanced(a: Point, b: Point, width: int, height: int) -> list[Point]:
    """Every in-bounds grid point on the line through the pair, at multiples of their offset."""
    dx, dy = a[0] - b[0], a[1] - b[1]
    nodes: list[Point] = []
    for origin, sign in ((a, 1), (b, -1)):
        node = origin
        while _in_bounds(node, width, height):
            nodes.append(node)
            node = (node[0] + sign * dx, node[1] + sign * dy)
    return nodes


def solve(grid: list[str], antinode_func: AntinodeFunc) -> int:
    """Number of distinct antinode positions over all same-frequency pairs."""
    height, width = len(grid), len(grid[0])
    frequencies: dict[str, list[Point]] = defaultdict(list)
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char > ".":
                frequencies[char].append((x, y))
    antinodes = {
        node
        for locations in frequencies.values()
        for a, b in combinations(locations, 2)
        for node in antinode_func(a, b, width, height)
    }
    return len(antinodes)


def parse_input(text: str) -> list[str]:
    """Return the grid as a list of rows."""
    return text.rstrip("\n").split("\n")


def part1(text: str) -> int:
    """Antinodes at twice the distance of each pair."""
    return solve(parse_input(text), antinodes_basic)


def part2(text: str) -> int:
    """Antinodes at every position in line with a pair."""
    return solve(parse_input(text), antinodes_advanced)