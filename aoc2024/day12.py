"""Garden Groups: price fences around garden regions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

Point = tuple[int, int]
_DIRS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _count_runs(values: list[int]) -> int:
    present = set(values)
    return sum(1 for v in present if v - 1 not in present)


@dataclass
class Region:
    """A connected set of same-plant plots, as (x, y) points."""

    plots: list[Point] = field(default_factory=list)

    def area(self) -> int:
        """Number of plots."""
        return len(self.plots)

    def perimeter(self) -> int:
        """Number of plot edges not shared with another plot of the region."""
        plots = set(self.plots)
        return sum(
            1 for x, y in self.plots for dx, dy in _DIRS if (x + dx, y + dy) not in plots
        )

    def sides(self, width: int, height: int) -> int:
        """Number of straight fence sides around the region."""
        plots = set(self.plots)
        total = 0
        for dy in (-1, 1):
            for y in range(height):
                xs = [px for px, py in self.plots if py == y and (px, py + dy) not in plots]
                total += _count_runs(xs)
        for dx in (-1, 1):
            for x in range(width):
                ys = [py for px, py in self.plots if px == x and (px + dx, py) not in plots]
                total += _count_runs(ys)
        return total


def parse_input(text: str) -> list[str]:
    """Return the garden as a list of rows."""
    return text.rstrip("\n").split("\n")


def _build_region(grid: list[str], start: Point) -> Region:
    height, width = len(grid), len(grid[0])
    plant = grid[start[1]][start[0]]
    region = Region([start])
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _DIRS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height) or (nx, ny) in seen:
                continue
            if grid[ny][nx] == plant:
                seen.add((nx, ny))
                region.plots.append((nx, ny))
                queue.append((nx, ny))
    return region


def construct_regions(grid: list[str]) -> list[Region]:
    """Split the garden into connected regions, in reading order of their first plot."""
    regions: list[Region] = []
    assigned: set[Point] = set()
    for y, row in enumerate(grid):
        for x in range(len(row)):
            if (x, y) in assigned:
                continue
            region = _build_region(grid, (x, y))
            regions.append(region)
            assigned.update(region.plots)
    return regions


def part1(text: str) -> int:
    """Total price using area times perimeter."""
    grid = parse_input(text)
    return sum(r.area() * r.perimeter() for r in construct_regions(grid))


def part2(text: str) -> int:
    """Total price using area times number of sides."""
    grid = parse_input(text)
    height, width = len(grid), len(grid[0])
    return sum(r.area() * r.sides(width, height) for r in construct_regions(grid))