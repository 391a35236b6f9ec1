"""RAM Run: find a path through a memory grid as bytes fall into it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from aoc2024.cast import to_int
from aoc2024.coords import Coordinate

SIZE = 71
DRAW_COUNT = 1024


def parse_input(text: str) -> list[Coordinate]:
    """Return the falling byte positions, one ``x,y`` per line."""
    coords = []
    for line in text.rstrip("\n").split("\n"):
        parts = line.split(",")
        coords.append(Coordinate(to_int(parts[0]), to_int(parts[1])))
    return coords


def shortest_path(blocked: Iterable[Coordinate], width: int, height: int) -> int:
    """Steps from the top-left to the bottom-right corner, or -1 if unreachable."""
    walls = set(blocked)
    start = Coordinate(0, 0)
    end = Coordinate(width - 1, height - 1)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for n in node.cardinal_neighbours():
            if not (0 <= n.x < width and 0 <= n.y < height):
                continue
            if n in dist or n in walls:
                continue
            dist[n] = dist[node] + 1
            queue.append(n)
    return dist.get(end, -1)


def first_blocking(
    coords: Sequence[Coordinate], width: int, height: int
) -> Coordinate | None:
    """The first byte after whose fall the exit is unreachable, or None."""
    if shortest_path(coords, width, height) != -1:
        return None
    if shortest_path((), width, height) == -1:
        return None
    low, high = 1, len(coords)
    while low < high:
        mid = (low + high) // 2
        if shortest_path(coords[:mid], width, height) == -1:
            high = mid
        else:
            low = mid + 1
    return coords[low - 1]


def part1(
    text: str, width: int = SIZE, height: int = SIZE, count: int = DRAW_COUNT
) -> int:
    """Shortest path after the first ``count`` bytes have fallen."""
    coords = parse_input(text)
    return shortest_path(coords[:count], width, height)


def part2(text: str, width: int = SIZE, height: int = SIZE) -> int:
    """Print the first byte that cuts off the exit; returns 0."""
    blocking = first_blocking(parse_input(text), width, height)
    if blocking is not None:
        print(f"{blocking.x},{blocking.y}")
    return 0