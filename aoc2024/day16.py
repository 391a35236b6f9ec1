"""Reindeer Maze: cheapest routes through a maze where turning is expensive."""

from __future__ import annotations

from collections import deque

from aoc2024.coords import Coordinate, Vector
from aoc2024.priority_queue import PriorityQueue

WALL = "#"
STEP_COST = 1
TURN_COST = 1001
EAST = Vector(1, 0)

State = tuple[Coordinate, Vector]


def parse_input(text: str) -> tuple[list[str], Coordinate, Coordinate]:
    """Return the maze rows, the start tile and the end tile."""
    grid = text.rstrip("\n").split("\n")
    start = end = Coordinate(0, 0)
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == "S":
                start = Coordinate(x, y)
            if char == "E":
                end = Coordinate(x, y)
    return grid, start, end


def _moves(grid: list[str], state: State):
    """Yield the successor states of ``state`` with the cost of reaching each."""
    height, width = len(grid), len(grid[0])
    position, heading = state
    for direction, cost in (
        (heading, STEP_COST),
        (heading.rotate_cw(), TURN_COST),
        (heading.rotate_ccw(), TURN_COST),
    ):
        target = position.add(direction)
        if 0 <= target.x < width and 0 <= target.y < height and grid[target.y][target.x] != WALL:
            yield (target, direction), cost


def lowest_score(grid: list[str], start: Coordinate, end: Coordinate) -> int:
    """Lowest score from ``start`` facing east to ``end``, or -1 if unreachable."""
    queue: PriorityQueue[State] = PriorityQueue()
    seen: set[State] = set()
    queue.insert((start, EAST), 0)
    while not queue.is_empty():
        state, distance = queue.delete_min()
        if state[0] == end:
            return distance
        if state in seen:
            continue
        seen.add(state)
        for next_state, cost in _moves(grid, state):
            queue.insert(next_state, distance + cost)
    return -1


def best_path_tiles(grid: list[str], start: Coordinate, end: Coordinate) -> int:
    """Number of tiles that lie on any lowest-score route from start to end."""
    queue: PriorityQueue[State] = PriorityQueue()
    seen: set[State] = set()
    came_from: dict[State, list[State]] = {}
    min_cost: dict[State, int] = {}
    best = None
    end_states: list[State] = []

    start_state = (start, EAST)
    min_cost[start_state] = 0
    queue.insert(start_state, 0)
    while not queue.is_empty():
        state, distance = queue.delete_min()
        if state[0] == end:
            if best is not None and distance > best:
                break
            best = distance
            end_states.append(state)
        if state in seen:
            continue
        seen.add(state)
        for next_state, cost in _moves(grid, state):
            next_cost = distance + cost
            known = min_cost.get(next_state)
            if known is None or next_cost <= known:
                min_cost[next_state] = next_cost
                came_from.setdefault(next_state, []).append(state)
                queue.insert(next_state, next_cost)

    reached: set[State] = set(end_states)
    pending = deque(end_states)
    while pending:
        for previous in came_from.get(pending.popleft(), ()):
            if previous not in reached:
                reached.add(previous)
                pending.append(previous)
    return len({position for position, _ in reached})


def part1(text: str) -> int:
    """Lowest possible score."""
    grid, start, end = parse_input(text)
    return lowest_score(grid, start, end)


def part2(text: str) -> int:
    """Tiles on at least one of the best routes."""
    grid, start, end = parse_input(text)
    return best_path_tiles(grid, start, end)