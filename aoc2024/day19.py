"""Linen Layout: arrange towel patterns into designs."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def parse_input(text: str) -> tuple[list[str], list[str]]:
    """Return the available towel patterns and the wanted designs."""
    lines = text.rstrip("\n").split("\n")
    patterns = [p.strip() for p in lines[0].split(",")]
    return [p for p in patterns if p], lines[2:]


def count_arrangements(design: str, patterns: Sequence[str]) -> int:
    """Number of ways to build ``design`` from the patterns, reuse allowed."""
    usable = tuple(p for p in patterns if p)

    @lru_cache(maxsize=None)
    def ways(start: int) -> int:
        if start == len(design):
            return 1
        return sum(ways(start + len(p)) for p in usable if design.startswith(p, start))

    return ways(0)


def part1(text: str) -> int:
    """Number of designs that can be built at all."""
    patterns, designs = parse_input(text)
    return sum(1 for d in designs if count_arrangements(d, patterns) > 0)


def part2(text: str) -> int:
    """Total number of arrangements over all designs."""
    patterns, designs = parse_input(text)
    return sum(count_arrangements(d, patterns) for d in designs)