"""Command line runner for the daily puzzle solutions."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from types import ModuleType

from aoc2024 import (
    day01, day02, day03, day04, day05, day06, day07, day08, day09, day10,
    day11, day12, day13, day14, day15, day16, day17, day18, day19, day20,
)

YEAR = 2024

_DAYS: dict[int, ModuleType] = {
    1: day01, 2: day02, 3: day03, 4: day04, 5: day05,
    6: day06, 7: day07, 8: day08, 9: day09, 10: day10,
    11: day11, 12: day12, 13: day13, 14: day14, 15: day15,
    16: day16, 17: day17, 18: day18, 19: day19, 20: day20,
}


def solve(day: int, part: int, text: str) -> int:
    """Run part 1 of ``day`` when ``part`` is 1, otherwise part 2."""
    module = _DAYS.get(day)
    if module is None:
        raise ValueError(f"no solution for day {day}")
    return module.part1(text) if part == 1 else module.part2(text)


def _default_input(day: int) -> Path:
    return Path(str(YEAR)) / f"day{day:02d}" / "input.txt"


def _read_input(path: Path) -> str:
    text = path.read_text(encoding="utf-8").rstrip("\n")
    if not text:
        raise ValueError(f"empty input file: {path}")
    return text


def main(argv: list[str] | None = None) -> int:
    """Solve one part of one day and print the answer."""
    parser = argparse.ArgumentParser(description="Run a puzzle solution.")
    parser.add_argument("day", type=int, help="day number")
    parser.add_argument("-part", "--part", type=int, default=1, help="part 1 or 2")
    parser.add_argument("-input", "--input", type=Path, default=None,
                        help="input file (default: <year>/dayNN/input.txt)")
    args = parser.parse_args(argv)

    path = args.input if args.input is not None else _default_input(args.day)
    try:
        text = _read_input(path)
        print("Running part", args.part)
        answer = solve(args.day, args.part, text)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("Output:", answer)
    return 0