"""Claw Contraption: the cheapest button presses to reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

OFFSET = 10_000_000_000_000
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    """Parse a decimal integer; malformed text gives 0."""
    return int(text) if _INTEGER.fullmatch(text) else 0


@dataclass(frozen=True)
class Equation:
    """The linear equation a*A + b*B = c."""

    a: int
    b: int
    c: int


@dataclass(frozen=True)
class EquationSystem:
    """Two equations in the press counts of buttons A and B."""

    fst: Equation
    snd: Equation

    def solve(self) -> int:
        """Token cost 3*A + B of the unique integer solution, or 0 if there is none."""
        det = self.fst.a * self.snd.b - self.fst.b * self.snd.a
        if det == 0:
            return 0
        det_x = self.fst.c * self.snd.b - self.fst.b * self.snd.c
        det_y = self.fst.a * self.snd.c - self.fst.c * self.snd.a
        if det_x % det or det_y % det:
            return 0
        return 3 * (det_x // det) + det_y // det


def _pair(line: str, prefix: str, x_tag: str, y_tag: str) -> tuple[int, int]:
    parts = line.removeprefix(prefix).split(", ")
    return _atoi(parts[0].removeprefix(x_tag)), _atoi(parts[1].removeprefix(y_tag))


def parse_equation_system(text: str) -> EquationSystem:
    """Parse one machine description of three lines."""
    lines = text.split("\n")
    ax, ay = _pair(lines[0], "Button A: ", "X", "Y")
    bx, by = _pair(lines[1], "Button B: ", "X", "Y")
    px, py = _pair(lines[2], "Prize: ", "X=", "Y=")
    return EquationSystem(Equation(ax, bx, px), Equation(ay, by, py))


def parse_input(text: str) -> list[EquationSystem]:
    """Parse all machines, separated by blank lines."""
    return [parse_equation_system(block) for block in text.rstrip("\n").split("\n\n")]


def part1(text: str) -> int:
    """Fewest tokens to win every winnable prize."""
    return sum(system.solve() for system in parse_input(text))


def part2(text: str) -> int:
    """Fewest tokens once every prize coordinate is shifted by OFFSET."""
    return sum(
        replace(
            system,
            fst=replace(system.fst, c=system.fst.c + OFFSET),
            snd=replace(system.snd, c=system.snd.c + OFFSET),
        ).solve()
        for system in parse_input(text)
    )