"""Bridge Repair: find operator combinations that satisfy calibration equations."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from itertools import product

from aoc2024.cast import to_int, to_int_slice

Operator = Callable[[int, int], int]


@dataclass(frozen=True)
class Equation:
    """A test value and the operands that should combine into it."""

    value: int
    operands: list[int]


def parse_input(text: str) -> list[Equation]:
    """Return one equation per line of the form ``value: a b c``."""
    equations = []
    for line in text.rstrip("\n").split("\n"):
        parts = line.split(":")
        equations.append(Equation(to_int(parts[0]), to_int_slice(parts[1])))
    return equations


def concat_ints(a: int, b: int) -> int:
    """Join the decimal digits of ``a`` and ``b``; a malformed result gives 0."""
    try:
        return int(str(a) + str(b))
    except ValueError:
        return 0


def _solvable(equation: Equation, operators: Sequence[Operator]) -> bool:
    first, *rest = equation.operands
    for chosen in product(operators, repeat=len(rest)):
        value = first
        for op, operand in zip(chosen, rest):
            value = op(value, operand)
        if value == equation.value:
            return True
    return False


def _total(text: str, operators: Sequence[Operator]) -> int:
    return sum(eq.value for eq in parse_input(text) if _solvable(eq, operators))


def part1(text: str) -> int:
    """Sum of test values reachable with + and *."""
    return _total(text, (operator.add, operator.mul))


def part2(text: str) -> int:
    """Sum of test values reachable with +, * and concatenation."""
    return _total(text, (operator.add, operator.mul, concat_ints))