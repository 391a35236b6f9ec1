"""Mull It Over: evaluate multiplication instructions in corrupted memory."""

from __future__ import annotations

import re
from dataclasses import dataclass

from aoc2024.cast import to_int

_MUL = re.compile(r"(mul)\(([0-9]{1,3}),([0-9]{1,3})\)")
_INSTRUCTION = re.compile(r"mul\([0-9]{1,3},[0-9]{1,3}\)|do\(\)|don't\(\)")


@dataclass(frozen=True)
class Operation:
    """One instruction found in memory: "mul", "do" or "don't"."""

    raw: str
    operation: str
    operand1: int = 0
    operand2: int = 0

    def evaluate(self) -> int:
        """Product of the two operands."""
        return self.operand1 * self.operand2


def _mul_from_match(match: re.Match[str]) -> Operation:
    return Operation(
        match.group(0), match.group(1), to_int(match.group(2)), to_int(match.group(3))
    )


def parse_operations(text: str) -> list[Operation]:
    """Return every mul, do and don't instruction in order of appearance."""
    operations = []
    for match in _INSTRUCTION.finditer(text):
        raw = match.group(0)
        if raw.startswith("mul"):
            operations.append(_mul_from_match(_MUL.search(raw)))
        elif raw.startswith("don't"):
            operations.append(Operation(raw, "don't"))
        else:
            operations.append(Operation(raw, "do"))
    return operations


def part1(text: str) -> int:
    """Sum of all well-formed multiplications."""
    return sum(_mul_from_match(m).evaluate() for m in _MUL.finditer(text))


def part2(text: str) -> int:
    """Sum of multiplications that are enabled by do()/don't()."""
    enabled = True
    result = 0
    for operation in parse_operations(text):
        if operation.operation == "do":
            enabled = True
        elif operation.operation == "don't":
            enabled = False
        elif operation.operation == "mul" and enabled:
            result += operation.evaluate()
    return result