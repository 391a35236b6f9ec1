"""Chronospatial Computer: run a 3-bit program and find a self-replicating seed."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from aoc2024.cast import to_int, to_int_slice_sep


@dataclass
class CPU:
    """Three registers, a program of 3-bit numbers and the values it has output."""

    reg_a: int
    reg_b: int
    reg_c: int
    instructions: list[int]
    instruction_pointer: int = 0
    output: list[int] = field(default_factory=list)

    def _combo(self, operand: int) -> int:
        if operand < 4:
            return operand
        if operand == 4:
            return self.reg_a
        if operand == 5:
            return self.reg_b
        if operand == 6:
            return self.reg_c
        raise ValueError(f"invalid combo operand {operand}")

    def _div(self, operand: int) -> int:
        shift = self._combo(operand)
        if shift < 0:
            raise ValueError(f"negative shift {shift}")
        numerator = self.reg_a
        if numerator >= 0:
            return numerator >> shift
        return -((-numerator) >> shift)

    def _adv(self, operand: int) -> None:
        self.reg_a = self._div(operand)

    def _bxl(self, operand: int) -> None:
        self.reg_b ^= operand

    def _bst(self, operand: int) -> None:
        self.reg_b = self._combo(operand) % 8

    def _jnz(self, operand: int) -> None:
        if self.reg_a != 0:
            self.instruction_pointer = operand

    def _bxc(self, operand: int) -> None:
        self.reg_b ^= self.reg_c

    def _out(self, operand: int) -> None:
        self.output.append(self._combo(operand) % 8)

    def _bdv(self, operand: int) -> None:
        self.reg_b = self._div(operand)

    def _cdv(self, operand: int) -> None:
        self.reg_c = self._div(operand)

    def run(self) -> list[int]:
        """Execute until the instruction pointer leaves the program; return the output."""
        operations: dict[int, Callable[[int], None]] = {
            0: self._adv,
            1: self._bxl,
            2: self._bst,
            3: self._jnz,
            4: self._bxc,
            5: self._out,
            6: self._bdv,
            7: self._cdv,
        }
        while self.instruction_pointer < len(self.instructions):
            pointer = self.instruction_pointer
            opcode = self.instructions[pointer]
            try:
                operation = operations[opcode]
            except KeyError:
                raise ValueError(f"invalid opcode {opcode}") from None
            operation(self.instructions[pointer + 1])
            if self.instruction_pointer == pointer:
                self.instruction_pointer += 2
        return self.output


def parse_input(text: str) -> CPU:
    """Parse the three register lines and the program line."""
    lines = text.rstrip("\n").split("\n")
    return CPU(
        reg_a=to_int(lines[0].removeprefix("Register A: ")),
        reg_b=to_int(lines[1].removeprefix("Register B: ")),
        reg_c=to_int(lines[2].removeprefix("Register C: ")),
        instructions=to_int_slice_sep(lines[4].removeprefix("Program: "), ","),
    )


def part1(text: str) -> int:
    """Run the program and print its comma-separated output; returns 0."""
    cpu = parse_input(text)
    print(",".join(str(value) for value in cpu.run()))
    return 0


def part2(text: str) -> int:
    """Lowest value of register A for which the program outputs itself."""
    base = parse_input(text)
    program = base.instructions
    seed = 0
    for start in reversed(range(len(program))):
        seed <<= 3
        while True:
            cpu = replace(base, reg_a=seed, output=[])
            if cpu.run() == program[start:]:
                break
            seed += 1
    return seed