import pytest

from aoc2024.day17 import CPU, parse_input, part1, part2

EXAMPLE = """Register A: 0
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0"""


def test_part1_example_returns_zero_and_prints_output(capsys):
    assert part1(EXAMPLE) == 0
    assert capsys.readouterr().out.strip() == "0"


def test_part2_example():
    assert part2(EXAMPLE) == 117440


def test_parse_input():
    cpu = parse_input(EXAMPLE)
    assert (cpu.reg_a, cpu.reg_b, cpu.reg_c) == (0, 0, 0)
    assert cpu.instructions == [0, 3, 5, 4, 3, 0]
    assert cpu.instruction_pointer == 0


def test_run_program_output():
    cpu = CPU(729, 0, 0, [0, 1, 5, 4, 3, 0])
    assert cpu.run() == [4, 6, 3, 5, 6, 3, 5, 2, 1, 0]


def test_bst_from_register_c():
    cpu = CPU(0, 0, 9, [2, 6])
    cpu.run()
    assert cpu.reg_b == 1


def test_out_literals_and_registers():
    cpu = CPU(10, 0, 0, [5, 0, 5, 1, 5, 4])
    assert cpu.run() == [0, 1, 2]


def test_loop_until_a_is_zero():
    cpu = CPU(2024, 0, 0, [0, 1, 5, 4, 3, 0])
    assert cpu.run() == [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]
    assert cpu.reg_a == 0


def test_bxl():
    cpu = CPU(0, 29, 0, [1, 7])
    cpu.run()
    assert cpu.reg_b == 26


def test_bxc():
    cpu = CPU(0, 2024, 43690, [4, 0])
    cpu.run()
    assert cpu.reg_b == 44354


def test_invalid_combo_operand_raises():
    cpu = CPU(1, 0, 0, [5, 7])
    with pytest.raises(ValueError):
        cpu.run()