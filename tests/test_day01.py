import pytest

from aoc2024.day01 import parse_input, part1, part2

EXAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3"""


def test_parse_input():
    assert parse_input(EXAMPLE) == ([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])


def test_parse_input_ignores_trailing_newline():
    assert parse_input(EXAMPLE + "\n") == parse_input(EXAMPLE)


def test_part1_example():
    assert part1(EXAMPLE) == 11


def test_part2_example():
    assert part2(EXAMPLE) == 31


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part1("3   x")