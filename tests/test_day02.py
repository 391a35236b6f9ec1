import pytest

from aoc2024.day02 import is_any_safe, is_safe, parse_input, part1, part2

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""


def test_parse_input():
    parsed = parse_input(EXAMPLE)
    assert len(parsed) == 6
    assert parsed[0] == [7, 6, 4, 2, 1]


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 4


@pytest.mark.parametrize(
    "levels, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([5], True),
        ([], True),
    ],
)
def test_is_safe(levels, expected):
    assert is_safe(levels) is expected


@pytest.mark.parametrize(
    "levels, expected",
    [
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
    ],
)
def test_is_any_safe(levels, expected):
    assert is_any_safe(levels) is expected