from aoc2024.coords import Coordinate
from aoc2024.day18 import first_blocking, parse_input, part1, part2, shortest_path

EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0"""


def test_part1_example():
    assert part1(EXAMPLE, 7, 7, 12) == 22


def test_part2_example_returns_zero_and_prints_blocker(capsys):
    assert part2(EXAMPLE, 7, 7) == 0
    assert capsys.readouterr().out.strip() == "6,1"


def test_parse_input():
    coords = parse_input(EXAMPLE)
    assert len(coords) == 25
    assert coords[0] == Coordinate(5, 4)
    assert coords[-1] == Coordinate(2, 0)


def test_shortest_path_empty_grid():
    assert shortest_path(set(), 7, 7) == 12


def test_shortest_path_unreachable():
    walls = {Coordinate(1, 0), Coordinate(0, 1)}
    assert shortest_path(walls, 3, 3) == -1


def test_first_blocking_example():
    assert first_blocking(parse_input(EXAMPLE), 7, 7) == Coordinate(6, 1)


def test_first_blocking_none_when_never_blocked():
    assert first_blocking([Coordinate(3, 3)], 7, 7) is None