from aoc2024.day08 import antinodes_advanced, antinodes_basic, parse_input, part1, part2, solve

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


def test_antinodes_basic_both_inside():
    assert antinodes_basic((4, 3), (5, 5), 10, 10) == [(3, 1), (6, 7)]


def test_antinodes_basic_clipped():
    assert antinodes_basic((0, 0), (1, 1), 3, 3) == [(2, 2)]


def test_antinodes_advanced_line():
    nodes = antinodes_advanced((0, 0), (1, 1), 3, 3)
    assert set(nodes) == {(0, 0), (1, 1), (2, 2)}


def test_solve_ignores_floor_and_hash():
    grid = parse_input("#..\n...\n...")
    assert solve(grid, antinodes_basic) == 0