from aoc2024.coords import Coordinate, Vector
from aoc2024.day14 import Robot, parse_input, part1, part2, render_grid

EXAMPLE = """p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3"""


def test_part1_example():
    assert part1(EXAMPLE, 11, 7) == 12


def test_part2_example_finds_nothing():
    assert part2(EXAMPLE, 11, 7) == 0


def test_parse_input():
    robots = parse_input(EXAMPLE)
    assert len(robots) == 12
    assert robots[0] == Robot(Coordinate(0, 4), Vector(3, -3))
    assert robots[-1] == Robot(Coordinate(9, 5), Vector(-3, -3))


def test_robot_wraps_around():
    robot = Robot(Coordinate(2, 4), Vector(2, -3))
    for _ in range(5):
        robot = robot.step(11, 7)
    assert robot.position == Coordinate(1, 3)
    assert robot.velocity == Vector(2, -3)


def test_render_grid_counts_robots():
    robots = [
        Robot(Coordinate(0, 0), Vector(0, 0)),
        Robot(Coordinate(0, 0), Vector(1, 1)),
        Robot(Coordinate(2, 1), Vector(0, 0)),
    ]
    assert render_grid(robots, 3, 2) == "2..\n..1"


def test_part2_detects_large_region(capsys):
    line = "\n".join(f"p={x},0 v=0,0" for x in range(30))
    assert part2(line, 40, 3) == 1
    printed = capsys.readouterr().out
    assert printed.splitlines()[0] == "1" * 30 + "." * 10