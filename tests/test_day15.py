from aoc2024.coords import Coordinate, Vector
from aoc2024.day15 import parse_input, part1, part2

_SIZE = 10
_BOXES = {
    1: (3, 6, 8),
    2: (7,),
    3: (2, 3, 6, 8),
    4: (3, 7),
    5: (1, 5),
    6: (1, 4, 7),
    7: (2, 3, 5, 7, 8),
    8: (5,),
}
_INNER_WALLS = {(2, 5)}
_ROBOT = (4, 4)


def _build_map():
    rows = []
    for y in range(_SIZE):
        row = []
        for x in range(_SIZE):
            if y in (0, _SIZE - 1) or x in (0, _SIZE - 1) or (x, y) in _INNER_WALLS:
                row.append("#")
            elif (x, y) == _ROBOT:
                row.append("@")
            elif x in _BOXES.get(y, ()):
                row.append("O")
            else:
                row.append(".")
        rows.append("".join(row))
    return "\n".join(rows)


# Moves written as L/R/U/D in chunks of ten, one inner list per input line.
_MOVE_LINES = [
    ["LDDRULDURD", "RUDDUDRDLR", "DUDLDLUDDL", "LLURLLRLRR", "DLDDDLRUDU", "RULLLRLLDL", "LLDUDDUDRU"],
    ["DDDLLURUDU", "URLLRRRLRU", "LLRLUDDUUL", "RDDDLRRLUU", "DRURDDLRDL", "LLLDLUDRUL", "UURRRULDLD"],
    ["RLRDDRDUDU", "LRRLRRRRLU", "URDDRDLUUU", "RRDUDULUUR", "DUURDULUDR", "DLRRDUDULD", "RDUULUUDDL"],
    ["LLDLURRUUU", "URRRDULRDD", "DURLDLLLRU", "UUDDULDDDR", "URDLUUUUDL", "RURDDDDRLR", "RDULLUUUUU"],
    ["URLURLRRRL", "RUULLUUDRR", "RLULDRULDD", "RRDRRRUDRL", "RUDRLLLLDR", "RDLDLDRDDD", "RULRLLRURL"],
    ["URRLRUDLRL", "UDDDLUULRL", "DLLLLLRLUD", "LLLRLLLUUL", "DLUUURLURR", "ULDURLLLUR", "RUDLDUDLDU"],
    ["RURRUDRDDR", "ULLUDLRRLL", "RLLDLLDRLR", "DLUDDLLLRU", "UDURUURRRL", "LUDRRDUDRL", "UURRULRDDU"],
    ["LRLUURUUUL", "RLDDDDDUDL", "DLLRUDLDRD", "LLURLLRLLR", "LLLUULLLUL", "LRRLLRLUUU", "RUULRURDLR"],
    ["UURDDLUDUD", "LDDRULRLDL", "UDRUUURRRU", "UDDDURDDDL", "RRRULURRRR", "RULLUDRUDD", "DLRULRLLDR"],
    ["DUURRRLLUU", "LRRUDULDUD", "DLRDULLRUL", "UDUDRLULLL", "RLLULDRLDL", "RDDRRDRLDU", "LDDLRDULLU"],
]
_ARROWS = str.maketrans("LRUD", "<>^v")


def _build_moves():
    return "\n".join("".join(chunks).translate(_ARROWS) for chunks in _MOVE_LINES)


EXAMPLE = _build_map() + "\n\n" + _build_moves()

SMALL = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<"""


def test_part1_example():
    assert part1(EXAMPLE) == 10092


def test_part1_small_example():
    assert part1(SMALL) == 2028


def test_part2_example():
    assert part2(EXAMPLE) == 0


def test_example_has_expected_move_count():
    _, moves = parse_input(EXAMPLE)
    assert len(moves) == 700


def test_parse_input_finds_robot_and_moves():
    warehouse, moves = parse_input(SMALL)
    assert warehouse.robot == Coordinate(2, 2)
    assert (warehouse.width, warehouse.height) == (8, 8)
    assert len(moves) == 15
    assert moves[0] == Vector(-1, 0)
    assert moves[1] == Vector(0, -1)


def test_part1_prints_final_map(capsys):
    part1("#####\n#@O.#\n#####\n\n>")
    assert capsys.readouterr().out == "#####\n#.@O#\n#####\n"