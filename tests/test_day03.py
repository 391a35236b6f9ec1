from aoc2024.day03 import Operation, parse_operations, part1, part2

EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE) == 161


def test_part2_example():
    assert part2(EXAMPLE2) == 48


def test_parse_operations_kinds_in_order():
    operations = parse_operations(EXAMPLE2)
    assert [op.operation for op in operations] == [
        "mul",
        "don't",
        "mul",
        "mul",
        "do",
        "mul",
    ]
    assert operations[0] == Operation("mul(2,4)", "mul", 2, 4)


def test_operation_evaluate():
    assert Operation("mul(11,8)", "mul", 11, 8).evaluate() == 88


def test_operands_longer_than_three_digits_are_ignored():
    assert part1("mul(1234,5)") == 0