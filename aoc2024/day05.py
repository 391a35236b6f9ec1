"""Print Queue: check page updates against ordering rules."""

from __future__ import annotations

from functools import cmp_to_key

from aoc2024.cast import to_int_slice_sep

Rules = dict[int, list[int]]


def parse_input(text: str) -> tuple[Rules, list[list[int]]]:
    """Return the ordering rules (page -> pages that must come after it) and the updates."""
    rules: Rules = {}
    sequences: list[list[int]] = []
    for line in text.rstrip("\n").split("\n"):
        if "|" in line:
            pages = to_int_slice_sep(line, "|")
            rules.setdefault(pages[0], []).append(pages[1])
        elif "," in line:
            sequences.append(to_int_slice_sep(line, ","))
    return rules, sequences


def middle_number(sequence: list[int]) -> int:
    """The page in the middle of an update."""
    return sequence[len(sequence) // 2]


def is_valid(sequence: list[int], rules: Rules) -> bool:
    """True if no page appears after a page it must precede."""
    seen: set[int] = set()
    for page in sequence:
        if any(after in seen for after in rules.get(page, ())):
            return False
        seen.add(page)
    return True


def part1(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    rules, sequences = parse_input(text)
    return sum(middle_number(seq) for seq in sequences if is_valid(seq, rules))


def part2(text: str) -> int:
    """Sum of middle pages of incorrectly ordered updates after reordering them."""
    rules, sequences = parse_input(text)

    def compare(a: int, b: int) -> int:
        if b in rules.get(a, ()):
            return -1
        if a in rules.get(b, ()):
            return 1
        return 0

    return sum(
        middle_number(sorted(seq, key=cmp_to_key(compare)))
        for seq in sequences
        if not is_valid(seq, rules)
    )