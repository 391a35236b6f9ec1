import pytest

from aoc2024.cli import main, solve

DAY02 = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""

DAY03_PART1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
DAY03_PART2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


@pytest.mark.parametrize(
    "day, part, text, expected",
    [
        (2, 1, DAY02, 2),
        (2, 2, DAY02, 4),
        (3, 1, DAY03_PART1, 161),
        (3, 2, DAY03_PART2, 48),
        (7, 2, "156: 15 6", 156),
    ],
)
def test_solve_dispatches_to_day(day, part, text, expected):
    assert solve(day, part, text) == expected


def test_solve_any_other_part_runs_part_two():
    assert solve(2, 3, DAY02) == solve(2, 2, DAY02)


@pytest.mark.parametrize("day", [0, 21])
def test_solve_unknown_day(day):
    with pytest.raises(ValueError, match="no solution"):
        solve(day, 1, DAY02)


def test_main_with_input_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY02 + "\n", encoding="utf-8")
    assert main(["2", "-part", "2", "-input", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Running part 2" in out
    assert "Output: 4" in out


def test_main_reads_default_location(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "2024" / "day03"
    target.mkdir(parents=True)
    (target / "input.txt").write_text(DAY03_PART1, encoding="utf-8")
    assert main(["3"]) == 0
    assert "Output: 161" in capsys.readouterr().out


def test_main_rejects_empty_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n\n", encoding="utf-8")
    assert main(["2", "-input", str(path)]) == 1
    assert "empty" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path, capsys):
    assert main(["2", "-input", str(tmp_path / "missing.txt")]) == 1
    assert "error" in capsys.readouterr().err