# aoc2024

Solutions to the 2024 Advent of Code puzzles, days 1 to 20, together with
small helpers shared between them: loose integer parsing (`aoc2024.cast`),
integer helpers (`aoc2024.maths`), a min-priority queue
(`aoc2024.priority_queue.PriorityQueue`) and immutable 2D coordinates and
vectors (`aoc2024.coords`). There are also commands that download a day's
puzzle input and description.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Solving a puzzle

The `aoc2024` command runs one part of one day's solution and prints the
answer:

```
aoc2024 1 --part 2
aoc2024 11 --part 1 --input path/to/input.txt
```

The day is a positional argument. `--part` defaults to 1; any other value
runs part 2. Without `--input` the command reads `2024/dayNN/input.txt`
relative to the current directory. Trailing newlines are stripped, and an
empty input file is reported as an error. The command prints
`Running part N` and then `Output: <answer>`, and exits with status 1 if the
file cannot be read or the day has no solution.

From Python, each day is its own module, `aoc2024.day01` to
`aoc2024.day20`, with `part1` and `part2`. Both take the puzzle input as a
string:

```python
from pathlib import Path

from aoc2024 import day01, day11
from aoc2024.cli import solve

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day11.part2("125 17"))
print(solve(1, 2, text))
```

Some days need the size of the grid. They default to the sizes of the real
puzzles, and the smaller examples from the puzzle text can be run by passing
the size:

```python
from aoc2024 import day14, day18

day14.part1(text, 11, 7)          # default 101 x 103
day18.part1(text, 7, 7, 12)       # default 71 x 71, first 1024 bytes
```

Day 20 takes the smallest saving that counts as a cheat (default 100):

```python
from aoc2024 import day20

day20.part1(text, 20)
```

A few parts print their result instead of returning it:

- `day17.part1` prints the program's comma-separated output and returns 0.
- `day18.part2` prints the `x,y` of the first byte that cuts off the exit
  and returns 0.
- `day14.part2` prints the robot grid when it finds the picture, and
  returns the second at which it appeared (0 if none within 10000 seconds).
- `day15.part1` prints the final warehouse map before returning the sum.

## Fetching inputs and prompts

Inputs and prompts are personal to your account, so the commands need your
session cookie. Pass it with `--cookie` or set it in the
`AOC_SESSION_COOKIE` environment variable:

```
export AOC_SESSION_COOKIE=placeholder
aoc2024-input --day 1 --year 2024
aoc2024-prompt --day 1 --year 2024
```

Without `--day` and `--year` today's date is used. The day must lie between
1 and 25 and the year must not be earlier than 2015; otherwise, or when no
cookie is given, the command prints an error and exits with status 1.

`aoc2024-input` saves the input as `input.txt` and `aoc2024-prompt` saves
the text of the puzzle description as `prompt.md`, both under
`<year>/dayNN/` in the current directory. From Python,
`aoc2024.fetch.get_input` and `aoc2024.fetch.get_prompt` take a `root`
directory instead and return the path written. Failures raise
`aoc2024.fetch.FetchError`.

## What it does not do

- There are no solutions for days 21 to 25, and `day15.part2` (the widened
  warehouse) always returns 0.
- Answers are printed only; nothing is copied to the clipboard.
- There is no command that creates files for a new day.