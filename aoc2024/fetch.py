"""Download puzzle inputs and prompts and store them next to the solutions."""

from __future__ import annotations

import argparse
import datetime
import os
import sys
import urllib.error
import urllib.request
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from html.parser import HTMLParser
from pathlib import Path

BASE_URL = "https://adventofcode.com"
COOKIE_ENV = "AOC_SESSION_COOKIE"
TIMEOUT_SECONDS = 10
FIRST_YEAR = 2015
LAST_DAY = 25
DAY_DESC_CLASS = "day-desc"

_RATE_LIMITED = b"Please don't repeatedly"
_INPUT_NEEDS_LOGIN = b"Puzzle inputs differ by user"
_VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    }
)


class FetchError(Exception):
    """Raised when a puzzle page cannot be fetched, validated or stored."""


def parse_flags(argv: list[str] | None = None) -> tuple[int, int, str]:
    """Parse ``-day``, ``-year`` and ``-cookie``; return ``(day, year, cookie)``.

    Day and year default to today, the cookie to the AOC_SESSION_COOKIE variable.
    """
    today = datetime.date.today()
    parser = argparse.ArgumentParser(description="Fetch puzzle data for one day.")
    parser.add_argument("-day", "--day", type=int, default=today.day,
                        help="day number to fetch, 1-25")
    parser.add_argument("-year", "--year", type=int, default=today.year,
                        help="puzzle year")
    parser.add_argument("-cookie", "--cookie", default=os.environ.get(COOKIE_ENV, ""),
                        help=f"session cookie (defaults to ${COOKIE_ENV})")
    args = parser.parse_args(argv)

    if not 1 <= args.day <= LAST_DAY:
        raise FetchError(f"day out of range: {args.day}")
    if args.year < FIRST_YEAR:
        raise FetchError(f"year is before {FIRST_YEAR}: {args.year}")
    if not args.cookie:
        raise FetchError(f"no session cookie set on flag or env var ({COOKIE_ENV})")
    return args.day, args.year, args.cookie


def get_with_cookie(url: str, cookie: str) -> bytes:
    """GET ``url`` with the session cookie and return the response body."""
    request = urllib.request.Request(url, method="GET")
    request.add_header("Cookie", f"session={cookie}")
    try:
        with urllib.request.urlopen(request, timeout=TIMEOUT_SECONDS) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        body = exc.read()
    except OSError as exc:
        raise FetchError(f"making request: {exc}") from exc

    print("response length is", len(body))
    if body.startswith(_RATE_LIMITED):
        raise FetchError("repeated request rejected by the server")
    return body


def write_to_file(path: str | os.PathLike[str], contents: bytes | str) -> None:
    """Write ``contents`` to ``path``, creating parent directories as needed."""
    target = Path(path)
    data = contents.encode("utf-8") if isinstance(contents, str) else contents
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        raise FetchError(f"writing file: {exc}") from exc


@dataclass(eq=False)
class _Node:
    kind: str
    tag: str = ""
    attrs: list[tuple[str, str | None]] = field(default_factory=list)
    data: str = ""
    parent: _Node | None = None
    children: list[_Node] = field(default_factory=list)


class _TreeBuilder(HTMLParser):
    """Build a lenient element tree from an HTML document."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = _Node("document")
        self._stack = [self.root]

    def _append(self, node: _Node) -> None:
        parent = self._stack[-1]
        node.parent = parent
        parent.children.append(node)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        node = _Node("element", tag=tag, attrs=list(attrs))
        self._append(node)
        if tag not in _VOID_ELEMENTS:
            self._stack.append(node)

    def handle_endtag(self, tag: str) -> None:
        for index in range(len(self._stack) - 1, 0, -1):
            if self._stack[index].tag == tag:
                del self._stack[index:]
                return

    def handle_data(self, data: str) -> None:
        siblings = self._stack[-1].children
        if siblings and siblings[-1].kind == "text":
            siblings[-1].data += data
        else:
            self._append(_Node("text", data=data))

    def handle_comment(self, data: str) -> None:
        self._append(_Node("comment", data=data))


def _descendants(node: _Node) -> Iterator[_Node]:
    for child in node.children:
        yield child
        yield from _descendants(child)


def _is_day_desc(node: _Node) -> bool:
    return any(key == "class" and value == DAY_DESC_CLASS for key, value in node.attrs)


def parse_html(html: bytes | str) -> str:
    """Extract the text of every ``class="day-desc"`` element of a puzzle page.

    A newline is written before each direct child of such an element.
    """
    text = html.decode("utf-8", errors="replace") if isinstance(html, bytes) else html
    builder = _TreeBuilder()
    builder.feed(text)
    builder.close()

    parts: list[str] = []
    marked: set[_Node] = set()
    for desc in [n for n in _descendants(builder.root) if _is_day_desc(n)]:
        marked.add(desc)
        for node in _descendants(desc):
            if node.kind == "text":
                parts.append(node.data)
            if node.parent in marked:
                parts.append("\n")
    return "".join(parts)


def _day_dir(root: str | os.PathLike[str] | None, year: int, day: int) -> Path:
    base = Path.cwd() if root is None else Path(root)
    return base / str(year) / f"day{day:02d}"


def get_input(
    day: int, year: int, cookie: str, root: str | os.PathLike[str] | None = None
) -> Path:
    """Download the day's input to ``<root>/<year>/dayNN/input.txt``; return the path."""
    print(f"fetching for day {day}, year {year}")
    body = get_with_cookie(f"{BASE_URL}/{year}/day/{day}/input", cookie)
    if body.startswith(_INPUT_NEEDS_LOGIN):
        raise FetchError("'Puzzle inputs differ by user' response")
    path = _day_dir(root, year, day) / "input.txt"
    write_to_file(path, body)
    print("Wrote to file: ", path)
    print("Done!")
    return path


def get_prompt(
    day: int, year: int, cookie: str, root: str | os.PathLike[str] | None = None
) -> Path:
    """Download the day's description to ``<root>/<year>/dayNN/prompt.md``; return the path."""
    print(f"fetching for day {day}, year {year}")
    body = get_with_cookie(f"{BASE_URL}/{year}/day/{day}", cookie)
    path = _day_dir(root, year, day) / "prompt.md"
    write_to_file(path, parse_html(body))
    print("Wrote prompt to file: ", path)
    print("Done!")
    return path


def _run(fetcher: Callable[[int, int, str], Path], argv: list[str] | None) -> int:
    try:
        day, year, cookie = parse_flags(argv)
        fetcher(day, year, cookie)
    except FetchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main_input(argv: list[str] | None = None) -> int:
    """Command entry point that fetches a puzzle input."""
    return _run(get_input, argv)


def main_prompt(argv: list[str] | None = None) -> int:
    """Command entry point that fetches a puzzle description."""
    return _run(get_prompt, argv)