"""Loose conversions between strings, characters and integers."""

from __future__ import annotations

import re

ASCII_CODE_CAP_A = ord("A")
ASCII_CODE_CAP_Z = ord("Z")
ASCII_CODE_LOWER_A = ord("a")
ASCII_CODE_LOWER_Z = ord("z")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MAX_CODE_POINT = 0x10FFFF
_REPLACEMENT_CHAR = "\ufffd"


def _parse_int(text: str) -> int | None:
    """Parse a strictly formatted decimal integer, or return None."""
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def to_int_slice(text: str) -> list[int]:
    """Split on single spaces and keep every piece that is an integer."""
    return to_int_slice_sep(text, " ")


def to_int_slice_sep(text: str, sep: str) -> list[int]:
    """Split on ``sep`` and keep every piece that is an integer."""
    values = (_parse_int(piece) for piece in text.strip(" ").split(sep))
    return [value for value in values if value is not None]


def to_int(arg: str) -> int:
    """Convert a decimal string to an int.

    Raises ValueError for a malformed string and TypeError for any other type.
    """
    if not isinstance(arg, str):
        raise TypeError(f"unhandled type for int casting {type(arg).__name__}")
    value = _parse_int(arg)
    if value is None:
        raise ValueError(f"error converting string to int: {arg!r}")
    return value


def to_string(arg: int | bytes | bytearray | str) -> str:
    """Convert an int, a single byte or a single character to a string."""
    if isinstance(arg, bool):
        raise TypeError("unhandled type for string casting bool")
    if isinstance(arg, int):
        return str(arg)
    if isinstance(arg, (bytes, bytearray)) and len(arg) == 1:
        return chr(arg[0])
    if isinstance(arg, str) and len(arg) == 1:
        return arg
    raise TypeError(f"unhandled type for string casting {type(arg).__name__}")


def to_ascii_code(arg: str | bytes | bytearray | int) -> int:
    """Return the character code of a one-character string, byte or code point.

    Values of other types yield 0.
    """
    if isinstance(arg, str):
        encoded = arg.encode("utf-8")
        if len(encoded) != 1:
            raise ValueError("can only convert ascii code for string of length 1")
        return encoded[0]
    if isinstance(arg, (bytes, bytearray)):
        if len(arg) != 1:
            raise ValueError("can only convert ascii code for a single byte")
        return arg[0]
    if isinstance(arg, int) and not isinstance(arg, bool):
        return arg
    return 0


def ascii_int_to_char(code: int) -> str:
    """Return the one-character string for ``code``; invalid codes give U+FFFD."""
    if 0 <= code <= _MAX_CODE_POINT and not 0xD800 <= code <= 0xDFFF:
        return chr(code)
    return _REPLACEMENT_CHAR