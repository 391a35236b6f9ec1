"""Small integer helpers."""

from __future__ import annotations

from collections.abc import Iterable
from math import prod


def max_int(*args: int) -> int:
    """Return the largest argument; at least one is required."""
    if not args:
        raise ValueError("max_int requires at least one value")
    return max(args)


def min_int(*args: int) -> int:
    """Return the smallest argument; at least one is required."""
    if not args:
        raise ValueError("min_int requires at least one value")
    return min(args)


def abs_int(value: int) -> int:
    """Return the absolute value of ``value``."""
    return -value if value < 0 else value


def sum_int_slice(nums: Iterable[int]) -> int:
    """Return the sum of ``nums``."""
    return sum(nums)


def multiply_int_slice(nums: Iterable[int]) -> int:
    """Return the product of ``nums``; the product of nothing is 1."""
    return prod(nums)