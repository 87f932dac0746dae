"""Lists: building them and doubling their elements."""

from __future__ import annotations

from collections.abc import Iterable


def array_and_vec() -> tuple[tuple[int, int, int, int], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    values = [10, 20, 30, 40]
    return fixed, values


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """A new list with every element doubled."""
    return [element * 2 for element in values]