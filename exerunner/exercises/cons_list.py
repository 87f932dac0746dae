"""A cons list: each cell holds a value and the rest of the list; None is the end."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty list."""
    return None


def create_non_empty_list() -> Cons:
    """A list holding a few values."""
    return Cons(1, Cons(2, Cons(3)))