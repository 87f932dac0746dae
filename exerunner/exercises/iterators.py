"""Iteration: capitalising words, dividing lists, factorials and counting."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping, Sequence

_U64_MAX = 2**64 - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ValueError):
    """Base class for every reason a division fails."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZero(DivisionError):
    """The divisor was zero."""


def divide(a: int, b: int) -> int:
    """a divided by b when b divides a evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZero("division by zero")
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """All quotients by 27, raising at the first failed division."""
    return [divide(n, 27) for n in _NUMBERS]


def _attempt_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Each quotient by 27, or the error for that division."""
    return [_attempt_divide(n, 27) for n in _NUMBERS]


def factorial(num: int) -> int:
    """num! for an unsigned 64-bit result."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)