"""Optional values: how much ice cream is left at a given hour."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """5 before 22:00, 0 from 22:00 to 23:00, None for hours past 23."""
    if time_of_day > 23:
        return None
    if time_of_day < 22:
        return 5
    return 0