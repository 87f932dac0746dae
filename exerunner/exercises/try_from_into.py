"""Checked conversion of three integers into an RGB colour."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_CHANNEL_RANGE = range(0, 256)


class IntoColorError(ValueError):
    """Base class for every reason a colour cannot be built."""


class BadLength(IntoColorError):
    """The input did not hold exactly three values."""


class IntConversion(IntoColorError):
    """A value lies outside 0..=255."""


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def _from_components(cls, values: Sequence[int]) -> Color:
        if len(values) != 3:
            raise BadLength(f"expected 3 values, got {len(values)}")
        for value in values:
            if value not in _CHANNEL_RANGE:
                raise IntConversion(f"{value} is not in 0..=255")
        red, green, blue = values
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def from_tuple(cls, rgb: tuple[int, int, int]) -> Color:
        """Build a colour from a (red, green, blue) tuple."""
        return cls._from_components(tuple(rgb))

    @classmethod
    def from_array(cls, rgb: Sequence[int]) -> Color:
        """Build a colour from a fixed list of three values."""
        return cls._from_components(list(rgb))

    @classmethod
    def from_slice(cls, values: Sequence[int]) -> Color:
        """Build a colour from a sequence, which must hold exactly three values."""
        return cls._from_components(values)