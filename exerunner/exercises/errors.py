"""Error handling: name tags, token costs and positive nonzero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with the usual messages."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 2 ** (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Items cost 5 tokens each plus a processing fee of 1 token."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    return qty * cost_per_item + processing_fee


class CreationError(Exception):
    """A value could not become a PositiveNonzeroInteger."""

    NEGATIVE = "negative"
    ZERO = "zero"
    _MESSAGES = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._MESSAGES:
            raise ValueError(f"unknown creation error {kind!r}")
        super().__init__(self._MESSAGES[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed; cause is the integer parse error or the CreationError."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        value = _parse_int(s, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err