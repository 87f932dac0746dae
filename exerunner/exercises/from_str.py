"""Parsing a Person from text, with a specific error for each problem."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)
_MAX_SIZE = 2**64 - 1


class ParsePersonError(ValueError):
    """Base class for every reason a Person cannot be parsed."""


class EmptyInput(ParsePersonError):
    """The input string was empty."""


class BadLength(ParsePersonError):
    """The input did not have exactly two comma-separated fields."""


class NoName(ParsePersonError):
    """The name field was empty."""


class InvalidAge(ParsePersonError):
    """The age field was not an unsigned integer."""


def _parse_size(text: str) -> int:
    if not text:
        raise InvalidAge("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise InvalidAge("invalid digit found in string")
    value = int(text)
    if value > _MAX_SIZE:
        raise InvalidAge("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def parse(cls, text: str) -> Person:
        """Read "name,age"; raise a ParsePersonError subclass on bad input."""
        if not text:
            raise EmptyInput("empty input")
        fields = text.split(",")
        if len(fields) != 2:
            raise BadLength(f"expected 2 fields, got {len(fields)}")
        name, age_text = fields
        if not name:
            raise NoName("name is empty")
        return cls(name=name, age=_parse_size(age_text))