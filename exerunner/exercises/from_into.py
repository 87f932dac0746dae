"""Building a Person from text, falling back to a default on bad input."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)
_MAX_SIZE = 2**64 - 1


def _parse_size(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_SIZE else None


@dataclass
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Read "name,age"; any malformed input gives the default person."""
        if not text:
            return cls.default()
        fields = text.split(",")
        if len(fields) != 2:
            return cls.default()
        name, age_text = fields
        if not name:
            return cls.default()
        age = _parse_size(age_text)
        if age is None:
            return cls.default()
        return cls(name=name, age=age)