"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def calculate_price_of_apples(amount: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return amount if amount > 40 else amount * 2


class CommandKind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation; count is used by APPEND only."""

    kind: CommandKind
    count: int = 0


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.count
    raise ValueError(f"unknown command {command.kind!r}")


def transformer(inputs: list[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in inputs]


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )