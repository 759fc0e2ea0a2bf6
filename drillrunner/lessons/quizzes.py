"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(num: int) -> int:
    """Two per apple, one per apple for orders of more than 40."""
    return num if num > 40 else num * 2


class CommandKind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation; times is used by APPEND only."""

    kind: CommandKind
    times: int = 0


def transformer(inputs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""

    def apply(text: str, command: Command) -> str:
        match command.kind:
            case CommandKind.UPPERCASE:
                return text.upper()
            case CommandKind.TRIM:
                return text.strip()
            case CommandKind.APPEND:
                return text + "bar" * command.times

    return [apply(text, command) for text, command in inputs]


@dataclass
class ReportCard(Generic[T]):
    """A report card with a grade of any printable kind."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"