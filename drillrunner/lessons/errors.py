"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS = re.compile(r"[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly: sign and ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if text[0] in "+-":
        sign, digits = text[0], text[1:]
    else:
        sign, digits = "+", text
    if not _DIGITS.fullmatch(digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if sign == "-":
        value = -value
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; empty names are refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed-in quantity, including the processing fee."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def remaining_tokens(tokens: int, item_quantity: str) -> int | None:
    """Tokens left after buying, or None when the purchase cannot be afforded."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return None
    return tokens - cost


class CreationError(ValueError):
    """A value cannot be a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed, either as an integer or as a positive non-zero value."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def is_creation(self) -> bool:
        return isinstance(self.cause, CreationError)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(s, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc