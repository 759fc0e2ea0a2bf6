"""Options: values that may be missing."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at an hour of the 24-hour day; None past hour 24."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day < 22:
        return 5
    if time_of_day <= 24:
        return 0
    return None