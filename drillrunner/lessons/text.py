"""Strings: favourite colours, trimming, composing and replacing."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is green, blue or red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """The text without whitespace at either end."""
    return text.strip()


def compose_me(text: str) -> str:
    """The text followed by " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """The text with every "car" replaced by "balloon"."""
    return text.replace("car", "balloon")