"""Terminal styling and status messages."""

from __future__ import annotations

import os
import sys

_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"
_RESET = "\x1b[0m"


def no_emoji() -> bool:
    """Whether the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    return sys.stdout.isatty() and os.environ.get("CLICOLOR") != "0"


def _style(text: object, *codes: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return "".join(f"\x1b[{code}m" for code in codes) + text + _RESET


def bold(text: object) -> str:
    return _style(text, _BOLD)


def blue(text: object) -> str:
    return _style(text, _BLUE)


def warn(message: str) -> None:
    """Print a warning line in red."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{_style(symbol, _RED)} {_style(message, _RED)}")


def success(message: str) -> None:
    """Print a success line in green."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{_style(symbol, _GREEN)} {_style(message, _GREEN)}")