"""Generics and lifetimes: a wrapper of any type and the longer of two strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


def longest(x: str, y: str) -> str:
    """The string with more UTF-8 bytes; y when they are equally long."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y