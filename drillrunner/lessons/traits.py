"""Traits: appending "Bar", shared licensing defaults and combined capabilities."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Protocol


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    value.append("Bar")
    return value


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeAndOther(Protocol):
    def some_function(self) -> bool: ...

    def other_function(self) -> bool: ...


def some_func(item: _SomeAndOther) -> bool:
    """True when both of the item's capabilities report True."""
    return item.some_function() and item.other_function()