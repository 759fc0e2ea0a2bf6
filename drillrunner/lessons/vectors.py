"""Vectors: fixed arrays, growable lists and element-wise doubling."""

from __future__ import annotations


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    values = [10, 20, 30, 40]
    return array, values


def vec_loop(v: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    v[:] = [value * 2 for value in v]
    return v


def vec_map(v: list[int]) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in v]