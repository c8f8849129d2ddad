"""Passing values around, and appending to strings and lists."""

from __future__ import annotations

from collections.abc import Iterable
from functools import singledispatch

_FILL_VALUES = (22, 44, 66)


def fill_vec(values: Iterable[int]) -> list[int]:
    """A new list holding the given values followed by 22, 44 and 66."""
    return [*values, *_FILL_VALUES]


def new_filled_vec() -> list[int]:
    """A freshly made list holding 22, 44 and 66."""
    return fill_vec([])


def add_through_references(start: int) -> int:
    """Add 100 and then 1000 to start, one change after the other."""
    value = start
    value += 100
    value += 1000
    return value


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]