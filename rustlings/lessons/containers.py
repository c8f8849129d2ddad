"""Dictionaries and lists of values."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableMapping


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five pieces."""
    return {"banana": 2, "apple": 2, "grapes": 1}


class Fruit(enum.Enum):
    """Kinds of fruit."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add bananas and pineapples to the basket, five of each."""
    basket[Fruit.BANANA] = 5
    basket[Fruit.PINEAPPLE] = 5


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Each value multiplied by two."""
    return [value * 2 for value in values]