"""Booleans, characters, arrays, slices, tuples, and names kept inside modules."""

from __future__ import annotations

import time
from collections.abc import Sequence

_FRUITS = {"PEAR": "Pear", "APPLE": "Apple"}
_VEGGIES = {"CUCUMBER": "Cucumber", "CARROT": "Carrot"}
FRUIT = _FRUITS["PEAR"]
VEGGIE = _VEGGIES["CUCUMBER"]


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that fit the time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_character(character: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence) -> str:
    """Comment on the size of an array."""
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence) -> Sequence:
    """The elements at positions 1, 2 and 3."""
    if len(values) < 4:
        raise IndexError("need at least four elements to slice 1..4")
    return values[1:4]


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """A line about a cat given as a (name, age) pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second(numbers: Sequence):
    """The second element of a tuple."""
    return numbers[1]


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage with the secret recipe, which stays private."""
    _get_secret_recipe()
    return "sausage!"


def favorite_snacks() -> str:
    """The favourite fruit and vegetable."""
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


def seconds_since_epoch() -> int:
    """Whole seconds since 1970-01-01 00:00:00 UTC."""
    seconds = int(time.time())
    if seconds < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return seconds