"""Optional values: unwrapping, matching and draining."""

from __future__ import annotations

from collections.abc import MutableSequence


def describe_number(maybe_number: int | None) -> str:
    """The printed line for a number; a missing number is an error."""
    if maybe_number is None:
        raise ValueError("called unwrap on a missing value")
    return f"printing: {maybe_number}"


def fill_numbers() -> list[int]:
    """Five numbers computed from their positions."""
    return [(index * 1235 + 2) // (4 * 16) for index in range(5)]


def describe_word(optional_word: str | None) -> str:
    """Describe a word, or say that there is none."""
    if optional_word is not None:
        return f"The word is: {optional_word}"
    return "The optional word doesn't contain anything"


def drain_optionals(values: MutableSequence[int | None]) -> list[int]:
    """Pop every entry from the end, keeping the present values in pop order."""
    present = []
    while values:
        value = values.pop()
        if value is not None:
            present.append(value)
    return present


def describe_point(point: tuple[int, int] | None) -> str:
    """Describe a point's co-ordinates, or report that there is none."""
    match point:
        case (x, y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"