"""Recursive lists, iterators, division results, factorials and progress counts."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass

_U64_MAX = 2**64 - 1
_DIVISION_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; an empty list is None."""

    value: int
    next: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.next


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(100, create_empty_list())


def favorite_fruits() -> Iterator[str]:
    """An iterator over a few favourite fruits."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest unchanged."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them without a separator."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZero):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZero)


def divide(a: int, b: int) -> int:
    """Divide a by b when a is evenly divisible by b; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def list_of_results() -> list[int | DivisionError]:
    """Each number divided by 27, with an error in place of a failed division."""
    results: list[int | DivisionError] = []
    for number in _DIVISION_NUMBERS:
        try:
            results.append(divide(number, _DIVISOR))
        except DivisionError as error:
            results.append(error)
    return results


def result_with_list() -> list[int]:
    """The quotients of the numbers that divide evenly by 27."""
    quotients = []
    for result in list_of_results():
        if isinstance(result, DivisionError):
            print("Error")
        else:
            quotients.append(result)
    return quotients


def factorial(num: int) -> int:
    """num! for a non-negative num; 0 and 1 give 1."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in a 64-bit unsigned integer")
    return result


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)