"""Generic containers and report cards."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """A shopping list holding milk."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


def _display(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if value.is_integer():
            return str(int(value))
    return str(value)


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        """One line summarising the student and the grade."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )