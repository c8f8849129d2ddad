"""Owned strings and string slices."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether attempt is one of the colour words known here."""
    return attempt in _COLOR_WORDS