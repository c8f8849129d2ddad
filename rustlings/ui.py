"""Coloured status lines and a progress spinner for the terminal."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(highlight=False, emoji=False, markup=False, soft_wrap=True)


def _status_line(symbol: str, fallback: str, message: str, style: str) -> None:
    marker = fallback if no_emoji() else symbol
    _console().print(Text(f"{marker} {message}", style=style))


def warn(message: str) -> None:
    """Print a warning line in red."""
    _status_line("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _status_line("✅", "✓", message, "green")


@contextmanager
def _spinner(message: str) -> Iterator[Callable[[str], None]]:
    """Show a spinner while the block runs; yields a function to change its text."""
    console = _console()
    if not console.is_terminal:
        yield lambda text: None
        return
    with console.status(message) as status:
        yield status.update