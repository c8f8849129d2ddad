"""Variables, functions and conditionals."""

from __future__ import annotations

from typing import Any


def calculate_apple_price(apples: int) -> int:
    """Apples cost 2 each, or 1 each when buying more than 40."""
    return apples if apples > 40 else apples * 2


def times_two(num: int) -> int:
    return num * 2


def greet(value: Any) -> str:
    return f"Hello {value}"


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def ring_calls(num: int) -> list[str]:
    """The lines announcing each of num calls."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num