"""Worked solutions to the exercise topics, written as plain Python."""

__all__ = [
    "basics",
    "concurrency",
    "containers",
    "enums",
    "errors",
    "generics",
    "iterators",
    "options",
    "ownership",
    "primitives",
    "strings",
    "structs",
]