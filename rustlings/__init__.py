"""Worked solutions to small exercise topics and terminal status-line helpers."""

__version__ = "4.6.0"

__all__ = ["lessons", "ui"]