"""Frontend interfaces for the Game of Life."""

from .cli import ConsoleGameOfLife

__all__ = ["ConsoleGameOfLife"]
