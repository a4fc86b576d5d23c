"""Console Conway's Game of Life on a bounded grid."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.grid import Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "GameOfLife", "Pattern", "PatternLibrary"]
