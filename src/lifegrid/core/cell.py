"""Single cell of a Game of Life grid."""

LIVE_GLYPH = "■"
DEAD_GLYPH = "□"


class Cell:
    """A single boolean-state cell with a display glyph."""

    def __init__(self, alive: bool = False) -> None:
        """Initialize a cell.

        Args:
            alive: Initial state of the cell
        """
        self._alive = bool(alive)

    @property
    def alive(self) -> bool:
        """Whether the cell is alive."""
        return self._alive

    def is_alive(self) -> bool:
        return self._alive

    def set_alive(self, alive: bool) -> None:
        """Set the state of the cell.

        Args:
            alive: Whether the cell should be alive
        """
        self._alive = bool(alive)

    @property
    def glyph(self) -> str:
        """One-character representation: a filled square if alive, an empty one if dead."""
        return LIVE_GLYPH if self._alive else DEAD_GLYPH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return False
        return self._alive == other._alive

    def __repr__(self) -> str:
        return f"Cell(alive={self._alive})"

    def __str__(self) -> str:
        return self.glyph
