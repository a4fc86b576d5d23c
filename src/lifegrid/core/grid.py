"""Grid data structure for the Game of Life."""

from typing import Iterator, List, Optional, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell

DEFAULT_PROBABILITY = 0.2


class Grid:
    """Represents a bounded 2D grid of cells.

    Cell states live in a numpy array of shape (rows, cols) indexed as
    (row, col). Neighbors outside the grid count as dead; edges never wrap.

    Each generation is computed into a second pre-allocated array from the
    frozen current state, then copied back, so the array returned by
    ``cells`` always holds the current generation.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Initialize a new grid with all cells dead.

        Args:
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self._cells = np.zeros((rows, cols), dtype=np.int8)
        self._next_cells = np.zeros((rows, cols), dtype=np.int8)

        # PyTorch optimization: pre-allocate tensors and kernel
        torch.set_num_threads(1)

        self._torch_input = torch.zeros(1, 1, rows, cols, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        self._cells[row, col] = 1 if alive else 0

    def cell_snapshot(self, row: int, col: int) -> Cell:
        """Get a detached Cell copy of the state at (row, col).

        Changing the returned cell does not change the grid; use set_cell.
        """
        return Cell(self.get_cell(row, col))

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (row, col, cell) for every coordinate in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col, Cell(bool(self._cells[row, col]))

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def initialize_random(
        self, probability: float = DEFAULT_PROBABILITY, rng: Optional[np.random.Generator] = None
    ) -> None:
        """Randomly populate the grid, overwriting every cell.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            rng: Random generator to draw from; a fresh unseeded one if omitted

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        if rng is None:
            rng = np.random.default_rng()

        mask = rng.random((self.rows, self.cols)) < probability
        self._cells[mask] = 1
        self._cells[~mask] = 0

    def initialize_from_input(self, lines: Sequence[str]) -> None:
        """Populate the grid from rows of text.

        A '1' at position j of line i makes cell (i, j) alive. Any other
        character, missing lines and short lines leave cells untouched.

        Args:
            lines: One string per grid row
        """
        for row, line in enumerate(lines[: self.rows]):
            for col, char in enumerate(line[: self.cols]):
                if char == "1":
                    self._cells[row, col] = 1

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue

                nr, nc = row + dr, col + dc
                if 0 <= nr < self.rows and 0 <= nc < self.cols:
                    count += int(self._cells[nr, nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch-accelerated convolution.

        Returns:
            Array of shape (rows, cols) with neighbor counts for each cell
        """
        self._torch_input[0, 0] = torch.from_numpy((self._cells > 0).astype(np.float32))

        # Zero padding: cells beyond the edge contribute nothing
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8)

    def update(self) -> None:
        """Advance the grid by one generation.

        - Live cell with fewer than 2 or more than 3 neighbors dies
        - Live cell with 2 or 3 neighbors survives
        - Dead cell with exactly 3 neighbors becomes alive
        - All other dead cells stay dead
        """
        neighbor_counts = self.count_all_neighbors()
        alive = self._cells > 0

        survive = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))
        birth = ~alive & (neighbor_counts == 3)

        self._next_cells.fill(0)
        self._next_cells[survive | birth] = 1

        self._cells[:] = self._next_cells

    def render(self, separator: str = " ") -> str:
        """Render the grid as text, one line per row.

        Args:
            separator: String placed between cell glyphs

        Returns:
            Rendered text with a newline after every row
        """
        lines = []
        for row in range(self.rows):
            glyphs = [Cell(bool(state)).glyph for state in self._cells[row]]
            lines.append(separator.join(glyphs) + "\n")
        return "".join(lines)

    def to_list(self) -> List[List[int]]:
        """Convert grid to nested list for serialization.

        Returns:
            2D list of 0/1 values indexed [row][col]
        """
        return self._cells.tolist()

    def from_list(self, data: list) -> None:
        """Load grid from nested list.

        Args:
            data: 2D list with cell states indexed [row][col]

        Raises:
            ValueError: If data dimensions don't match grid
        """
        arr = np.array(data, dtype=np.int8)
        if arr.shape != self.shape:
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.shape}")

        self._cells[:] = (arr > 0).astype(np.int8)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        result = []
        for row in range(self.rows):
            result.append("".join("*" if state else "." for state in self._cells[row]))
        return "\n".join(result)
