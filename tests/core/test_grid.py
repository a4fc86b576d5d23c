"""Tests for the Grid class."""

import numpy as np
import pytest
from lifegrid.core.cell import Cell, LIVE_GLYPH, DEAD_GLYPH
from lifegrid.core.grid import Grid


def alive_cells(grid):
    """Return the set of (row, col) coordinates of living cells."""
    return {(row, col) for row in range(grid.rows) for col in range(grid.cols) if grid.get_cell(row, col)}


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.rows == 10
        assert grid.cols == 20
        assert grid.shape == (10, 20)
        assert grid.cells.shape == (10, 20)
        assert grid.population == 0

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3), (3, -2)])
    def test_non_positive_dimensions(self, rows, cols):
        """Test non-positive dimensions fail fast."""
        with pytest.raises(ValueError):
            Grid(rows, cols)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 5)

        assert not grid.get_cell(0, 0)
        assert not grid.get_cell(2, 3)

        grid.set_cell(1, 1, True)
        grid.set_cell(2, 3, True)

        assert grid.get_cell(1, 1)
        assert grid.get_cell(2, 3)
        assert not grid.get_cell(3, 2)

        grid.set_cell(1, 1, False)
        assert not grid.get_cell(1, 1)

    def test_cell_snapshot(self):
        """Test cell_snapshot() copies the current state without aliasing it."""
        grid = Grid(3, 3)
        grid.set_cell(1, 2, True)
        assert grid.cell_snapshot(1, 2) == Cell(True)
        assert grid.cell_snapshot(0, 0) == Cell(False)

        grid.cell_snapshot(0, 0).set_alive(True)
        assert not grid.get_cell(0, 0)

    def test_cells_array_tracks_updates(self):
        """Test an array taken from cells keeps showing the live generation."""
        grid = Grid(5, 5)
        grid.initialize_from_input(["", "00100", "00100", "00100"])
        view = grid.cells

        grid.update()
        assert view.tolist() == grid.to_list()
        assert view[2].tolist() == [0, 1, 1, 1, 0]

        view[0, 0] = 1
        assert grid.get_cell(0, 0)
        grid.update()
        assert view.tolist() == grid.to_list()

    def test_iter_cells(self):
        grid = Grid(2, 3)
        grid.set_cell(1, 0, True)
        visited = list(grid.iter_cells())
        assert [(r, c) for r, c, _ in visited] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
        assert [cell.alive for _, _, cell in visited] == [False, False, False, True, False, False]

    def test_out_of_bounds(self):
        """Test out of range coordinates raise IndexError, never wrap."""
        grid = Grid(3, 3)

        with pytest.raises(IndexError):
            grid.set_cell(-1, 0, True)

        with pytest.raises(IndexError):
            grid.set_cell(0, 3, True)

        with pytest.raises(IndexError):
            grid.get_cell(3, 0)

        with pytest.raises(IndexError):
            grid.get_cell(0, -1)

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        assert grid.population == 2

        grid.clear()
        assert grid.population == 0

    def test_initialize_random_extremes(self):
        """Test random initialization at probabilities 0 and 1."""
        grid = Grid(10, 10)

        grid.initialize_random(0.0)
        assert grid.population == 0

        grid.initialize_random(1.0)
        assert grid.population == 100

    def test_initialize_random_default_rate(self):
        """Test the default probability leaves roughly a fifth of cells alive."""
        grid = Grid(50, 50)
        grid.initialize_random(rng=np.random.default_rng(1))
        assert 350 <= grid.population <= 650

    def test_initialize_random_seeded(self):
        """Test the same seed gives the same start."""
        first = Grid(20, 20)
        second = Grid(20, 20)
        first.initialize_random(0.3, np.random.default_rng(42))
        second.initialize_random(0.3, np.random.default_rng(42))
        assert first == second

    def test_initialize_random_overwrites(self):
        """Test random initialization replaces existing state."""
        grid = Grid(4, 4)
        grid.set_cell(0, 0, True)
        grid.initialize_random(0.0, np.random.default_rng(0))
        assert not grid.get_cell(0, 0)

    def test_initialize_random_invalid_probability(self):
        grid = Grid(4, 4)
        with pytest.raises(ValueError):
            grid.initialize_random(1.5)
        with pytest.raises(ValueError):
            grid.initialize_random(-0.1)

    def test_initialize_from_input(self):
        """Test parsing rows of '1' characters."""
        grid = Grid(2, 4)
        grid.initialize_from_input(["1001", "0110"])
        assert alive_cells(grid) == {(0, 0), (0, 3), (1, 1), (1, 2)}

    def test_initialize_from_input_short(self):
        """Test short lines and missing rows leave cells dead."""
        grid = Grid(3, 3)
        grid.initialize_from_input(["101", "1"])

        assert [grid.get_cell(0, c) for c in range(3)] == [True, False, True]
        assert [grid.get_cell(1, c) for c in range(3)] == [True, False, False]
        assert [grid.get_cell(2, c) for c in range(3)] == [False, False, False]

    def test_initialize_from_input_clamps(self):
        """Test extra rows, long lines and other characters are ignored."""
        grid = Grid(2, 2)
        grid.initialize_from_input(["1x11111", "a1", "11"])
        assert alive_cells(grid) == {(0, 0), (1, 1)}

    def test_initialize_from_input_empty(self):
        grid = Grid(2, 2)
        grid.initialize_from_input([])
        assert grid.population == 0

    def test_count_neighbors_corner(self):
        """Test a corner cell only counts its three in-bounds neighbors."""
        grid = Grid(4, 4)
        # Opposite edges would be neighbors of (0, 0) on a torus
        grid.set_cell(3, 3, True)
        grid.set_cell(0, 3, True)
        grid.set_cell(3, 0, True)
        assert grid.count_neighbors(0, 0) == 0

        grid.set_cell(0, 1, True)
        grid.set_cell(1, 0, True)
        grid.set_cell(1, 1, True)
        assert grid.count_neighbors(0, 0) == 3

    def test_count_all_neighbors_matches_scalar(self):
        """Test the convolution agrees with the per-cell count."""
        grid = Grid(7, 9)
        grid.initialize_random(0.4, np.random.default_rng(7))
        counts = grid.count_all_neighbors()

        assert counts.shape == (7, 9)
        for row in range(7):
            for col in range(9):
                assert counts[row, col] == grid.count_neighbors(row, col)

    def test_update_all_dead(self):
        """Test no life appears on an empty grid."""
        grid = Grid(6, 6)
        grid.update()
        assert grid.population == 0

    def test_update_block_fixed_point(self):
        """Test a 2x2 block is unchanged by update."""
        grid = Grid(4, 4)
        for row, col in [(1, 1), (1, 2), (2, 1), (2, 2)]:
            grid.set_cell(row, col, True)

        grid.update()
        assert alive_cells(grid) == {(1, 1), (1, 2), (2, 1), (2, 2)}

    def test_update_blinker_in_single_row(self):
        """Test a row blinker with no vertical room dies out together.

        On a 1x5 grid the middle cell has two neighbors and survives, the ends
        have one and die, and no cell can gain three neighbors.
        """
        grid = Grid(1, 5)
        grid.initialize_from_input(["01110"])

        grid.update()
        assert alive_cells(grid) == {(0, 2)}

        grid.update()
        assert grid.population == 0

    def test_update_blinker_oscillates(self):
        """Test a blinker flips and returns after exactly two updates."""
        grid = Grid(5, 5)
        grid.initialize_from_input(["00000", "00000", "01110", "00000", "00000"])
        horizontal = alive_cells(grid)

        grid.update()
        assert alive_cells(grid) == {(1, 2), (2, 2), (3, 2)}

        grid.update()
        assert alive_cells(grid) == horizontal

    def test_update_is_simultaneous(self):
        """Test births use the previous generation, not already updated cells."""
        grid = Grid(3, 3)
        grid.initialize_from_input(["010", "010", "010"])

        grid.update()
        # An in-place row-major update would kill (0, 1) before (1, 0) is counted
        assert alive_cells(grid) == {(1, 0), (1, 1), (1, 2)}

    def test_update_reproduction_and_overpopulation(self):
        grid = Grid(3, 3)
        grid.initialize_from_input(["111", "111", "000"])

        grid.update()
        # Corners keep 3 neighbors, middles are crowded, (2, 1) is born
        assert alive_cells(grid) == {(0, 0), (0, 2), (1, 0), (1, 2), (2, 1)}

    def test_update_corner_does_not_wrap(self):
        """Test a lone corner cell dies even with live cells on opposite edges."""
        grid = Grid(3, 3)
        grid.set_cell(0, 0, True)
        grid.set_cell(2, 2, True)
        grid.set_cell(0, 2, True)

        grid.update()
        assert not grid.get_cell(0, 0)

    def test_render(self):
        """Test rendering a 2x2 grid."""
        grid = Grid(2, 2)
        grid.set_cell(0, 1, True)
        grid.set_cell(1, 0, True)

        output = grid.render()
        assert output == f"{DEAD_GLYPH} {LIVE_GLYPH}\n{LIVE_GLYPH} {DEAD_GLYPH}\n"

        lines = output.splitlines()
        assert len(lines) == 2
        assert all(len(line.split(" ")) == 2 for line in lines)

    def test_render_separator(self):
        grid = Grid(1, 3)
        grid.set_cell(0, 2, True)
        assert grid.render(separator="") == f"{DEAD_GLYPH}{DEAD_GLYPH}{LIVE_GLYPH}\n"

    def test_list_serialization(self):
        """Test to_list/from_list."""
        grid = Grid(2, 3)
        grid.set_cell(1, 2, True)
        data = grid.to_list()
        assert data == [[0, 0, 0], [0, 0, 1]]

        other = Grid(2, 3)
        other.from_list(data)
        assert other == grid

        with pytest.raises(ValueError):
            other.from_list([[0, 1], [1, 0]])

    def test_equality(self):
        assert Grid(2, 2) == Grid(2, 2)
        assert Grid(2, 2) != Grid(2, 3)
        assert Grid(2, 2) != "grid"

    def test_str(self):
        grid = Grid(2, 3)
        grid.set_cell(0, 1, True)
        assert str(grid) == ".*.\n..."
