"""Basic tests for the lifegrid package."""

from lifegrid import Cell, Grid, GameOfLife, PatternLibrary


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.rows == 10
    assert grid.cols == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True
    assert grid.cell_snapshot(5, 5) == Cell(True)


def test_game_creation():
    """Test basic game creation."""
    grid = Grid(5, 5)
    game = GameOfLife(grid)
    assert game.population == 0

    grid.set_cell(2, 2, True)
    assert game.population == 1


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5, 5)
    game = GameOfLife(grid)

    grid.initialize_from_input(["", "00100", "00100", "00100"])
    assert game.population == 3

    # Step once - should become horizontal
    game.step()
    assert game.population == 3
    assert grid.get_cell(2, 1) is True
    assert grid.get_cell(2, 2) is True
    assert grid.get_cell(2, 3) is True

    # Step again - should return to vertical
    game.step()
    assert game.population == 3
    assert grid.get_cell(1, 2) is True
    assert grid.get_cell(2, 2) is True
    assert grid.get_cell(3, 2) is True
