"""Tests for the Cell class."""

from lifegrid.core.cell import Cell, LIVE_GLYPH, DEAD_GLYPH


class TestCell:
    """Test cases for the Cell class."""

    def test_default_dead(self):
        """Test cells start dead."""
        cell = Cell()
        assert cell.is_alive() is False
        assert cell.alive is False

    def test_set_alive(self):
        """Test toggling cell state."""
        cell = Cell()
        cell.set_alive(True)
        assert cell.is_alive()

        cell.set_alive(False)
        assert not cell.is_alive()

    def test_glyph(self):
        """Test glyphs for live and dead cells."""
        assert Cell(True).glyph == LIVE_GLYPH
        assert Cell(False).glyph == DEAD_GLYPH
        assert str(Cell(True)) == "■"
        assert str(Cell(False)) == "□"
        assert len(LIVE_GLYPH) == 1
        assert len(DEAD_GLYPH) == 1

    def test_equality(self):
        assert Cell(True) == Cell(True)
        assert Cell(True) != Cell(False)
        assert Cell(False) != "dead"
