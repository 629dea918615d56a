"""Tests for the Pattern and PatternLibrary classes."""

import pytest
from lifegrid.core.grid import Grid, InvalidCoordinate
from lifegrid.core.patterns import REFERENCE_SEED, Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"
        assert repr(pattern) == "Pattern('Blinker', 3 cells)"

    def test_apply_to_grid(self):
        """Test applying pattern to grid."""
        grid = Grid(10, 10)
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])

        pattern.apply_to_grid(grid)

        assert list(grid.live_cells()) == [(0, 0), (1, 0), (2, 0)]

    def test_apply_to_grid_with_offset(self):
        """Test applying pattern with offset."""
        grid = Grid(10, 10)
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])

        pattern.apply_to_grid(grid, offset_x=5, offset_y=3)

        assert list(grid.live_cells()) == [(5, 3), (6, 3), (7, 3)]

    def test_apply_to_grid_keeps_existing_cells(self):
        grid = Grid(5, 5)
        grid.seed(4, 4)

        Pattern("Dot", [(0, 0)]).apply_to_grid(grid)

        assert grid.population == 2

    def test_apply_to_grid_out_of_bounds(self):
        """A pattern that does not fit raises and seeds nothing."""
        grid = Grid(3, 3)
        pattern = Pattern("Test", [(0, 0), (1, 0), (2, 0), (3, 0)])

        with pytest.raises(InvalidCoordinate):
            pattern.apply_to_grid(grid)

        assert grid.is_over()

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)
        assert Pattern("Single", [(5, 3)]).get_bounding_box() == (5, 3, 5, 3)
        assert Pattern("Multi", [(1, 2), (4, 1), (3, 5)]).get_bounding_box() == (1, 1, 4, 5)

    def test_get_size(self):
        assert Pattern("Blinker", [(0, 1), (1, 1), (2, 1)]).get_size() == (3, 1)
        assert Pattern("Single", [(7, 7)]).get_size() == (1, 1)

    def test_normalize(self):
        pattern = Pattern("Offset", [(5, 3), (6, 3), (5, 4)], "shifted")
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 0), (0, 1)]
        assert normalized.name == "Offset"
        assert normalized.description == "shifted"
        assert pattern.cells == [(5, 3), (6, 3), (5, 4)]

        assert Pattern("Empty", []).normalize().cells == []

    def test_from_grid(self):
        grid = Grid.from_cells(5, 5, [(3, 1), (1, 2)])
        pattern = Pattern.from_grid(grid, "Captured", "from a grid")

        assert pattern.name == "Captured"
        assert pattern.cells == [(3, 1), (1, 2)]
        assert pattern.description == "from a grid"


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        library = PatternLibrary()
        patterns = library.list_patterns()

        for name in ["Reference", "Block", "Blinker", "Glider", "R-pentomino"]:
            assert name in patterns

    def test_reference_pattern(self):
        pattern = PatternLibrary().get_pattern("Reference")

        assert pattern.cells == REFERENCE_SEED
        assert len(pattern.cells) == 10
        assert len(set(pattern.cells)) == 10

        grid = Grid(20, 20)
        pattern.apply_to_grid(grid)
        assert grid.population == 10

    def test_get_missing_pattern(self):
        assert PatternLibrary().get_pattern("Nonexistent") is None

    def test_add_pattern(self):
        library = PatternLibrary()
        library.add_pattern(Pattern("Custom Dot", [(0, 0)]))

        assert library.get_pattern("Custom Dot").cells == [(0, 0)]
        assert library.get_patterns_by_category()["Custom"] == ["Custom Dot"]

    def test_categories(self):
        categories = PatternLibrary().get_patterns_by_category()

        assert categories["Demo"] == ["Reference"]
        assert "Block" in categories["Still Life"]
        assert "Blinker" in categories["Oscillators"]
        assert "Glider" in categories["Spaceships"]
        assert "Custom" not in categories

    def test_block_is_still_life(self):
        grid = Grid(6, 6)
        PatternLibrary().get_pattern("Block").apply_to_grid(grid, 2, 2)
        assert grid.next_gen() == grid

    def test_glider_moves_diagonally(self):
        """After four generations a glider reappears shifted by (1, 1)."""
        library = PatternLibrary()
        glider = library.get_pattern("Glider")

        grid = Grid(10, 10)
        glider.apply_to_grid(grid, 1, 1)

        expected = Grid(10, 10)
        glider.apply_to_grid(expected, 2, 2)

        for _ in range(4):
            grid = grid.next_gen()

        assert grid == expected
