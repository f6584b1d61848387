"""
Unit tests for the Minefield class
Tests construction, mine clamping, cell queries and neighbor counting
"""

import random

import pytest
from minefield.board import Minefield, Cell, CellState
from minefield.errors import InvalidConfiguration, MinefieldError


def count_mines(field):
    return sum(
        1 for row in range(field.height) for col in range(field.width)
        if field.has_mine(row, col)
    )


class TestMinefieldInitialization:
    """Test cases for Minefield construction"""

    def test_custom_initialization(self):
        """Test field stores its dimensions and mine count"""
        field = Minefield(16, 30, 99, rng=random.Random(1))

        assert field.height == 16
        assert field.width == 30
        assert field.mine_count == 99
        assert field.size == 480
        assert field.show_all is False

    def test_board_creation(self):
        """Test that field creates correct number of cells"""
        field = Minefield(5, 7, 3, place=False)

        assert len(field.cells) == 5
        assert len(field.cells[0]) == 7

        for row in range(5):
            for col in range(7):
                cell = field.cells[row][col]
                assert isinstance(cell, Cell)
                assert cell.row == row
                assert cell.col == col
                assert cell.is_mine is False
                assert cell.state == CellState.HIDDEN

    @pytest.mark.parametrize("height,width,mines", [
        (9, 9, 10),
        (16, 16, 40),
        (16, 30, 99),
        (3, 3, 0),
        (1, 1, 1),
    ])
    def test_exact_number_of_mines_placed(self, height, width, mines):
        """Test that placement fills exactly the requested number of cells"""
        field = Minefield(height, width, mines, rng=random.Random(7))

        assert count_mines(field) == mines
        assert field.mines_placed() == mines

    @pytest.mark.parametrize("height,width,mines", [
        (2, 3, 10),
        (1, 1, 5),
        (4, 4, 17),
    ])
    def test_too_many_mines_are_clamped(self, height, width, mines):
        """Test that more mines than cells fills every cell exactly once"""
        field = Minefield(height, width, mines, rng=random.Random(3))

        assert field.mine_count == height * width
        assert count_mines(field) == height * width

    def test_place_false_leaves_field_empty(self):
        """Test that an unplaced field keeps the clamped count but has no mines"""
        field = Minefield(3, 3, 4, place=False)

        assert field.mine_count == 4
        assert count_mines(field) == 0

    def test_same_seed_same_layout(self):
        """Test placement is reproducible with a seeded random source"""
        first = Minefield(9, 9, 10, rng=random.Random(42))
        second = Minefield(9, 9, 10, rng=random.Random(42))

        for row in range(9):
            for col in range(9):
                assert first.has_mine(row, col) == second.has_mine(row, col)

    @pytest.mark.parametrize("height,width,mines", [
        (0, 3, 1),
        (3, 0, 1),
        (-2, 3, 0),
        (3, 3, -1),
    ])
    def test_invalid_configuration_rejected(self, height, width, mines):
        """Test that impossible configurations raise InvalidConfiguration"""
        with pytest.raises(InvalidConfiguration) as exc_info:
            Minefield(height, width, mines)

        assert exc_info.value.height == height
        assert exc_info.value.width == width
        assert exc_info.value.mines == mines

    def test_invalid_configuration_is_value_error(self):
        """Test the error can be caught as ValueError or MinefieldError"""
        with pytest.raises(ValueError):
            Minefield(0, 0, 0)
        with pytest.raises(MinefieldError):
            Minefield(1, 1, -5)


class TestMinefieldCellAccess:
    """Test cases for cell access and state queries"""

    @pytest.fixture
    def field(self):
        """Create an empty 3x3 field"""
        return Minefield(3, 3, 0)

    def test_cells_know_their_position(self, field):
        """Test each cell in the array records its own coordinates"""
        cell = field.cells[1][2]
        assert cell.row == 1
        assert cell.col == 2

    def test_add_mine(self, field):
        """Test adding a mine reports success only once"""
        assert field.add_mine(1, 1) is True
        assert field.has_mine(1, 1)
        assert field.add_mine(1, 1) is False
        assert field.mines_placed() == 1

    def test_remove_mine(self, field):
        """Test removing mines, including from a mine-free cell"""
        field.add_mine(0, 0)
        field.remove_mine(0, 0)
        field.remove_mine(2, 2)

        assert not field.has_mine(0, 0)
        assert field.mines_placed() == 0

    def test_set_opened(self, field):
        """Test opening reports False when already opened"""
        assert field.set_opened(2, 1) is True
        assert field.is_opened(2, 1)
        assert field.set_opened(2, 1) is False

    def test_toggle_flag_is_its_own_inverse(self, field):
        """Test flagging twice restores the original state"""
        for row in range(3):
            for col in range(3):
                before = field.is_flagged(row, col)
                field.toggle_flag(row, col)
                assert field.is_flagged(row, col) != before
                field.toggle_flag(row, col)
                assert field.is_flagged(row, col) == before

    def test_flags_used(self, field):
        """Test flag counter"""
        field.toggle_flag(0, 0)
        field.toggle_flag(0, 1)
        assert field.flags_used() == 2

        field.toggle_flag(0, 0)
        assert field.flags_used() == 1


class TestNeighborCounting:
    """Test cases for mined neighbor counts"""

    def test_adjacent_mine_calculation(self):
        """Test that adjacent mine counts are calculated correctly"""
        field = Minefield(3, 3, 0)
        field.add_mine(0, 0)
        field.add_mine(2, 2)

        assert field.count_mined_neighbors(0, 1) == 1
        assert field.count_mined_neighbors(1, 0) == 1
        assert field.count_mined_neighbors(1, 1) == 2
        assert field.count_mined_neighbors(1, 2) == 1
        assert field.count_mined_neighbors(2, 1) == 1
        assert field.count_mined_neighbors(0, 2) == 0

    def test_origin_not_counted(self):
        """Test a mined cell doesn't count itself"""
        field = Minefield(3, 3, 0)
        field.add_mine(1, 1)

        assert field.count_mined_neighbors(1, 1) == 0

    def test_fully_surrounded(self):
        """Test the maximum count of 8"""
        field = Minefield(3, 3, 9, rng=random.Random(0))

        assert field.count_mined_neighbors(1, 1) == 8
        assert field.count_mined_neighbors(0, 0) == 3
        assert field.count_mined_neighbors(0, 1) == 5


class TestDoneCondition:
    """Test cases for is_done"""

    def test_done_flips_once_when_last_safe_cell_opens(self):
        """Test is_done turns true exactly when the last safe cell opens"""
        field = Minefield(2, 2, 0)
        field.add_mine(0, 0)

        assert field.is_done() is False
        field.set_opened(0, 1)
        assert field.is_done() is False
        field.set_opened(1, 0)
        assert field.is_done() is False
        field.set_opened(1, 1)
        assert field.is_done() is True

    def test_opened_mine_does_not_count(self):
        """Test an opened mine neither completes nor blocks the field"""
        field = Minefield(1, 2, 0)
        field.add_mine(0, 0)
        field.set_opened(0, 0)

        assert field.is_done() is False
        field.set_opened(0, 1)
        assert field.is_done() is True

    def test_all_mines_is_done(self):
        """Test a saturated field has nothing left to open"""
        field = Minefield(2, 2, 4, rng=random.Random(0))

        assert field.is_done() is True

    def test_str_renders_board(self):
        """Test str() gives the rendered board"""
        field = Minefield(2, 3, 0)

        assert str(field) == "...\n...\n"
