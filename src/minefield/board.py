"""
Minefield - Core Board State
Holds the per-cell mine and open/flag state of a rectangular minefield
"""

from enum import Enum
import random
from typing import List, Optional

from .display import render_board
from .errors import InvalidConfiguration
from .grid import in_bounds, neighbors
from .placement import place_mines


class CellState(Enum):
    """Enumeration for cell states"""
    HIDDEN = "hidden"
    OPENED = "opened"
    FLAGGED = "flagged"


class Cell:
    """Represents a single cell on the minefield"""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.is_mine = False
        self.state = CellState.HIDDEN

    def open(self) -> bool:
        """Open this cell, returns False if it was already open"""
        if self.state == CellState.OPENED:
            return False
        self.state = CellState.OPENED
        return True

    def toggle_flag(self):
        """Toggle flag state on this cell"""
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.HIDDEN

    def is_opened(self) -> bool:
        """Check if cell is opened"""
        return self.state == CellState.OPENED

    def is_flagged(self) -> bool:
        """Check if cell is flagged"""
        return self.state == CellState.FLAGGED

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, mine={self.is_mine}, state={self.state.value})"


class Minefield:
    """
    Rectangular grid of cells with a fixed number of mines

    Mines are placed at construction. The requested mine count is clamped
    to the number of cells.
    """

    def __init__(self, height: int, width: int, mines: int,
                 rng: Optional[random.Random] = None, place: bool = True):
        """
        Build a minefield and (by default) place its mines

        Args:
            height: Number of rows, must be > 0
            width: Number of columns, must be > 0
            mines: Requested number of mines, must be >= 0
            rng: Random source for placement and relocation
            place: If False, leave the field empty so mines can be added by hand

        Raises:
            InvalidConfiguration: If a dimension is non-positive or mines is negative
        """
        if height <= 0 or width <= 0 or mines < 0:
            raise InvalidConfiguration(height, width, mines)

        self.height = height
        self.width = width
        self.mine_count = min(mines, height * width)
        self.rng = rng if rng is not None else random.Random()
        self.show_all = False
        self.cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(width)] for row in range(height)
        ]

        if place:
            place_mines(self, self.mine_count, self.rng)

    @property
    def size(self) -> int:
        """Total number of cells"""
        return self.height * self.width

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a coordinate is on this field"""
        return in_bounds(row, col, self.height, self.width)

    def has_mine(self, row: int, col: int) -> bool:
        return self.cells[row][col].is_mine

    def is_opened(self, row: int, col: int) -> bool:
        return self.cells[row][col].is_opened()

    def is_flagged(self, row: int, col: int) -> bool:
        return self.cells[row][col].is_flagged()

    def add_mine(self, row: int, col: int) -> bool:
        """Place a mine, returns False if the cell already holds one"""
        cell = self.cells[row][col]
        if cell.is_mine:
            return False
        cell.is_mine = True
        return True

    def remove_mine(self, row: int, col: int):
        """Clear the mine of a cell (no-op if there is none)"""
        self.cells[row][col].is_mine = False

    def set_opened(self, row: int, col: int) -> bool:
        """Mark a cell opened, returns False if it already was"""
        return self.cells[row][col].open()

    def toggle_flag(self, row: int, col: int):
        """Flag a hidden cell or unflag a flagged one"""
        self.cells[row][col].toggle_flag()

    def count_mined_neighbors(self, row: int, col: int) -> int:
        """Count mines among the surrounding cells, the cell itself excluded"""
        return sum(
            1 for nr, nc in neighbors(row, col, self.height, self.width)
            if self.cells[nr][nc].is_mine
        )

    def is_done(self) -> bool:
        """Check if every mine-free cell has been opened"""
        for row in self.cells:
            for cell in row:
                if not cell.is_mine and not cell.is_opened():
                    return False
        return True

    def mines_placed(self) -> int:
        """Number of mined cells currently on the field"""
        return sum(1 for row in self.cells for cell in row if cell.is_mine)

    def flags_used(self) -> int:
        """Number of flagged cells"""
        return sum(1 for row in self.cells for cell in row if cell.is_flagged())

    def set_show_all(self, show_all: bool):
        """Switch reveal-all visibility mode on or off"""
        self.show_all = show_all

    def __str__(self) -> str:
        return render_board(self)
