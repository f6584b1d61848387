"""
Game Session
Runs one game from the first click to a win or a loss
"""

from enum import Enum
import random
from typing import Optional

from .board import Minefield
from .display import render_board, render_cell
from .grid import Coordinate
from .placement import RelocationPolicy, relocate_mine
from .reveal import open_cell
from .statistics import GameStatistics


class GameState(Enum):
    """Enumeration for different game states"""
    RUNNING = "running"
    WON = "won"
    LOST = "lost"


class GameSession:
    """
    Applies left/right clicks to a minefield and tracks the game outcome

    The first left click of a game never lands on a mine: a mine under it
    is relocated before the cell is opened. Finished games are reported
    once to the statistics context.
    """

    def __init__(self, field: Minefield, statistics: GameStatistics,
                 relocation_policy: RelocationPolicy = RelocationPolicy.CLEAR):
        self.field = field
        self.statistics = statistics
        self.relocation_policy = relocation_policy
        self.game_state = GameState.RUNNING
        self.first_click = True
        self.loss_coordinate: Optional[Coordinate] = None

    @classmethod
    def create(cls, height: int, width: int, mines: int,
               statistics: GameStatistics,
               rng: Optional[random.Random] = None,
               relocation_policy: RelocationPolicy = RelocationPolicy.CLEAR) -> 'GameSession':
        """Build a fresh minefield and a session around it"""
        field = Minefield(height, width, mines, rng=rng)
        return cls(field, statistics, relocation_policy)

    def left_click(self, row: int, col: int):
        """Open a cell, handling first-click safety, losses and wins"""
        if not self.is_running() or not self.field.in_bounds(row, col):
            return

        # Flagged cells can't be opened
        if self.field.is_flagged(row, col):
            return

        if self.first_click and self.field.has_mine(row, col):
            relocate_mine(self.field, row, col, self.field.rng, self.relocation_policy)
            self.first_click = False

        # Only a saturated board under the literal policy can still hold a mine here
        if self.field.has_mine(row, col):
            self.field.set_opened(row, col)
            self.loss_coordinate = (row, col)
            self._end_game(won=False)
            return

        open_cell(self.field, row, col)
        self.first_click = False

        if self.field.is_done():
            self._end_game(won=True)

    def right_click(self, row: int, col: int):
        """Toggle the flag on a cell that is not open yet"""
        if not self.is_running() or not self.field.in_bounds(row, col):
            return
        if not self.field.is_opened(row, col):
            self.field.toggle_flag(row, col)

    def _end_game(self, won: bool):
        """Switch to the terminal state, reveal the field and count the game"""
        self.game_state = GameState.WON if won else GameState.LOST
        self.field.set_show_all(True)
        self.statistics.record_game(won)

    def is_running(self) -> bool:
        return self.game_state == GameState.RUNNING

    def is_won(self) -> bool:
        return self.game_state == GameState.WON

    def is_lost(self) -> bool:
        return self.game_state == GameState.LOST

    def last_loss_coordinate(self) -> Optional[Coordinate]:
        """Coordinate of the mine that ended the game, None unless lost"""
        return self.loss_coordinate if self.is_lost() else None

    def is_done(self) -> bool:
        return self.field.is_done()

    def remaining_mines(self) -> int:
        """Mines left to flag (never negative)"""
        return max(0, self.field.mines_placed() - self.field.flags_used())

    def query_cell(self, row: int, col: int) -> str:
        return render_cell(self.field, row, col)

    def query_board(self) -> str:
        return render_board(self.field)
