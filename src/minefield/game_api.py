"""
Minefield Game API
Command/query interface for UI front ends and scripts
"""

from typing import Optional
import random

from .grid import Coordinate
from .placement import RelocationPolicy
from .session import GameSession
from .statistics import GameStatistics

# Statistics shared by every game created without an explicit context
DEFAULT_STATISTICS = GameStatistics()


def create_game(height: int, width: int, mines: int,
                rng: Optional[random.Random] = None,
                statistics: Optional[GameStatistics] = None,
                relocation_policy: RelocationPolicy = RelocationPolicy.CLEAR) -> GameSession:
    """
    Start a new game

    Mines are clamped to height * width.

    Raises:
        InvalidConfiguration: If height or width is non-positive or mines is negative
    """
    if statistics is None:
        statistics = DEFAULT_STATISTICS
    return GameSession.create(height, width, mines, statistics,
                              rng=rng, relocation_policy=relocation_policy)


def left_click(session: GameSession, row: int, col: int):
    session.left_click(row, col)


def right_click(session: GameSession, row: int, col: int):
    session.right_click(row, col)


def query_cell(session: GameSession, row: int, col: int) -> str:
    return session.query_cell(row, col)


def query_board(session: GameSession) -> str:
    return session.query_board()


def is_running(session: GameSession) -> bool:
    return session.is_running()


def is_won(session: GameSession) -> bool:
    return session.is_won()


def is_lost(session: GameSession) -> bool:
    return session.is_lost()


def last_loss_coordinate(session: GameSession) -> Optional[Coordinate]:
    return session.last_loss_coordinate()


def cumulative_win_ratio(statistics: Optional[GameStatistics] = None) -> Optional[float]:
    """Victories over finished games, None when no game has finished"""
    if statistics is None:
        statistics = DEFAULT_STATISTICS
    return statistics.win_ratio()

